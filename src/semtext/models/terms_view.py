"""
Flat read-only view over the terms of an annotated text.

Terms are stored per sentence; the view exposes them as a single sequence in
text order, without copying them.
"""

from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate
from typing import TYPE_CHECKING, Iterator, List, Optional, Union, overload

from .sentence import Sentence
from .term import Term

if TYPE_CHECKING:
    from .annotated_text import AnnotatedText


_END = object()


class TermIterator(Iterator[Term]):
    """
    Iterator over the terms of an annotated text.

    Besides iterating, it tells the current term (the last one returned) and
    the sentence holding it. Before the first term is returned the current
    sentence is the first sentence of the text, if any.
    """

    def __init__(self, annotated_text: "AnnotatedText"):
        self._sentences = iter(annotated_text.sentences)
        self._cursor: Optional[Sentence] = next(self._sentences, None)
        self._terms = iter(self._cursor.terms) if self._cursor is not None else iter(())
        self._current_sentence = self._cursor
        self._current_term: Optional[Term] = None

    def __iter__(self) -> "TermIterator":
        return self

    def __next__(self) -> Term:
        while True:
            term = next(self._terms, _END)
            if term is not _END:
                self._current_term = term
                self._current_sentence = self._cursor
                return term

            self._cursor = next(self._sentences, None)
            if self._cursor is None:
                raise StopIteration
            self._terms = iter(self._cursor.terms)

    def has_current_term(self) -> bool:
        return self._current_term is not None

    def has_current_sentence(self) -> bool:
        return self._current_sentence is not None

    def term(self) -> Term:
        """
        Return the last term returned by the iterator.

        Raises:
            LookupError: If iteration didn't return any term yet
        """
        if self._current_term is None:
            raise LookupError("There is no current term")
        return self._current_term

    def sentence(self) -> Sentence:
        """
        Return the sentence holding the current term.

        Raises:
            LookupError: If the text has no sentences
        """
        if self._current_sentence is None:
            raise LookupError("There is no current sentence")
        return self._current_sentence


class TermsView(Sequence):
    """
    Sequence of all the terms of an annotated text, in text order.

    Supports len(), iteration, membership and indexing (negative indices and
    slices included). The view is read-only like the text it reads from.

    Examples:
        >>> at = AnnotatedText.of("ab", sentences=[
        ...     Sentence.of(0, 1, [Term.of(0, 1)]),
        ...     Sentence.of(1, 2, [Term.of(1, 2)]),
        ... ])
        >>> [t.start for t in at.terms()]
        [0, 1]
    """

    def __init__(self, annotated_text: "AnnotatedText"):
        self._annotated_text = annotated_text
        # Cumulative term counts, to locate the sentence of an index
        self._offsets: List[int] = list(
            accumulate(len(sentence.terms) for sentence in annotated_text.sentences)
        )

    @property
    def annotated_text(self) -> "AnnotatedText":
        return self._annotated_text

    def __len__(self) -> int:
        return self._offsets[-1] if self._offsets else 0

    @overload
    def __getitem__(self, index: int) -> Term: ...

    @overload
    def __getitem__(self, index: slice) -> List[Term]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Term, List[Term]]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]

        size = len(self)
        if index < 0:
            index += size
        if index < 0 or index >= size:
            raise IndexError(f"Term index out of range, size is {size}")

        position = bisect_right(self._offsets, index)
        sentence = self._annotated_text.sentences[position]
        previous = self._offsets[position - 1] if position > 0 else 0
        return sentence.terms[index - previous]

    def __iter__(self) -> TermIterator:
        return TermIterator(self._annotated_text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermsView):
            return NotImplemented
        return self._annotated_text == other._annotated_text

    def __hash__(self) -> int:
        return hash(self._annotated_text)

    def __repr__(self) -> str:
        return f"TermsView({list(self)!r})"
