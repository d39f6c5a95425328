"""
Annotated text: the root of the annotation model.

An annotated text holds the plain text, its language and the sentences
partitioning it, each sentence holding the annotated terms.
"""

import re
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Tuple, Union

from pydantic import Field, field_validator, model_validator

from ..checks import check_spans
from ..constants import ROOT_LANGUAGE
from ..enums import MeaningStatus
from ..localized import LocalizedDict, any_string
from .base import FrozenDict, HasSpan, Metadata, MetadataMixin, SemTextModel, replace_metadata
from .meaning import Meaning
from .sentence import Sentence
from .term import Term

if TYPE_CHECKING:
    from ..editing.ranges import Range
    from .terms_view import TermsView


class AnnotatedText(MetadataMixin, SemTextModel):
    """
    Immutable text with sentences and semantic annotations.

    Sentences are sorted, non-overlapping and lie within [0, len(text)].

    Attributes:
        text: The plain text
        language: Language tag of the text, "" when unknown (wire name: locale)
        sentences: Sentences of the text
        metadata: Arbitrary payloads keyed by namespace

    Examples:
        >>> at = AnnotatedText.of_terms("Hello world", [Term.of(6, 11)])
        >>> at.text_of(at.terms()[0])
        'world'
    """

    text: str = ""
    language: str = Field(default=ROOT_LANGUAGE, alias="locale")
    sentences: Tuple[Sentence, ...] = ()
    metadata: Metadata = Field(default_factory=FrozenDict)

    @field_validator("language", mode="before")
    @classmethod
    def _none_is_root_language(cls, value: Optional[str]) -> str:
        return ROOT_LANGUAGE if value is None else value

    @field_validator("text", mode="before")
    @classmethod
    def _none_is_empty_text(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    @model_validator(mode="after")
    def _check_sentences(self) -> "AnnotatedText":
        check_spans(self.sentences, 0, len(self.text), "Invalid sentences found!")
        return self

    # ========================================================================
    # FACTORIES
    # ========================================================================

    @classmethod
    def of(
        cls,
        text: str = "",
        language: Optional[str] = ROOT_LANGUAGE,
        sentences: Iterable[Sentence] = (),
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> "AnnotatedText":
        """Create an annotated text from its sentences (none by default)."""
        return cls(
            text=text,
            language=language,
            sentences=tuple(sentences),
            metadata=dict(metadata or {}),
        )

    @classmethod
    def of_terms(
        cls,
        text: str,
        terms: Iterable[Term],
        language: Optional[str] = ROOT_LANGUAGE,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> "AnnotatedText":
        """Create an annotated text with a single sentence spanning the whole text."""
        sentence = Sentence.of(0, len(text), terms)
        return cls.of(text, language, [sentence], metadata)

    @classmethod
    def of_term(
        cls,
        text: str,
        meaning_status: MeaningStatus = MeaningStatus.TO_DISAMBIGUATE,
        selected_meaning: Optional[Meaning] = None,
        meanings: Iterable[Meaning] = (),
        language: Optional[str] = ROOT_LANGUAGE,
    ) -> "AnnotatedText":
        """
        Create an annotated text where a single term spans the whole text.

        Examples:
            >>> AnnotatedText.of_term("Paris").terms()[0].end
            5
        """
        term = Term.of(0, len(text), meaning_status, selected_meaning, meanings)
        return cls.of_terms(text, [term], language)

    @classmethod
    def from_localized_dict(
        cls, localized: LocalizedDict, languages: Iterable[str] = ()
    ) -> "AnnotatedText":
        """
        Create a bare annotated text from the best string of a localized dictionary.

        Preferred languages are tried first, then any language. When no string
        is found the result is the empty text in the root language.
        """
        language, text = any_string(localized, languages)
        return cls.of(text, language)

    # ========================================================================
    # QUERIES
    # ========================================================================

    def text_of(self, span: HasSpan) -> str:
        """Return the substring covered by span."""
        return self.text[span.start : span.end]

    def terms(self) -> "TermsView":
        """Return a flat, read-only view over the terms of all sentences."""
        from .terms_view import TermsView

        return TermsView(self)

    def as_localized_dict(self) -> LocalizedDict:
        return {self.language: [self.text]}

    # ========================================================================
    # COPIES
    # ========================================================================

    def with_text(self, text: str) -> "AnnotatedText":
        """
        Return a copy with the text replaced, keeping the annotations.

        Raises:
            OutOfBoundsSpanError: If the sentences exceed the new text
        """
        check_spans(self.sentences, 0, len(text), "Sentences exceed the new text!")
        return self.model_copy(update={"text": text})

    def with_language(self, language: Optional[str]) -> "AnnotatedText":
        return self.model_copy(
            update={"language": ROOT_LANGUAGE if language is None else language}
        )

    def with_sentences(self, sentences: Iterable[Sentence]) -> "AnnotatedText":
        """
        Return a copy with the sentences replaced.

        Raises:
            SpanError: If sentences are unordered, overlapping or out of bounds
        """
        sentences = tuple(sentences)
        check_spans(sentences, 0, len(self.text), "Invalid sentences found!")
        return self.model_copy(update={"sentences": sentences})

    def with_terms(self, terms: Iterable[Term]) -> "AnnotatedText":
        """Return a copy with a single sentence spanning the text and holding terms."""
        return self.with_sentences([Sentence.of(0, len(self.text), terms)])

    def with_metadata(self, namespace: str, value: Any) -> "AnnotatedText":
        return self.model_copy(
            update={"metadata": replace_metadata(self.metadata, namespace, value)}
        )

    # ========================================================================
    # EDITING
    # ========================================================================

    def merge(self, terms: Iterable[Term]) -> "AnnotatedText":
        """Merge new terms into this text; see semtext.editing.merge_terms."""
        from ..editing.merger import merge_terms

        return merge_terms(self, terms)

    def delete_terms(self, ranges: Iterable[Union["Range", HasSpan]]) -> "AnnotatedText":
        """Delete terms intersecting any of ranges; see semtext.editing.delete_terms."""
        from ..editing.deleter import delete_terms

        return delete_terms(self, ranges)

    def delete_terms_matching(self, pattern: Union[str, re.Pattern]) -> "AnnotatedText":
        """Delete terms intersecting any match of pattern in the text."""
        from ..editing.deleter import delete_terms_matching

        return delete_terms_matching(self, pattern)

    # ========================================================================
    # EQUALITY
    # ========================================================================

    def _key(self) -> tuple:
        return (self.text, self.language, self.sentences)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnnotatedText):
            return NotImplemented
        return self._key() == other._key() and self.metadata == other.metadata

    def __hash__(self) -> int:
        return hash(self._key())
