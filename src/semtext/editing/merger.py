"""
Merge of new terms into an annotated text.

Used when a new annotation pass (e.g. a fresh run of an entity linker) must
be combined with the terms already present in a text:

- an old term with exactly the same span of a new term is merged into it
- an old term overlapping a new term is dropped
- any other old term is kept
- every new term lying within a sentence is inserted

Sentence bounds, text and metadata are never changed.
"""

from typing import Iterable, List, Sequence, Tuple

import structlog

from ..checks import check_spans
from ..models.annotated_text import AnnotatedText
from ..models.sentence import Sentence
from ..models.term import Term

logger = structlog.get_logger(__name__)


def merge_terms(annotated_text: AnnotatedText, new_terms: Iterable[Term]) -> AnnotatedText:
    """
    Merge new terms into an annotated text.

    When spans coincide, the merged term keeps the status, selected meaning
    and metadata of the new term, and its meanings are the new ones merged
    with the old ones (new meanings win on equal id and kind).

    New terms not lying entirely within a single sentence are discarded and
    reported with a warning log.

    Args:
        annotated_text: Text holding the old terms
        new_terms: Sorted, non-overlapping terms within the text bounds

    Returns:
        New annotated text with the merged terms

    Raises:
        SpanError: If new terms are unordered, overlapping or out of the text

    Examples:
        >>> at = AnnotatedText.of_terms("abc", [Term.of(0, 1), Term.of(1, 3)])
        >>> merged = merge_terms(at, [Term.of(2, 3)])
        >>> [(t.start, t.end) for t in merged.terms()]
        [(0, 1), (2, 3)]
    """
    new_terms = list(new_terms)
    check_spans(new_terms, 0, len(annotated_text.text), "Invalid terms to merge!")

    groups, dropped = _group_by_sentence(annotated_text.sentences, new_terms)

    if dropped:
        logger.warning(
            "terms_outside_sentences_dropped",
            dropped_count=len(dropped),
            spans=[(t.start, t.end) for t in dropped],
        )

    new_sentences = [
        sentence.with_terms(_merge_sentence_terms(sentence.terms, group))
        for sentence, group in zip(annotated_text.sentences, groups)
    ]

    logger.debug(
        "terms_merged",
        new_terms=len(new_terms),
        old_terms=sum(len(s.terms) for s in annotated_text.sentences),
        result_terms=sum(len(s.terms) for s in new_sentences),
    )

    return annotated_text.with_sentences(new_sentences)


def _group_by_sentence(
    sentences: Sequence[Sentence], new_terms: Sequence[Term]
) -> Tuple[List[List[Term]], List[Term]]:
    """
    Assign each new term to the sentence enclosing it.

    Both sequences are sorted, so a single sweep suffices. A zero-width term
    on the boundary of two sentences goes to the first one.

    Returns:
        Tuple (terms per sentence, terms enclosed by no sentence)
    """
    groups: List[List[Term]] = []
    dropped: List[Term] = []
    j = 0

    for sentence in sentences:
        group: List[Term] = []
        while j < len(new_terms):
            term = new_terms[j]
            if term.start < sentence.start:
                dropped.append(term)
            elif term.end <= sentence.end:
                group.append(term)
            elif term.start < sentence.end:
                # crosses the sentence end
                dropped.append(term)
            else:
                break
            j += 1
        groups.append(group)

    dropped.extend(new_terms[j:])
    return groups, dropped


def _merge_sentence_terms(old_terms: Sequence[Term], new_terms: Sequence[Term]) -> List[Term]:
    """Merge the sorted terms of one sentence; both lists are non-overlapping."""
    merged: List[Term] = []
    matched = set()
    j = 0

    for old in old_terms:
        while (
            j < len(new_terms)
            and new_terms[j].end <= old.start
            and not new_terms[j].same_span(old)
        ):
            j += 1

        coincident = None
        conflict = False
        k = j
        while k < len(new_terms) and new_terms[k].start <= old.end:
            candidate = new_terms[k]
            if candidate.same_span(old):
                coincident = k
                break
            if candidate.overlaps(old):
                conflict = True
                break
            k += 1

        if coincident is not None:
            new = new_terms[coincident]
            matched.add(coincident)
            merged.append(new.with_meanings([*new.meanings, *old.meanings]))
        elif not conflict:
            merged.append(old)

    merged.extend(new for i, new in enumerate(new_terms) if i not in matched)
    merged.sort(key=lambda t: (t.start, t.end))
    return merged
