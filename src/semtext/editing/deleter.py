"""
Deletion of the terms of an annotated text touching given ranges.

Only terms are removed: text, sentences and metadata are left as they are.
"""

import re
from typing import Iterable, Union

import structlog

from ..models.annotated_text import AnnotatedText
from ..models.base import HasSpan
from .ranges import Range, RangeSet

logger = structlog.get_logger(__name__)


def delete_terms(
    annotated_text: AnnotatedText, ranges: Iterable[Union[Range, HasSpan]]
) -> AnnotatedText:
    """
    Delete every term intersecting at least one of the ranges.

    A term [start, end) is deleted when it shares at least one offset with a
    range, so zero-width terms are never deleted. Spans are accepted too and
    read as half-open ranges.

    Args:
        annotated_text: Text to delete terms from
        ranges: Ranges (or spans) to clear

    Returns:
        New annotated text without the deleted terms

    Examples:
        >>> at = AnnotatedText.of_terms("abc", [Term.of(0, 1), Term.of(1, 2), Term.of(2, 3)])
        >>> cleared = delete_terms(at, [Range.closed(0, 1)])
        >>> [(t.start, t.end) for t in cleared.terms()]
        [(2, 3)]
    """
    range_set = RangeSet(r if isinstance(r, Range) else Range.of_span(r) for r in ranges)

    if range_set.is_empty():
        return annotated_text

    removed = 0
    new_sentences = []
    for sentence in annotated_text.sentences:
        kept = [t for t in sentence.terms if not range_set.intersects(Range.of_span(t))]
        removed += len(sentence.terms) - len(kept)
        new_sentences.append(sentence.with_terms(kept))

    logger.debug("terms_deleted", ranges=repr(range_set), removed_count=removed)

    return annotated_text.with_sentences(new_sentences)


def delete_terms_matching(
    annotated_text: AnnotatedText, pattern: Union[str, re.Pattern]
) -> AnnotatedText:
    """
    Delete every term intersecting a match of pattern in the text.

    Matches are read as half-open ranges [match start, match end), so an
    empty match deletes nothing.

    Args:
        annotated_text: Text to delete terms from
        pattern: Regular expression, as a string or compiled

    Returns:
        New annotated text without the deleted terms

    Raises:
        ValueError: If pattern is empty

    Examples:
        >>> at = AnnotatedText.of_terms("a b", [Term.of(0, 1), Term.of(2, 3)])
        >>> [t.start for t in delete_terms_matching(at, "b").terms()]
        [0]
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if not compiled.pattern:
        raise ValueError("Pattern to delete terms can't be empty!")

    ranges = [
        Range.closed_open(match.start(), match.end())
        for match in compiled.finditer(annotated_text.text)
    ]
    return delete_terms(annotated_text, ranges)
