"""
Invariant checks shared by the annotation model.

Every constructor of the model runs these before an object is returned, so
no instance violating span, span-set, probability or status invariants is
ever observable. Each check accepts an optional context string that is
prepended to the error message.
"""

import math
from typing import TYPE_CHECKING, Iterable, Optional

from .constants import TOLERANCE
from .enums import MeaningStatus
from .errors import (
    InvalidMeaningStatusError,
    InvalidProbabilityError,
    InvalidSpanError,
    OutOfBoundsSpanError,
    OutOfOrderSpanError,
    OverlappingSpanError,
    with_context,
)

if TYPE_CHECKING:
    from .models.base import HasSpan
    from .models.meaning import Meaning


# ============================================================================
# SPANS
# ============================================================================


def check_span(start: int, end: int, context: Optional[str] = None) -> None:
    """
    Check a single half-open span [start, end).

    Args:
        start: Start offset, must be >= 0
        end: End offset, must be >= start
        context: Message prepended to the error

    Raises:
        InvalidSpanError: On negative start or start > end
    """
    if start < 0 or start > end:
        raise InvalidSpanError(start, end, context)


def check_spans(
    spans: Iterable["HasSpan"],
    left_bound: int,
    right_bound: int,
    context: Optional[str] = None,
) -> None:
    """
    Check an ordered set of spans.

    Spans must all be valid, listed in ascending order and non-overlapping;
    a span end may coincide with the next span start. The whole set must lie
    within [left_bound, right_bound]: the last span end may coincide with
    right_bound.

    Args:
        spans: Spans in iteration order (anything with start/end)
        left_bound: Container start
        right_bound: Container end
        context: Message prepended to the error

    Raises:
        InvalidSpanError: On an invalid span or invalid container bounds
        OutOfOrderSpanError: When a span lies entirely before its predecessor
        OverlappingSpanError: When two adjacent spans cross each other
        OutOfBoundsSpanError: When the set exceeds the container bounds
    """
    check_span(left_bound, right_bound, context)

    spans = list(spans)

    for span in spans:
        check_span(span.start, span.end, context)

    prior = None
    for span in spans:
        if prior is not None and prior.end > span.start:
            if prior.start >= span.end:
                raise OutOfOrderSpanError(prior, span, context)
            raise OverlappingSpanError(prior, span, context)
        prior = span

    if spans:
        lower = spans[0].start
        upper = spans[-1].end
        if lower < left_bound or upper > right_bound:
            raise OutOfBoundsSpanError(left_bound, right_bound, lower, upper, context)


def span_equal(first: Optional["HasSpan"], second: Optional["HasSpan"]) -> bool:
    """
    Check two spans have the same bounds, whatever their type.

    Two missing spans are equal; a missing span never equals a present one.
    """
    if first is None or second is None:
        return first is None and second is None
    return first.start == second.start and first.end == second.end


# ============================================================================
# SCORES
# ============================================================================


def _check_finite(score: float, context: Optional[str]) -> None:
    if not math.isfinite(score):
        raise InvalidProbabilityError(
            score, with_context(context, f"Score must be a finite number, found instead: {score}")
        )


def check_positive_score(score: float, context: Optional[str] = None) -> float:
    """
    Check a score is finite and >= -TOLERANCE.

    Used for raw meaning probabilities, which are not yet normalized.

    Returns:
        The provided score

    Raises:
        InvalidProbabilityError: If score is NaN, infinite or < -TOLERANCE
    """
    _check_finite(score, context)
    if score < -TOLERANCE:
        raise InvalidProbabilityError(
            score,
            with_context(
                context,
                f"Score must be greater or equal than -{TOLERANCE}, found instead: {score}",
            ),
        )
    return score


def check_score(score: float, context: Optional[str] = None) -> None:
    """
    Check a normalized score lies within [-TOLERANCE, 1 + TOLERANCE].

    Raises:
        InvalidProbabilityError: If the score is NaN or exceeds the bounds
    """
    _check_finite(score, context)
    if score < -TOLERANCE or score > 1.0 + TOLERANCE:
        raise InvalidProbabilityError(
            score,
            with_context(
                context,
                f"Score {score} exceeds bounds [{-TOLERANCE}, {1.0 + TOLERANCE}]",
            ),
        )


def check_meaning(meaning: "Meaning", context: Optional[str] = None) -> None:
    """
    Check a meaning carries a normalized probability.

    Raises:
        InvalidProbabilityError: If the probability is not within [0, 1] (with tolerance)
    """
    check_score(meaning.probability, with_context(context, "Invalid meaning probability!"))


# ============================================================================
# MEANING STATUS
# ============================================================================


def check_meaning_status(
    meaning_status: MeaningStatus,
    selected_meaning: Optional["Meaning"],
    context: Optional[str] = None,
) -> None:
    """
    Check the pair meaning status / selected meaning is valid.

    SELECTED and REVIEWED need a selected meaning with a non-empty id;
    TO_DISAMBIGUATE and NOT_SURE need no selected meaning.

    Raises:
        InvalidMeaningStatusError: On an invalid pairing
    """
    status = MeaningStatus(meaning_status)

    if status.requires_selection:
        if selected_meaning is None:
            raise InvalidMeaningStatusError(
                with_context(
                    context,
                    f"Selected meaning can't be None when status is {status.value}",
                )
            )
        if not selected_meaning.id:
            raise InvalidMeaningStatusError(
                with_context(
                    context,
                    f"Selected meaning must have a valid id when status is {status.value}",
                )
            )
    elif selected_meaning is not None:
        raise InvalidMeaningStatusError(
            with_context(
                context,
                f"Selected meaning must be None when status is {status.value}. "
                f"Found instead meaning {selected_meaning!r}",
            )
        )
