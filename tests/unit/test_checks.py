"""
Unit tests for invariant checks (checks.py).

Tests cover:
- Single span validation
- Span sets: order, overlap, container bounds
- Score bounds with tolerance
- Meaning status / selected meaning pairing
"""

import pytest

from semtext.checks import (
    check_meaning,
    check_meaning_status,
    check_positive_score,
    check_score,
    check_span,
    check_spans,
    span_equal,
)
from semtext.enums import MeaningKind, MeaningStatus
from semtext.errors import (
    InvalidMeaningStatusError,
    InvalidProbabilityError,
    InvalidSpanError,
    OutOfBoundsSpanError,
    OutOfOrderSpanError,
    OverlappingSpanError,
    SpanError,
)
from semtext.models import Meaning, Span, Term


def spans(*bounds):
    return [Span.of(start, end) for start, end in bounds]


class TestCheckSpan:
    """Tests for check_span()."""

    @pytest.mark.unit
    def test_valid_spans(self):
        """Test valid spans pass, empty ones included."""
        check_span(0, 0)
        check_span(0, 3)
        check_span(5, 5)

    @pytest.mark.unit
    def test_negative_start(self):
        """Test negative start is rejected."""
        with pytest.raises(InvalidSpanError):
            check_span(-1, 3)

    @pytest.mark.unit
    def test_start_after_end(self):
        """Test start greater than end is rejected."""
        with pytest.raises(InvalidSpanError) as exc_info:
            check_span(3, 2)

        assert exc_info.value.start == 3
        assert exc_info.value.end == 2

    @pytest.mark.unit
    def test_context_in_message(self):
        """Test context is prepended to the error message."""
        with pytest.raises(InvalidSpanError, match="my context -- Reason"):
            check_span(3, 2, "my context")


class TestCheckSpans:
    """Tests for check_spans() span-set validation."""

    @pytest.mark.unit
    def test_empty_set(self):
        """Test an empty set is always valid within valid bounds."""
        check_spans([], 0, 0)
        check_spans([], 0, 10)

    @pytest.mark.unit
    def test_touching_spans_within_bounds(self):
        """Test touching spans that coincide with container bounds are valid."""
        check_spans(spans((0, 2), (2, 4), (4, 10)), 0, 10)

    @pytest.mark.unit
    def test_gaps_allowed(self):
        """Test spans need not cover the container."""
        check_spans(spans((1, 2), (5, 6)), 0, 10)

    @pytest.mark.unit
    def test_overlapping(self):
        """Test crossing adjacent spans raise OverlappingSpanError."""
        with pytest.raises(OverlappingSpanError) as exc_info:
            check_spans(spans((0, 3), (2, 4)), 0, 10)

        assert exc_info.value.prior == Span.of(0, 3)
        assert exc_info.value.current == Span.of(2, 4)

    @pytest.mark.unit
    def test_nested_is_overlapping(self):
        """Test a span nested in the previous one overlaps."""
        with pytest.raises(OverlappingSpanError):
            check_spans(spans((0, 5), (1, 2)), 0, 10)

    @pytest.mark.unit
    def test_out_of_order(self):
        """Test a span lying before its predecessor raises OutOfOrderSpanError."""
        with pytest.raises(OutOfOrderSpanError):
            check_spans(spans((3, 4), (0, 2)), 0, 10)

    @pytest.mark.unit
    def test_out_of_bounds_right(self):
        """Test last span ending after the container end."""
        with pytest.raises(OutOfBoundsSpanError) as exc_info:
            check_spans(spans((0, 2), (2, 11)), 0, 10)

        assert exc_info.value.upper == 11
        assert exc_info.value.right_bound == 10

    @pytest.mark.unit
    def test_out_of_bounds_left(self):
        """Test first span starting before the container start."""
        with pytest.raises(OutOfBoundsSpanError):
            check_spans(spans((1, 2)), 2, 10)

    @pytest.mark.unit
    def test_invalid_member(self):
        """Test an invalid span in the set is reported as such."""
        with pytest.raises(InvalidSpanError):
            check_spans([Term.model_construct(start=3, end=1)], 0, 10)

    @pytest.mark.unit
    def test_invalid_bounds(self):
        """Test container bounds must form a valid span."""
        with pytest.raises(InvalidSpanError):
            check_spans([], 5, 4)

    @pytest.mark.unit
    def test_errors_share_base_class(self):
        """Test every span-set failure is a SpanError."""
        for bad in (spans((0, 3), (2, 4)), spans((3, 4), (0, 2)), spans((0, 20))):
            with pytest.raises(SpanError):
                check_spans(bad, 0, 10)

    @pytest.mark.unit
    def test_zero_width_spans(self):
        """Test zero-width spans at boundaries are valid."""
        check_spans(spans((0, 0), (0, 2), (2, 2), (10, 10)), 0, 10)

    @pytest.mark.unit
    def test_accepts_iterators(self):
        """Test a one-shot iterator is fully checked."""
        check_spans(iter(spans((0, 1), (1, 2))), 0, 2)


class TestSpanEqual:
    """Tests for span_equal()."""

    @pytest.mark.unit
    def test_across_types(self):
        """Test spans of different types with equal bounds are equal."""
        assert span_equal(Span.of(1, 2), Term.of(1, 2))
        assert not span_equal(Span.of(1, 2), Term.of(1, 3))

    @pytest.mark.unit
    def test_none_handling(self):
        """Test None equals only None."""
        assert span_equal(None, None)
        assert not span_equal(None, Span.of(0, 1))
        assert not span_equal(Span.of(0, 1), None)


class TestScores:
    """Tests for probability checks."""

    @pytest.mark.unit
    def test_positive_score_returns_value(self):
        """Test valid scores are returned unchanged."""
        assert check_positive_score(3.5) == 3.5
        assert check_positive_score(-0.0005) == -0.0005

    @pytest.mark.unit
    def test_negative_score(self):
        """Test scores below -TOLERANCE are rejected."""
        with pytest.raises(InvalidProbabilityError) as exc_info:
            check_positive_score(-0.1)

        assert exc_info.value.score == -0.1

    @pytest.mark.unit
    def test_score_range(self):
        """Test normalized score bounds include the tolerance."""
        check_score(0.0)
        check_score(1.0)
        check_score(1.0005)

        with pytest.raises(InvalidProbabilityError):
            check_score(1.1)
        with pytest.raises(InvalidProbabilityError):
            check_score(-0.01)

    @pytest.mark.unit
    @pytest.mark.parametrize("score", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_scores(self, score):
        """Test NaN and infinite scores are rejected by both checks."""
        with pytest.raises(InvalidProbabilityError, match="finite"):
            check_positive_score(score)
        with pytest.raises(InvalidProbabilityError, match="finite"):
            check_score(score)

    @pytest.mark.unit
    def test_check_meaning(self):
        """Test check_meaning() bounds the meaning probability to [0, 1]."""
        check_meaning(Meaning.of("a", MeaningKind.ENTITY, 0.5))

        with pytest.raises(InvalidProbabilityError, match="Invalid meaning probability"):
            check_meaning(Meaning.of("a", MeaningKind.ENTITY, 2.0))


class TestCheckMeaningStatus:
    """Tests for check_meaning_status() pairing rules."""

    @pytest.mark.unit
    @pytest.mark.parametrize("status", [MeaningStatus.SELECTED, MeaningStatus.REVIEWED])
    def test_selection_required(self, status):
        """Test SELECTED and REVIEWED require a selected meaning with an id."""
        check_meaning_status(status, Meaning.of("a", MeaningKind.ENTITY, 1.0))

        with pytest.raises(InvalidMeaningStatusError):
            check_meaning_status(status, None)
        with pytest.raises(InvalidMeaningStatusError, match="valid id"):
            check_meaning_status(status, Meaning())

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "status", [MeaningStatus.TO_DISAMBIGUATE, MeaningStatus.NOT_SURE]
    )
    def test_selection_forbidden(self, status):
        """Test TO_DISAMBIGUATE and NOT_SURE forbid a selected meaning."""
        check_meaning_status(status, None)

        with pytest.raises(InvalidMeaningStatusError):
            check_meaning_status(status, Meaning.of("a", MeaningKind.ENTITY, 1.0))

    @pytest.mark.unit
    def test_accepts_status_strings(self):
        """Test plain status strings are accepted."""
        check_meaning_status("TO_DISAMBIGUATE", None)
