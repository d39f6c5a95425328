"""
Unit tests for Span and Meaning models.

Tests cover:
- Span validation and geometry helpers
- Meaning equality over (id, kind) only
- Ordering by probability
- Probability validation
- Metadata access
"""

import pytest
from pydantic import ValidationError

from semtext.enums import MeaningKind
from semtext.errors import InvalidProbabilityError, InvalidSpanError, MetadataNotFoundError
from semtext.models import HasSpan, Meaning, Span, span_of


class TestSpan:
    """Tests for Span model."""

    @pytest.mark.unit
    def test_valid(self):
        """Test span creation and helpers."""
        span = Span.of(2, 5)

        assert span.length == 3
        assert not span.is_empty()
        assert Span.of(3, 3).is_empty()
        assert span_of(span) == (2, 5)
        assert isinstance(span, HasSpan)
        assert str(span) == "[2, 5)"

    @pytest.mark.unit
    @pytest.mark.parametrize("start,end", [(-1, 2), (3, 2)])
    def test_invalid(self, start, end):
        """Test invalid bounds are rejected."""
        with pytest.raises(InvalidSpanError):
            Span.of(start, end)

    @pytest.mark.unit
    def test_overlaps(self):
        """Test overlap: touching spans don't overlap, nested ones do."""
        assert Span.of(0, 3).overlaps(Span.of(2, 4))
        assert not Span.of(0, 2).overlaps(Span.of(2, 4))
        assert Span.of(0, 4).overlaps(Span.of(2, 2))
        assert not Span.of(0, 4).overlaps(Span.of(4, 4))

    @pytest.mark.unit
    def test_encloses(self):
        """Test enclosing with coinciding bounds."""
        assert Span.of(0, 4).encloses(Span.of(0, 4))
        assert Span.of(0, 4).encloses(Span.of(4, 4))
        assert not Span.of(0, 4).encloses(Span.of(3, 5))

    @pytest.mark.unit
    def test_immutable(self):
        """Test spans can't be modified."""
        span = Span.of(0, 1)

        with pytest.raises(ValidationError):
            span.start = 5


class TestMeaning:
    """Tests for Meaning model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test the default meaning is the unknown meaning."""
        meaning = Meaning()

        assert meaning.id == ""
        assert meaning.kind == MeaningKind.UNKNOWN
        assert meaning.probability == 0.0
        assert meaning.name == {}
        assert meaning.metadata == {}

    @pytest.mark.unit
    def test_equality_ignores_probability(self):
        """Test equality and hash depend on id and kind only."""
        low = Meaning.of("a", MeaningKind.ENTITY, 0.1, name={"en": ["A"]})
        high = Meaning.of("a", MeaningKind.ENTITY, 0.9)

        assert low == high
        assert hash(low) == hash(high)
        assert len({low, high}) == 1

    @pytest.mark.unit
    def test_inequality_on_kind(self):
        """Test meanings with same id but different kind differ."""
        assert Meaning.of("a", MeaningKind.ENTITY, 0.5) != Meaning.of("a", MeaningKind.CONCEPT, 0.5)

    @pytest.mark.unit
    def test_ordering_by_probability(self):
        """Test ordering compares probabilities."""
        low = Meaning.of("x", MeaningKind.ENTITY, 0.1)
        high = Meaning.of("y", MeaningKind.CONCEPT, 0.9)

        assert low < high
        assert high > low
        assert sorted([high, low]) == [low, high]

    @pytest.mark.unit
    def test_negative_probability(self):
        """Test probabilities below -TOLERANCE are rejected."""
        with pytest.raises(InvalidProbabilityError):
            Meaning.of("a", MeaningKind.ENTITY, -0.5)

        with pytest.raises(InvalidProbabilityError):
            Meaning.of("a", MeaningKind.ENTITY, 0.5).with_probability(-1.0)

    @pytest.mark.unit
    @pytest.mark.parametrize("probability", [float("nan"), float("inf")])
    def test_non_finite_probability(self, probability):
        """Test NaN and infinite probabilities are rejected."""
        with pytest.raises(InvalidProbabilityError):
            Meaning.of("a", MeaningKind.ENTITY, probability)

        with pytest.raises(InvalidProbabilityError):
            Meaning.of("a", MeaningKind.ENTITY, 0.5).with_probability(probability)

    @pytest.mark.unit
    def test_with_probability(self):
        """Test with_probability() returns a new meaning."""
        meaning = Meaning.of("a", MeaningKind.ENTITY, 0.5, name={"en": ["A"]})
        updated = meaning.with_probability(0.7)

        assert updated.probability == 0.7
        assert updated.name == {"en": ("A",)}
        assert meaning.probability == 0.5

    @pytest.mark.unit
    def test_kind_from_string(self):
        """Test kind accepts its string value."""
        assert Meaning(id="a", kind="CONCEPT").kind == MeaningKind.CONCEPT

    @pytest.mark.unit
    def test_metadata(self):
        """Test metadata access by namespace."""
        meaning = Meaning.of("a", MeaningKind.ENTITY, 0.5).with_metadata("source", {"kb": "wikidata"})

        assert meaning.has_metadata("source")
        assert not meaning.has_metadata("other")
        assert meaning.get_metadata("source") == {"kb": "wikidata"}

        with pytest.raises(MetadataNotFoundError) as exc_info:
            meaning.get_metadata("other")

        assert exc_info.value.namespace == "other"
        assert isinstance(exc_info.value, LookupError)

    @pytest.mark.unit
    def test_with_metadata_replaces_namespace(self):
        """Test with_metadata() replaces only the given namespace."""
        meaning = (
            Meaning()
            .with_metadata("a", 1)
            .with_metadata("b", 2)
            .with_metadata("a", 3)
        )

        assert meaning.metadata == {"b": 2, "a": 3}

    @pytest.mark.unit
    def test_metadata_is_copied(self):
        """Test later changes to the input mapping are not seen."""
        payload = {"x": 1}
        meaning = Meaning.of("a", MeaningKind.ENTITY, 0.5, metadata=payload)

        payload["y"] = 2

        assert meaning.metadata == {"x": 1}
