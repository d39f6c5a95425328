"""
Annotated span of text.

A term is a span of the text together with its candidate meanings, the
disambiguation status and, for SELECTED or REVIEWED terms, the chosen meaning.
"""

from typing import Any, Iterable, Mapping, Optional, Tuple

from pydantic import Field, field_validator, model_validator

from ..checks import check_meaning_status, check_span
from ..enums import MeaningStatus
from ..meanings import normalize_meanings
from .base import FrozenDict, Metadata, MetadataMixin, SemTextModel, SpanMixin, replace_metadata
from .meaning import Meaning
from .span import Span

__all__ = ["MeaningStatus", "Term"]


class Term(SpanMixin, MetadataMixin, SemTextModel):
    """
    Immutable annotated span [start, end).

    Candidate meanings are normalized on construction: deduplicated by
    (id, kind), probabilities summing to 1 and sorted most probable first.

    Attributes:
        start: Start offset in the text
        end: End offset in the text, >= start
        meaning_status: Disambiguation status
        selected_meaning: Chosen meaning, present only for SELECTED/REVIEWED
        meanings: Normalized candidate meanings
        metadata: Arbitrary payloads keyed by namespace
    """

    start: int
    end: int
    meaning_status: MeaningStatus = MeaningStatus.TO_DISAMBIGUATE
    selected_meaning: Optional[Meaning] = None
    meanings: Tuple[Meaning, ...] = ()
    metadata: Metadata = Field(default_factory=FrozenDict)

    @field_validator("meanings")
    @classmethod
    def _normalize_meanings(cls, meanings: Tuple[Meaning, ...]) -> Tuple[Meaning, ...]:
        return tuple(normalize_meanings(meanings))

    @model_validator(mode="after")
    def _check_term(self) -> "Term":
        check_span(self.start, self.end, "Invalid term span!")
        check_meaning_status(
            self.meaning_status, self.selected_meaning, "Invalid meaning status for term!"
        )
        return self

    @classmethod
    def of(
        cls,
        start: int,
        end: int,
        meaning_status: MeaningStatus = MeaningStatus.TO_DISAMBIGUATE,
        selected_meaning: Optional[Meaning] = None,
        meanings: Iterable[Meaning] = (),
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> "Term":
        """
        Create a term.

        Examples:
            >>> Term.of(0, 5).meaning_status
            <MeaningStatus.TO_DISAMBIGUATE: 'TO_DISAMBIGUATE'>
        """
        return cls(
            start=start,
            end=end,
            meaning_status=meaning_status,
            selected_meaning=selected_meaning,
            meanings=list(meanings),
            metadata=dict(metadata or {}),
        )

    @property
    def span(self) -> Span:
        return Span.of(self.start, self.end)

    # ========================================================================
    # COPIES
    # ========================================================================

    def with_meanings(self, meanings: Iterable[Meaning]) -> "Term":
        """Return a copy with the candidate meanings replaced (and normalized)."""
        return self.model_copy(update={"meanings": tuple(normalize_meanings(meanings))})

    def with_status(
        self, meaning_status: MeaningStatus, selected_meaning: Optional[Meaning] = None
    ) -> "Term":
        """
        Return a copy with a new status and selected meaning.

        Raises:
            InvalidMeaningStatusError: If the pairing is invalid
        """
        status = MeaningStatus(meaning_status)
        check_meaning_status(status, selected_meaning, "Invalid meaning status for term!")
        return self.model_copy(
            update={"meaning_status": status, "selected_meaning": selected_meaning}
        )

    def with_metadata(self, namespace: str, value: Any) -> "Term":
        """Return a copy with value stored under namespace."""
        return self.model_copy(
            update={"metadata": replace_metadata(self.metadata, namespace, value)}
        )

    # ========================================================================
    # EQUALITY
    # ========================================================================

    def _key(self) -> tuple:
        return (
            self.start,
            self.end,
            self.meaning_status,
            self.selected_meaning,
            self.meanings,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self._key() == other._key() and self.metadata == other.metadata

    def __hash__(self) -> int:
        return hash(self._key())
