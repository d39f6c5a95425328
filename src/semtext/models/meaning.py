"""
Candidate meaning of a term.

A meaning identifies an entry of some knowledge base (an entity or a concept)
together with the probability that the term refers to it.
"""

from typing import Any, Mapping, Optional

from pydantic import Field, field_validator

from ..checks import check_positive_score
from ..enums import MeaningKind
from ..localized import LocalizedDict
from .base import FrozenDict, Localized, Metadata, MetadataMixin, SemTextModel, replace_metadata


class Meaning(MetadataMixin, SemTextModel):
    """
    Immutable candidate meaning.

    Two meanings are equal when id and kind are equal; probability, names,
    descriptions and metadata take no part in equality or hashing. Ordering
    compares probabilities only.

    Attributes:
        id: Knowledge base identifier ("" when unknown)
        kind: Whether the meaning is an entity, a concept or unknown
        probability: Raw or normalized probability, >= -TOLERANCE
        name: Localized names, read-only
        description: Localized descriptions, read-only
        metadata: Arbitrary payloads keyed by namespace, read-only
    """

    id: str = ""
    kind: MeaningKind = MeaningKind.UNKNOWN
    probability: float = 0.0
    name: Localized = Field(default_factory=FrozenDict)
    description: Localized = Field(default_factory=FrozenDict)
    metadata: Metadata = Field(default_factory=FrozenDict)

    @field_validator("probability")
    @classmethod
    def _check_probability(cls, value: float) -> float:
        return check_positive_score(value, "Invalid probability for meaning!")

    @field_validator("id", mode="before")
    @classmethod
    def _none_id_is_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    # ========================================================================
    # FACTORIES
    # ========================================================================

    @classmethod
    def of(
        cls,
        id: str,
        kind: MeaningKind,
        probability: float,
        name: Optional[LocalizedDict] = None,
        description: Optional[LocalizedDict] = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> "Meaning":
        """
        Create a meaning.

        Examples:
            >>> Meaning.of("Q90", MeaningKind.ENTITY, 0.7, name={"it": ["Parigi"]}).id
            'Q90'
        """
        return cls(
            id=id,
            kind=kind,
            probability=probability,
            name=dict(name or {}),
            description=dict(description or {}),
            metadata=dict(metadata or {}),
        )

    # ========================================================================
    # COPIES
    # ========================================================================

    def with_probability(self, probability: float) -> "Meaning":
        """Return a copy with a different probability."""
        check_positive_score(probability, "Invalid probability for meaning!")
        return self.model_copy(update={"probability": probability})

    def with_metadata(self, namespace: str, value: Any) -> "Meaning":
        """Return a copy with value stored under namespace."""
        return self.model_copy(
            update={"metadata": replace_metadata(self.metadata, namespace, value)}
        )

    # ========================================================================
    # EQUALITY AND ORDERING
    # ========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Meaning):
            return NotImplemented
        return self.id == other.id and self.kind == other.kind

    def __hash__(self) -> int:
        return hash((self.id, self.kind))

    def __lt__(self, other: "Meaning") -> bool:
        if not isinstance(other, Meaning):
            return NotImplemented
        return self.probability < other.probability

    def __gt__(self, other: "Meaning") -> bool:
        if not isinstance(other, Meaning):
            return NotImplemented
        return self.probability > other.probability
