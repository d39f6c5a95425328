"""Sentence: span of text holding ordered, non-overlapping terms."""

from typing import Any, Iterable, Mapping, Optional, Tuple

from pydantic import Field, model_validator

from ..checks import check_span, check_spans
from .base import FrozenDict, Metadata, MetadataMixin, SemTextModel, SpanMixin, replace_metadata
from .span import Span
from .term import Term


class Sentence(SpanMixin, MetadataMixin, SemTextModel):
    """
    Immutable sentence [start, end) with its terms.

    Terms are sorted, non-overlapping and lie within the sentence bounds.
    """

    start: int
    end: int
    terms: Tuple[Term, ...] = ()
    metadata: Metadata = Field(default_factory=FrozenDict)

    @model_validator(mode="after")
    def _check_sentence(self) -> "Sentence":
        check_span(self.start, self.end, "Sentence bounds are not correct!")
        check_spans(self.terms, self.start, self.end, "Sentence terms are not correct!")
        return self

    @classmethod
    def of(
        cls,
        start: int,
        end: int,
        terms: Iterable[Term] = (),
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> "Sentence":
        return cls(start=start, end=end, terms=tuple(terms), metadata=dict(metadata or {}))

    @property
    def span(self) -> Span:
        return Span.of(self.start, self.end)

    def with_terms(self, terms: Iterable[Term]) -> "Sentence":
        """
        Return a copy with the terms replaced.

        Raises:
            SpanError: If the terms are unordered, overlapping or out of bounds
        """
        terms = tuple(terms)
        check_spans(terms, self.start, self.end, "Sentence terms are not correct!")
        return self.model_copy(update={"terms": terms})

    def with_metadata(self, namespace: str, value: Any) -> "Sentence":
        return self.model_copy(
            update={"metadata": replace_metadata(self.metadata, namespace, value)}
        )

    def _key(self) -> tuple:
        return (self.start, self.end, self.terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sentence):
            return NotImplemented
        return self._key() == other._key() and self.metadata == other.metadata

    def __hash__(self) -> int:
        return hash(self._key())
