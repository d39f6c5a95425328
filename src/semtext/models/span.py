"""Standalone span value."""

from pydantic import model_validator

from ..checks import check_span
from .base import SemTextModel, SpanMixin


class Span(SpanMixin, SemTextModel):
    """
    Half-open character range [start, end) of a text.

    Examples:
        >>> Span.of(0, 5).length
        5
        >>> Span.of(0, 5).overlaps(Span.of(5, 7))
        False
    """

    start: int
    end: int

    @model_validator(mode="after")
    def _check_bounds(self) -> "Span":
        check_span(self.start, self.end, "Invalid span!")
        return self

    @classmethod
    def of(cls, start: int, end: int) -> "Span":
        return cls(start=start, end=end)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"
