"""
Integer ranges with closed or open bounds, and sets of ranges.

Used to express which parts of a text a deletion targets. A range bound is
either closed (the offset belongs to the range) or open (it doesn't).
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from ..errors import InvalidSpanError
from ..models.base import HasSpan

# Bound keys order cuts on the integer line: at the same offset a closed
# lower bound comes before an open one, a closed upper bound after an open one.
_Cut = Tuple[int, int]


@dataclass(frozen=True)
class Range:
    """
    Range between two offsets.

    Examples:
        >>> Range.closed(0, 1).intersects(Range.closed_open(1, 2))
        True
        >>> Range.closed_open(0, 1).intersects(Range.closed_open(1, 2))
        False
    """

    lower: int
    upper: int
    lower_closed: bool = True
    upper_closed: bool = False

    def __post_init__(self):
        if self.lower > self.upper:
            raise InvalidSpanError(self.lower, self.upper, "Invalid range!")
        if self.lower == self.upper and not (self.lower_closed or self.upper_closed):
            raise InvalidSpanError(self.lower, self.upper, "Open range can't be empty!")

    @classmethod
    def closed(cls, lower: int, upper: int) -> "Range":
        """[lower, upper]"""
        return cls(lower, upper, True, True)

    @classmethod
    def closed_open(cls, lower: int, upper: int) -> "Range":
        """[lower, upper)"""
        return cls(lower, upper, True, False)

    @classmethod
    def open_closed(cls, lower: int, upper: int) -> "Range":
        """(lower, upper]"""
        return cls(lower, upper, False, True)

    @classmethod
    def open(cls, lower: int, upper: int) -> "Range":
        """(lower, upper)"""
        return cls(lower, upper, False, False)

    @classmethod
    def of_span(cls, span: HasSpan) -> "Range":
        """Half-open range [start, end) covered by a span."""
        return cls.closed_open(span.start, span.end)

    def is_empty(self) -> bool:
        return self.lower == self.upper and not (self.lower_closed and self.upper_closed)

    def _lower_cut(self) -> _Cut:
        return (self.lower, 0 if self.lower_closed else 1)

    def _upper_cut(self) -> _Cut:
        return (self.upper, 1 if self.upper_closed else 0)

    def intersects(self, other: "Range") -> bool:
        """True if the two ranges share at least one offset."""
        lower, lower_open = max(self._lower_cut(), other._lower_cut())
        upper, upper_closed = min(self._upper_cut(), other._upper_cut())
        return lower < upper or (lower == upper and not lower_open and upper_closed)

    def is_connected(self, other: "Range") -> bool:
        """True if the union of the two ranges is a single range."""
        lower, lower_open = max(self._lower_cut(), other._lower_cut())
        upper, upper_closed = min(self._upper_cut(), other._upper_cut())
        return lower < upper or (lower == upper and (not lower_open or upper_closed))

    def span(self, other: "Range") -> "Range":
        """Smallest range enclosing both ranges."""
        lower, lower_open = min(self._lower_cut(), other._lower_cut())
        upper, upper_closed = max(self._upper_cut(), other._upper_cut())
        return Range(lower, upper, not lower_open, bool(upper_closed))

    def __str__(self) -> str:
        left = "[" if self.lower_closed else "("
        right = "]" if self.upper_closed else ")"
        return f"{left}{self.lower}..{self.upper}{right}"


class RangeSet:
    """
    Set of ranges, stored as sorted disjoint ranges.

    Connected ranges are coalesced on insertion; empty ranges are ignored.

    Examples:
        >>> [str(r) for r in RangeSet([Range.closed_open(3, 5), Range.closed(0, 3)])]
        ['[0..5)']
    """

    def __init__(self, ranges: Iterable[Range] = ()):
        self._ranges: List[Range] = []
        for range_ in ranges:
            self.add(range_)

    def add(self, range_: Range) -> None:
        if range_.is_empty():
            return

        merged = range_
        kept = []
        for existing in self._ranges:
            if existing.is_connected(merged):
                merged = merged.span(existing)
            else:
                kept.append(existing)
        kept.append(merged)
        kept.sort(key=lambda r: r._lower_cut())
        self._ranges = kept

    def intersects(self, range_: Range) -> bool:
        """True if range_ shares at least one offset with the set."""
        return any(existing.intersects(range_) for existing in self._ranges)

    def is_empty(self) -> bool:
        return not self._ranges

    def __iter__(self) -> Iterator[Range]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __repr__(self) -> str:
        return "RangeSet({" + ", ".join(str(r) for r in self._ranges) + "})"
