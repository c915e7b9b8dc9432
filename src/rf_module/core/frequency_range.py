"""
Closed frequency ranges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .hz import Hz


@dataclass(frozen=True)
class Range:
    """
    A closed range of frequencies, from ``low`` up to and including ``high``.

    The endpoints are not reordered or checked; inverted and zero-width
    ranges are allowed. ``Range(0, 0)`` is the canonical empty range.

    Attributes:
        low: Lowest frequency of the range
        high: Highest frequency of the range
    """

    low: Hz
    high: Hz

    def __post_init__(self) -> None:
        object.__setattr__(self, "low", Hz(self.low))
        object.__setattr__(self, "high", Hz(self.high))

    @classmethod
    def empty(cls) -> "Range":
        """The canonical empty range, 0 Hz to 0 Hz."""
        return cls(Hz(0), Hz(0))

    def __str__(self) -> str:
        return f"{self.low}->{self.high}"

    def __iter__(self) -> Iterator[Hz]:
        yield self.low
        yield self.high

    def __contains__(self, item: Union["Range", float]) -> bool:
        if isinstance(item, Range):
            return self.contains_range(item)
        return self.contains_frequency(item)

    def contains_frequency(self, freq: float) -> bool:
        """Check if the frequency lies inside this range, edges included."""
        return self.low <= freq <= self.high

    def add(self, freq: float) -> "Range":
        """Shift both edges of the range by the given frequency."""
        return Range(self.low + freq, self.high + freq)

    shift = add

    def contains_range(self, other: "Range") -> bool:
        """Check if ``other`` is a subset of this range."""
        return other.low >= self.low and other.high <= self.high

    def overlaps(self, other: "Range") -> bool:
        """Check if the two ranges share any frequency; touching edges count."""
        return self.low <= other.high and self.high >= other.low

    def equal(self, other: "Range") -> bool:
        """Check if both edges are exactly the same."""
        return self.low == other.low and self.high == other.high

    def intersection(self, other: "Range") -> "Range":
        """
        Get the part of this range that is also in ``other``.

        Returns the empty range when the result would be a single point or
        less, so ranges that only touch at one frequency do not intersect.
        """
        low = max(self.low, other.low)
        high = min(self.high, other.high)

        if low >= high:
            return Range.empty()

        return Range(low, high)

    def center(self) -> Hz:
        """Center of the range, for example the frequency to tune a channel."""
        return (self.high + self.low) / 2

    def width(self) -> Hz:
        """Distance between the two edges."""
        return self.high - self.low
