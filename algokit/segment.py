"""Segment summaries and pending changes shared by the segment trees."""

from __future__ import annotations

from dataclasses import dataclass

MIN_VALUE = -(2**31)
"""Maximum reported by the empty segment."""


@dataclass(frozen=True)
class SegmentChange:
    """A pending range change: assign ``to_set`` (when given), then add ``to_add``."""

    to_add: int = 0
    to_set: int | None = None

    def has_set(self) -> bool:
        return self.to_set is not None

    def has_change(self) -> bool:
        return self.has_set() or self.to_add != 0

    def combine(self, other: SegmentChange) -> SegmentChange:
        """Return the change equivalent to applying ``self`` and then ``other``."""
        if other.has_set():
            return other
        return SegmentChange(self.to_add + other.to_add, self.to_set)


@dataclass(frozen=True)
class Segment:
    """Summary of a contiguous run of values.

    ``max_diff`` is the largest absolute difference between neighbours; a
    negative ``max_diff`` marks the empty (identity) segment.
    """

    maximum: int = MIN_VALUE
    sum: int = 0
    first: int = 0
    last: int = 0
    max_diff: int = -1

    @classmethod
    def of(cls, value: int) -> Segment:
        """The segment holding the single value ``value``."""
        return cls(value, value, value, value, 0)

    def is_empty(self) -> bool:
        return self.max_diff < 0

    def apply(self, length: int, change: SegmentChange) -> Segment:
        """Return this segment of ``length`` elements after ``change``."""
        maximum, total = self.maximum, self.sum
        first, last, max_diff = self.first, self.last, self.max_diff

        if change.has_set():
            value = change.to_set
            maximum = first = last = value
            total = length * value
            max_diff = 0

        add = change.to_add
        return Segment(maximum + add, total + length * add, first + add, last + add, max_diff)

    def join(self, other: Segment) -> Segment:
        """Return the segment made of this one followed by ``other``."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self

        return Segment(
            max(self.maximum, other.maximum),
            self.sum + other.sum,
            self.first,
            other.last,
            max(self.max_diff, other.max_diff, abs(self.last - other.first)),
        )