"""Segment tree beats: range chmax, range assign and range add with lazy propagation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

MAX_VALUE = 2**63 - 1
"""Minimum reported by the empty segment."""

MIN_VALUE = -(2**63)
"""Maximum reported by the empty segment."""


@dataclass(frozen=True)
class BeatsChange:
    """A pending range change: assign ``to_set``, then raise to ``to_max``, then add ``to_add``."""

    to_add: int = 0
    to_set: int | None = None
    to_max: int | None = None

    def has_set(self) -> bool:
        return self.to_set is not None

    def has_max(self) -> bool:
        return self.to_max is not None

    def has_change(self) -> bool:
        return self.has_set() or self.has_max() or self.to_add != 0

    def combine(self, other: BeatsChange) -> BeatsChange:
        """Return the change equivalent to applying ``self`` and then ``other``."""
        if other.has_set():
            return other

        to_max = self.to_max
        if other.has_max():
            shifted = other.to_max - self.to_add
            to_max = shifted if to_max is None else max(to_max, shifted)

        return BeatsChange(self.to_add + other.to_add, self.to_set, to_max)


def _merge_second(second_min: int, second_count: int, cand_min: int, cand_count: int) -> tuple[int, int]:
    if cand_min < second_min:
        return cand_min, cand_count
    if cand_min == second_min:
        return second_min, second_count + cand_count
    return second_min, second_count


@dataclass(frozen=True)
class BeatsSegment:
    """Summary of a run of values: the two smallest distinct values with counts, maximum and sum.

    A ``min_count`` of zero marks the empty (identity) segment.
    """

    minimum: int = MAX_VALUE
    second_min: int = MAX_VALUE
    min_count: int = 0
    second_count: int = 0
    maximum: int = MIN_VALUE
    sum: int = 0

    @classmethod
    def of(cls, value: int = 0, count: int = 0) -> BeatsSegment:
        """The segment holding ``count`` copies of ``value``."""
        if count == 0:
            return cls()
        return cls(value, MAX_VALUE, count, 0, value, value * count)

    def is_empty(self) -> bool:
        return self.min_count == 0

    def apply(self, length: int, change: BeatsChange) -> BeatsSegment | None:
        """Return this segment of ``length`` elements after ``change``.

        Returns ``None`` when the change cannot be resolved at this level and
        must be pushed further down.
        """
        minimum, second_min = self.minimum, self.second_min
        min_count, second_count = self.min_count, self.second_count
        maximum, total = self.maximum, self.sum

        if change.has_set():
            minimum = change.to_set
            min_count = length
            second_min = MAX_VALUE
            second_count = 0
            maximum = change.to_set
            total = change.to_set * length

        if change.has_max() and change.to_max > minimum:
            if second_count != 0 and change.to_max >= second_min:
                return None
            total += (change.to_max - minimum) * min_count
            minimum = change.to_max
            maximum = max(maximum, change.to_max)

        if change.to_add != 0:
            minimum += change.to_add
            if second_count != 0:
                second_min += change.to_add
            maximum += change.to_add
            total += change.to_add * length

        return BeatsSegment(minimum, second_min, min_count, second_count, maximum, total)

    def join(self, other: BeatsSegment) -> BeatsSegment:
        """Return the segment made of this one followed by ``other``."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self

        if self.minimum == other.minimum:
            minimum, min_count = self.minimum, self.min_count + other.min_count
            second = _merge_second(self.second_min, self.second_count, other.second_min, other.second_count)
        elif self.minimum < other.minimum:
            minimum, min_count = self.minimum, self.min_count
            second = _merge_second(self.second_min, self.second_count, other.minimum, other.min_count)
        else:
            minimum, min_count = other.minimum, other.min_count
            second = _merge_second(self.minimum, self.min_count, other.second_min, other.second_count)

        return BeatsSegment(
            minimum,
            second[0],
            min_count,
            second[1],
            max(self.maximum, other.maximum),
            self.sum + other.sum,
        )


def _highest_bit(x: int) -> int:
    return x.bit_length() - 1


class SegTreeBeats:
    """Lazy segment tree supporting range chmax, assign and add over a power-of-two size."""

    def __init__(self, n: int = 0) -> None:
        self._reset(n)

    def _reset(self, n: int) -> None:
        size = 1
        while size < n:
            size *= 2
        self.tree_n = size
        self.tree: list[BeatsSegment] = [BeatsSegment()] * (2 * size)
        self.changes: list[BeatsChange] = [BeatsChange()] * size

    def build(self, initial: Iterable[BeatsSegment]) -> None:
        """Rebuild the tree from ``initial`` in linear time."""
        segments = list(initial)
        self._reset(len(segments))
        self.tree[self.tree_n:self.tree_n + len(segments)] = segments

        for position in range(self.tree_n - 1, 0, -1):
            self._pull(position)

    def _pull(self, position: int) -> None:
        self.tree[position] = self.tree[2 * position].join(self.tree[2 * position + 1])

    def _apply_and_combine(self, position: int, length: int, change: BeatsChange) -> bool:
        result = self.tree[position].apply(length, change)
        if result is None:
            return False
        self.tree[position] = result
        if position < self.tree_n:
            self.changes[position] = self.changes[position].combine(change)
        return True

    def _push_down(self, position: int, length: int) -> None:
        change = self.changes[position]
        if change.has_change():
            left_ok = self._apply_and_combine(2 * position, length // 2, change)
            right_ok = self._apply_and_combine(2 * position + 1, length // 2, change)
            if not (left_ok and right_ok):
                raise RuntimeError("pending change could not be pushed down")
            self.changes[position] = BeatsChange()

    def _process_range(
        self,
        position: int,
        start: int,
        end: int,
        a: int,
        b: int,
        needs_join: bool,
        range_op: Callable[[int, int], bool],
    ) -> None:
        # range_op returns True when the work is done at this node.
        if a <= start and end <= b and range_op(position, end - start):
            return
        if position >= self.tree_n:
            return

        self._push_down(position, end - start)
        mid = (start + end) // 2
        if a < mid:
            self._process_range(2 * position, start, mid, a, b, needs_join, range_op)
        if b > mid:
            self._process_range(2 * position + 1, mid, end, a, b, needs_join, range_op)
        if needs_join:
            self._pull(position)

    def _check_range(self, a: int, b: int) -> None:
        if not 0 <= a <= b <= self.tree_n:
            raise IndexError(f"invalid range [{a}, {b}) for size {self.tree_n}")

    def query(self, a: int, b: int) -> BeatsSegment:
        """Summary of the half-open range ``[a, b)``."""
        self._check_range(a, b)
        answer = BeatsSegment()

        def collect(position: int, _length: int) -> bool:
            nonlocal answer
            answer = answer.join(self.tree[position])
            return True

        self._process_range(1, 0, self.tree_n, a, b, False, collect)
        return answer

    def query_full(self) -> BeatsSegment:
        return self.tree[1]

    def update(self, a: int, b: int, change: BeatsChange) -> None:
        """Apply ``change`` to every element of ``[a, b)``."""
        self._check_range(a, b)

        def apply(position: int, length: int) -> bool:
            return self._apply_and_combine(position, length, change)

        self._process_range(1, 0, self.tree_n, a, b, True, apply)

    def to_list(self) -> list[BeatsSegment]:
        """All leaf segments after pushing every pending change down."""
        for position in range(1, self.tree_n):
            self._push_down(position, self.tree_n >> _highest_bit(position))
        return self.tree[self.tree_n:]

    def find_last_subarray(
        self,
        should_join: Callable[[BeatsSegment, BeatsSegment], bool],
        n: int,
        first: int = 0,
    ) -> int:
        """End of the longest run from ``first`` whose pieces ``should_join`` accepts.

        Returns ``first - 1`` when even the empty run is rejected.
        """
        if not 0 <= first <= n:
            raise ValueError(f"first={first} must lie in [0, {n}]")

        current = BeatsSegment()
        if not should_join(current, current):
            return first - 1

        def search(position: int, start: int, end: int) -> int:
            nonlocal current
            if end <= first:
                return end
            if first <= start and end <= n and should_join(current, self.tree[position]):
                current = current.join(self.tree[position])
                return end
            if end - start == 1:
                return start

            self._push_down(position, end - start)
            mid = (start + end) // 2
            left = search(2 * position, start, mid)
            return left if left < mid else search(2 * position + 1, mid, end)

        return search(1, 0, self.tree_n)