"""Segment tree with lazy range add / range assign."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .segment import Segment, SegmentChange


def _highest_bit(x: int) -> int:
    return x.bit_length() - 1


class SegTree:
    """Lazy-propagation segment tree over a power-of-two number of leaves."""

    def __init__(self, n: int = 0) -> None:
        self._reset(n)

    def _reset(self, n: int) -> None:
        size = 1
        while size < n:
            size *= 2
        self.tree_n = size
        self.tree: list[Segment] = [Segment()] * (2 * size)
        self.changes: list[SegmentChange] = [SegmentChange()] * size

    def build(self, initial: Iterable[Segment]) -> None:
        """Rebuild the tree from ``initial`` in linear time."""
        segments = list(initial)
        self._reset(len(segments))
        self.tree[self.tree_n:self.tree_n + len(segments)] = segments

        for position in range(self.tree_n - 1, 0, -1):
            self._pull(position)

    def _pull(self, position: int) -> None:
        self.tree[position] = self.tree[2 * position].join(self.tree[2 * position + 1])

    def _apply_and_combine(self, position: int, length: int, change: SegmentChange) -> None:
        self.tree[position] = self.tree[position].apply(length, change)
        if position < self.tree_n:
            self.changes[position] = self.changes[position].combine(change)

    def _push_down(self, position: int, length: int) -> None:
        change = self.changes[position]
        if change.has_change():
            self._apply_and_combine(2 * position, length // 2, change)
            self._apply_and_combine(2 * position + 1, length // 2, change)
            self.changes[position] = SegmentChange()

    def _process_range(
        self,
        position: int,
        start: int,
        end: int,
        a: int,
        b: int,
        needs_join: bool,
        range_op: Callable[[int, int], None],
    ) -> None:
        if a <= start and end <= b:
            range_op(position, end - start)
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

    def query(self, a: int, b: int) -> Segment:
        """Summary of the half-open range ``[a, b)``."""
        self._check_range(a, b)
        answer = Segment()

        def collect(position: int, _length: int) -> None:
            nonlocal answer
            answer = answer.join(self.tree[position])

        self._process_range(1, 0, self.tree_n, a, b, False, collect)
        return answer

    def query_full(self) -> Segment:
        return self.tree[1]

    def update(self, a: int, b: int, change: SegmentChange) -> None:
        """Apply ``change`` to every element of ``[a, b)``."""
        self._check_range(a, b)

        def apply(position: int, length: int) -> None:
            self._apply_and_combine(position, length, change)

        self._process_range(1, 0, self.tree_n, a, b, True, apply)

    def to_list(self) -> list[Segment]:
        """All leaf segments after pushing every pending change down."""
        for position in range(1, self.tree_n):
            self._push_down(position, self.tree_n >> _highest_bit(position))
        return self.tree[self.tree_n:]

    def update_single(self, index: int, seg: Segment) -> None:
        """Replace the element at ``index`` with ``seg``."""
        if not 0 <= index < self.tree_n:
            raise IndexError(f"index {index} out of range [0, {self.tree_n})")
        position = self.tree_n + index

        for up in range(_highest_bit(self.tree_n), 0, -1):
            self._push_down(position >> up, 1 << up)

        self.tree[position] = seg
        while position > 1:
            position //= 2
            self._pull(position)

    def find_last_subarray(
        self,
        should_join: Callable[[Segment, Segment], bool],
        n: int,
        first: int = 0,
    ) -> int:
        """End of the longest run from ``first`` whose pieces ``should_join`` accepts.

        Returns ``first - 1`` when even the empty run is rejected.
        """
        if not 0 <= first <= n:
            raise ValueError(f"first={first} must lie in [0, {n}]")

        current = Segment()
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