"""Bottom-up segment tree with point updates and range queries."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .segment import Segment, SegmentChange


class BasicSegTree:
    """Segment tree over a power-of-two number of leaves, point updates only."""

    def __init__(self, n: int = 0) -> None:
        self._reset(n)

    def _reset(self, n: int) -> None:
        size = 1
        while size < n:
            size *= 2
        self.tree_n = size
        self.tree: list[Segment] = [Segment()] * (2 * size)

    def build(self, initial: Iterable[Segment]) -> None:
        """Rebuild the tree from ``initial`` in linear time."""
        segments = list(initial)
        self._reset(len(segments))
        self.tree[self.tree_n:self.tree_n + len(segments)] = segments

        for position in range(self.tree_n - 1, 0, -1):
            self.tree[position] = self.tree[2 * position].join(self.tree[2 * position + 1])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.tree_n:
            raise IndexError(f"index {index} out of range [0, {self.tree_n})")

    def query(self, a: int, b: int) -> Segment:
        """Summary of the half-open range ``[a, b)``."""
        if not 0 <= a <= b <= self.tree_n:
            raise IndexError(f"invalid range [{a}, {b}) for size {self.tree_n}")

        answer = Segment()
        right: list[Segment] = []
        a += self.tree_n
        b += self.tree_n

        while a < b:
            if a & 1:
                answer = answer.join(self.tree[a])
                a += 1
            if b & 1:
                b -= 1
                right.append(self.tree[b])
            a //= 2
            b //= 2

        for seg in reversed(right):
            answer = answer.join(seg)
        return answer

    def query_full(self) -> Segment:
        return self.tree[1]

    def query_single(self, index: int) -> Segment:
        self._check_index(index)
        return self.tree[self.tree_n + index]

    def _join_up(self, position: int) -> None:
        while position > 1:
            position //= 2
            self.tree[position] = self.tree[2 * position].join(self.tree[2 * position + 1])

    def update(self, index: int, change: SegmentChange) -> None:
        """Apply ``change`` to the element at ``index``."""
        self._check_index(index)
        position = self.tree_n + index
        self.tree[position] = self.tree[position].apply(1, change)
        self._join_up(position)

    def set(self, index: int, seg: Segment) -> None:
        """Replace the element at ``index`` with ``seg``."""
        self._check_index(index)
        position = self.tree_n + index
        self.tree[position] = seg
        self._join_up(position)

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

            mid = (start + end) // 2
            left = search(2 * position, start, mid)
            return left if left < mid else search(2 * position + 1, mid, end)

        return search(1, 0, self.tree_n)