"""Persistent segment tree with lazy range add / range assign."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from .segment import Segment, SegmentChange


@dataclass(slots=True)
class _Node:
    seg: Segment = field(default_factory=Segment)
    change: SegmentChange = field(default_factory=SegmentChange)
    left: int = -1
    right: int = -1


class PersistentSegTree:
    """Segment tree whose updates create new versions and leave old ones intact.

    Every version is identified by its root index; the initial version is
    ``PersistentSegTree.ROOT``.
    """

    ROOT = 1

    def __init__(self, n: int = 0) -> None:
        size = 1
        while size < n:
            size *= 2
        self.tree_n = size
        self._nodes: list[_Node] = [_Node() for _ in range(2 * size)]

        for position in range(1, size):
            self._nodes[position].left = 2 * position
            self._nodes[position].right = 2 * position + 1

    def build(self, initial: Iterable[Segment]) -> None:
        """Fill the initial version from ``initial`` in linear time."""
        segments = list(initial)
        if len(segments) > self.tree_n:
            raise ValueError(f"{len(segments)} segments do not fit in {self.tree_n} leaves")

        for offset, seg in enumerate(segments):
            self._nodes[self.tree_n + offset].seg = seg

        for position in range(self.tree_n - 1, 0, -1):
            self._pull(position)

    def _pull(self, position: int) -> None:
        node = self._nodes[position]
        node.seg = self._nodes[node.left].seg.join(self._nodes[node.right].seg)

    def _make_copy(self, position: int) -> int:
        self._nodes.append(replace(self._nodes[position]))
        return len(self._nodes) - 1

    def _push_down(self, position: int, length: int) -> None:
        node = self._nodes[position]
        if not node.change.has_change():
            return
        for child_position in (node.left, node.right):
            child = self._nodes[child_position]
            child.seg = child.seg.apply(length // 2, node.change)
            child.change = child.change.combine(node.change)
        node.change = SegmentChange()

    def _check_root(self, root: int) -> None:
        if not 0 < root < len(self._nodes):
            raise ValueError(f"unknown root {root}")

    def _check_range(self, a: int, b: int) -> None:
        if not 0 <= a <= b <= self.tree_n:
            raise IndexError(f"invalid range [{a}, {b}) for size {self.tree_n}")

    def query(self, root: int, a: int, b: int) -> Segment:
        """Summary of ``[a, b)`` in the version rooted at ``root``."""
        self._check_root(root)
        self._check_range(a, b)
        answer = Segment()

        def walk(position: int, start: int, end: int, propagate: SegmentChange) -> None:
            nonlocal answer
            node = self._nodes[position]
            if a <= start and end <= b:
                answer = answer.join(node.seg.apply(end - start, propagate))
                return
            if node.left < 0 or node.right < 0:
                return

            mid = (start + end) // 2
            next_propagate = node.change.combine(propagate)
            if a < mid:
                walk(node.left, start, mid, next_propagate)
            if b > mid:
                walk(node.right, mid, end, next_propagate)

        walk(root, 0, self.tree_n, SegmentChange())
        return answer

    def _update_tree(
        self,
        position: int,
        start: int,
        end: int,
        a: int,
        b: int,
        request: SegmentChange,
        needs_copy: bool,
    ) -> int:
        if needs_copy:
            position = self._make_copy(position)
        node = self._nodes[position]

        if a <= start and end <= b:
            node.seg = node.seg.apply(end - start, request)
            node.change = node.change.combine(request)
            return position
        if node.left < 0 or node.right < 0:
            return position

        mid = (start + end) // 2
        node.left = self._make_copy(node.left)
        node.right = self._make_copy(node.right)
        self._push_down(position, end - start)

        if a < mid:
            node.left = self._update_tree(node.left, start, mid, a, b, request, False)
        if b > mid:
            node.right = self._update_tree(node.right, mid, end, a, b, request, False)
        self._pull(position)
        return position

    def update(self, root: int, a: int, b: int, change: SegmentChange) -> int:
        """Apply ``change`` to ``[a, b)`` of version ``root``; return the new root."""
        self._check_root(root)
        self._check_range(a, b)
        return self._update_tree(root, 0, self.tree_n, a, b, change, True)

    def undo_updates(self, root: int) -> None:
        """Discard every version created at or after ``root``."""
        if not 2 * self.tree_n <= root <= len(self._nodes):
            raise ValueError(f"cannot undo back to root {root}")
        del self._nodes[root:]

    def to_list(self, root: int) -> list[Segment]:
        """All leaf segments of the version rooted at ``root``."""
        self._check_root(root)
        leaves: list[Segment] = []

        def walk(position: int, length: int, propagate: SegmentChange) -> None:
            node = self._nodes[position]
            if node.left < 0:
                leaves.append(node.seg.apply(length, propagate))
                return
            next_propagate = node.change.combine(propagate)
            walk(node.left, length // 2, next_propagate)
            walk(node.right, length // 2, next_propagate)

        walk(root, self.tree_n, SegmentChange())
        return leaves

    def find_last_subarray(
        self,
        root: int,
        should_join: Callable[[Segment, Segment], bool],
        n: int,
        first: int = 0,
    ) -> int:
        """End of the longest run from ``first`` whose pieces ``should_join`` accepts.

        Returns ``first - 1`` when even the empty run is rejected.
        """
        self._check_root(root)
        if not 0 <= first <= n:
            raise ValueError(f"first={first} must lie in [0, {n}]")

        current = Segment()
        if not should_join(current, current):
            return first - 1

        def search(position: int, start: int, end: int, propagate: SegmentChange) -> int:
            nonlocal current
            node = self._nodes[position]
            if end <= first:
                return end
            if first <= start and end <= n:
                candidate = node.seg.apply(end - start, propagate)
                if should_join(current, candidate):
                    current = current.join(candidate)
                    return end
            if end - start == 1:
                return start

            mid = (start + end) // 2
            next_propagate = node.change.combine(propagate)
            left = search(node.left, start, mid, next_propagate)
            return left if left < mid else search(node.right, mid, end, next_propagate)

        return search(root, 0, self.tree_n, SegmentChange())