"""Persistent array with logarithmic lookups and updates."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class PersistentArray(Generic[T]):
    """Array whose updates create new versions identified by root indices.

    The initial version is ``PersistentArray.ROOT``.
    """

    ROOT = 1

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: list[T] = list(values)
        self.tree_n = len(self._values)
        self._tree: list[tuple[int, int]] = [(-1, -1)]
        self._build(0, self.tree_n)

    def _build(self, start: int, end: int) -> int:
        if start >= end:
            return -1

        node = len(self._tree)
        self._tree.append((-1, -1))

        # Leaves point at their slot in the value list.
        if end - start == 1:
            self._tree[node] = (start, start)
            return node

        mid = (start + end) // 2
        left = self._build(start, mid)
        right = self._build(mid, end)
        self._tree[node] = (left, right)
        return node

    def _check(self, root: int, index: int) -> None:
        if not 0 < root < len(self._tree):
            raise ValueError(f"unknown root {root}")
        if not 0 <= index < self.tree_n:
            raise IndexError(f"index {index} out of range [0, {self.tree_n})")

    def get(self, root: int, index: int) -> T:
        """Value at ``index`` in the version rooted at ``root``."""
        self._check(root, index)
        current = root
        start, end = 0, self.tree_n

        while end - start > 1:
            mid = (start + end) // 2
            left, right = self._tree[current]
            if index < mid:
                current, end = left, mid
            else:
                current, start = right, mid

        return self._values[self._tree[current][0]]

    def _update_tree(self, position: int, start: int, end: int, index: int, value: T) -> int:
        node = len(self._tree)
        self._tree.append(self._tree[position])

        if end - start == 1:
            slot = len(self._values)
            self._values.append(value)
            self._tree[node] = (slot, slot)
            return node

        mid = (start + end) // 2
        left, right = self._tree[node]
        if index < mid:
            left = self._update_tree(left, start, mid, index, value)
        else:
            right = self._update_tree(right, mid, end, index, value)
        self._tree[node] = (left, right)
        return node

    def update(self, root: int, index: int, value: T) -> int:
        """Set ``index`` to ``value`` in a copy of version ``root``; return its root."""
        self._check(root, index)
        return self._update_tree(root, 0, self.tree_n, index, value)