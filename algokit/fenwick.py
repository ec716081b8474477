"""Fenwick (binary indexed) tree for prefix sums."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Point updates and prefix sums over ``n`` values, all starting at zero."""

    def __init__(self, n: int = 0) -> None:
        self.tree_n = n
        self._total = 0
        self._tree = [0] * (n + 1)

    def __len__(self) -> int:
        return self.tree_n

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.tree_n:
            raise IndexError(f"index {index} out of range [0, {self.tree_n})")

    def build(self, initial: Iterable[int]) -> None:
        """Load ``initial`` (exactly ``n`` values) in linear time."""
        values = list(initial)
        if len(values) != self.tree_n:
            raise ValueError(f"expected {self.tree_n} values, got {len(values)}")

        tree = [0, *values]
        for i in range(1, self.tree_n + 1):
            k = (i & -i) >> 1
            while k > 0:
                tree[i] += tree[i - k]
                k >>= 1

        self._tree = tree
        self._total = sum(values)

    def update(self, index: int, change: int) -> None:
        """Add ``change`` to the value at ``index``."""
        self._check_index(index)
        self._total += change
        i = index + 1
        while i <= self.tree_n:
            self._tree[i] += change
            i += i & -i

    def query(self, count: int) -> int:
        """Sum of the first ``count`` values (clamped to ``n``)."""
        i = min(count, self.tree_n)
        total = 0
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def query_range(self, a: int, b: int) -> int:
        """Sum of the values in ``[a, b)``."""
        return self.query(b) - self.query(a)

    def query_suffix(self, start: int) -> int:
        """Sum of the values from ``start`` to the end."""
        return self._total - self.query(start)

    def get(self, index: int) -> int:
        """The value at ``index``."""
        self._check_index(index)
        above = index + 1
        total = self._tree[above]
        above -= above & -above

        while index != above:
            total -= self._tree[index]
            index -= index & -index

        return total

    def set(self, index: int, value: int) -> bool:
        """Set the value at ``index``; return whether it changed."""
        current = self.get(index)
        if current == value:
            return False
        self.update(index, value - current)
        return True

    def find_last_prefix(self, total: int) -> int:
        """Largest ``p`` in ``[0, n]`` with ``query(p) <= total``, or -1 if ``total < 0``.

        Assumes non-negative values. Used as an ordered multiset of indices,
        ``find_last_prefix(k)`` is the k-th smallest element (0-indexed).
        """
        if total < 0:
            return -1

        prefix = 0
        for k in range(self.tree_n.bit_length() - 1, -1, -1):
            step = prefix + (1 << k)
            if step <= self.tree_n and self._tree[step] <= total:
                prefix = step
                total -= self._tree[prefix]

        return prefix