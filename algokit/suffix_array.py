"""Suffix array with LCP array and constant-time suffix comparisons."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


class SparseTable:
    """Static range-minimum (or range-maximum) queries in constant time."""

    def __init__(self, values: Iterable[Any] = (), maximum_mode: bool = False) -> None:
        self._better = max if maximum_mode else min
        row = list(values)
        self.n = len(row)
        self._levels: list[list[Any]] = [row] if row else []

        k = 1
        while (1 << k) <= self.n:
            prev = self._levels[-1]
            half = 1 << (k - 1)
            self._levels.append(
                [self._better(prev[i], prev[i + half]) for i in range(self.n - (1 << k) + 1)]
            )
            k += 1

    def query(self, a: int, b: int) -> Any:
        """Best value in the non-empty range ``[a, b)``."""
        if not 0 <= a < b <= self.n:
            raise IndexError(f"invalid range [{a}, {b}) for size {self.n}")
        level = (b - a).bit_length() - 1
        row = self._levels[level]
        return self._better(row[a], row[b - (1 << level)])


class SuffixArray:
    """Sorted suffixes of ``text`` by prefix doubling.

    ``suffix[r]`` is the start of the r-th smallest suffix, ``rank`` its
    inverse, and ``lcp[r]`` the common prefix length of suffixes ``r`` and
    ``r - 1`` (``lcp[0]`` is 0).
    """

    def __init__(self, text: Sequence[Any], build_rmq: bool = True) -> None:
        self.text = text
        self.n = n = len(text)
        self.suffix: list[int] = []
        self.rank: list[int] = []
        self.lcp: list[int] = []
        self.rmq: SparseTable | None = None
        if n == 0:
            if build_rmq:
                self.rmq = SparseTable()
            return

        suffix = sorted(range(n), key=lambda i: text[i])
        rank = [0] * n
        for i in range(1, n):
            s, prev = suffix[i], suffix[i - 1]
            rank[s] = rank[prev] if text[s] == text[prev] else i

        length = 1
        done = False
        while length < n and not done:
            # Order by the rank of the suffix `length` further on; short suffixes first.
            next_index = list(range(n))
            ordered = [0] * n
            for i in range(n - length, n):
                ordered[next_index[rank[i]]] = i
                next_index[rank[i]] += 1
            for s in suffix:
                prev = s - length
                if prev >= 0:
                    ordered[next_index[rank[prev]]] = prev
                    next_index[rank[prev]] += 1
            suffix = ordered

            new_rank = [0] * n
            done = True
            for i in range(1, n):
                s, prev = suffix[i], suffix[i - 1]
                if (
                    s + length < n
                    and prev + length < n
                    and rank[s] == rank[prev]
                    and rank[s + length] == rank[prev + length]
                ):
                    new_rank[s] = new_rank[prev]
                    done = False
                else:
                    new_rank[s] = i
            rank = new_rank
            length *= 2

        self.suffix = suffix
        self.rank = rank
        self._compute_lcp()
        if build_rmq:
            self.rmq = SparseTable(self.lcp)

    def _compute_lcp(self) -> None:
        n, text, suffix, rank = self.n, self.text, self.suffix, self.rank
        lcp = [0] * n
        match = 0

        for i in range(n):
            if rank[i] == 0:
                continue
            a = suffix[rank[i]] + match
            b = suffix[rank[i] - 1] + match
            while a < n and b < n and text[a] == text[b]:
                a += 1
                b += 1
                match += 1
            lcp[rank[i]] = match
            match = max(match - 1, 0)

        self.lcp = lcp

    def get_lcp_from_ranks(self, a: int, b: int) -> int:
        """Common prefix length of the suffixes of ranks ``a`` and ``b``."""
        if a == b:
            return self.n - self.suffix[a]
        if self.rmq is None:
            raise RuntimeError("suffix array was built without range-minimum support")
        if a > b:
            a, b = b, a
        return self.rmq.query(a + 1, b + 1)

    def get_lcp(self, a: int, b: int) -> int:
        """Common prefix length of the suffixes starting at ``a`` and ``b``."""
        if a >= self.n or b >= self.n:
            return 0
        if a == b:
            return self.n - a
        return self.get_lcp_from_ranks(self.rank[a], self.rank[b])

    def compare(self, a: int, b: int, length: int | None = None) -> int:
        """Compare the first ``length`` items of the suffixes at ``a`` and ``b``: -1, 0 or 1."""
        if length is None or length < 0:
            length = self.n
        if a == b:
            return 0

        common = self.get_lcp(a, b)
        if common >= length:
            return 0
        if a + common >= self.n or b + common >= self.n:
            return -1 if a + common >= self.n else 1

        x, y = self.text[a + common], self.text[b + common]
        return -1 if x < y else (0 if x == y else 1)

    def distinct_substrings(self) -> int:
        """Number of distinct non-empty substrings of the text."""
        return self.n * (self.n + 1) // 2 - sum(self.lcp)