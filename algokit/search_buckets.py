"""Square-root buckets for point updates and range counts of smaller values."""

from __future__ import annotations

import math
from bisect import bisect_left, insort
from collections.abc import Iterable
from typing import Any


class SearchBuckets:
    """Array supporting ``values[i] = x`` and counting values below a bound in a range.

    Both operations take about ``sqrt(n log n)`` time.
    """

    def __init__(self, initial: Iterable[Any] = ()) -> None:
        self.values: list[Any] = list(initial)
        self.n = n = len(self.values)
        self.bucket_size = int(3 * math.sqrt(n * math.log(n + 1)) + 1)
        self._buckets: list[Any] = []
        for start in range(0, n, self.bucket_size):
            self._buckets.extend(sorted(self.values[start:start + self.bucket_size]))

    def __len__(self) -> int:
        return self.n

    def _bucket_start(self, index: int) -> int:
        return index - index % self.bucket_size

    def _bucket_end(self, bucket_start: int) -> int:
        return min(bucket_start + self.bucket_size, self.n)

    def _bucket_count_less_than(self, bucket_start: int, value: Any) -> int:
        end = self._bucket_end(bucket_start)
        return bisect_left(self._buckets, value, bucket_start, end) - bucket_start

    def _count_in(self, start: int, end: int, value: Any) -> int:
        return sum(1 for item in self.values[start:end] if item < value)

    def count_less_than(self, start: int, end: int, value: Any) -> int:
        """How many ``i`` in ``[start, end)`` have ``values[i] < value``."""
        if not 0 <= start <= end <= self.n:
            raise IndexError(f"invalid range [{start}, {end}) for size {self.n}")

        count = 0

        # Align both ends to bucket edges, scanning whichever side is shorter.
        bucket_start = self._bucket_start(start)
        bucket_end = self._bucket_end(bucket_start)
        if start - bucket_start < bucket_end - start:
            count -= self._count_in(bucket_start, start, value)
            start = bucket_start
        else:
            count += self._count_in(start, bucket_end, value)
            start = bucket_end

        bucket_start = self._bucket_start(end)
        bucket_end = self._bucket_end(bucket_start)
        if end - bucket_start < bucket_end - end:
            count += self._count_in(bucket_start, end, value)
            end = bucket_start
        else:
            count -= self._count_in(end, bucket_end, value)
            end = bucket_end

        while start < end:
            count += self._bucket_count_less_than(start, value)
            start = self._bucket_end(start)

        return count

    def prefix_count_less_than(self, length: int, value: Any) -> int:
        """How many of the first ``length`` values are below ``value``."""
        return self.count_less_than(0, length, value)

    def modify(self, index: int, value: Any) -> None:
        """Set ``values[index] = value``."""
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} out of range [0, {self.n})")

        bucket_start = self._bucket_start(index)
        bucket_end = self._bucket_end(bucket_start)
        old_pos = bisect_left(self._buckets, self.values[index], bucket_start, bucket_end)
        del self._buckets[old_pos]
        insort(self._buckets, value, bucket_start, bucket_end - 1)
        self.values[index] = value