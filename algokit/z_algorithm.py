"""Z-function ("extended KMP") over any indexable sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


def z_algorithm(pattern: Sequence[Any]) -> list[int]:
    """``z[i]``: length of the longest common prefix of ``pattern`` and ``pattern[i:]``."""
    n = len(pattern)
    if n == 0:
        return []

    z = [0] * n
    z[0] = n
    loc = 1

    for i in range(1, n):
        if i < loc + z[loc]:
            z[i] = min(z[i - loc], loc + z[loc] - i)

        while i + z[i] < n and pattern[z[i]] == pattern[i + z[i]]:
            z[i] += 1

        # Keep the position whose match reaches furthest right.
        if i + z[i] > loc + z[loc]:
            loc = i

    return z


def find_occurrences(pattern: Sequence[Any], text: Sequence[Any]) -> Iterator[int]:
    """Yield every start index in ``text`` where ``pattern`` occurs."""
    n = len(pattern)
    z = z_algorithm([*pattern, *text])
    for i in range(len(text)):
        if z[i + n] >= n:
            yield i