"""Knuth-Morris-Pratt pattern search over any indexable sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _get_link(pattern: Sequence[Any], fail: Sequence[int], length: int, item: Any) -> int:
    """Longest prefix of ``pattern`` that ends the text after adding ``item``."""
    while length > 0 and pattern[length] != item:
        length = fail[length]
    if pattern[length] == item:
        length += 1
    return length


def compute_failure_function(pattern: Sequence[Any]) -> list[int]:
    """``fail[i]``: length of the longest proper border of ``pattern[:i]``."""
    n = len(pattern)
    fail = [0] * (n + 1)
    length = 0

    for i in range(1, n):
        length = _get_link(pattern, fail, length, pattern[i])
        fail[i + 1] = length

    return fail


def find_matches(
    pattern: Sequence[Any],
    text: Sequence[Any],
    fail: Sequence[int] | None = None,
) -> list[int]:
    """All start indices at which ``pattern`` occurs in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if len(pattern) > len(text):
        return []
    if fail is None:
        fail = compute_failure_function(pattern)

    n = len(pattern)
    matches = []
    length = 0

    for i, item in enumerate(text):
        length = _get_link(pattern, fail, length, item)
        if length == n:
            matches.append(i - (n - 1))
            length = fail[length]

    return matches