"""Levenshtein edit distance and a shortest sequence of single edits."""

from __future__ import annotations


def edit_distance_table(s: str, t: str) -> list[list[int]]:
    """Full table: ``table[i][j]`` is the distance between ``s[:i]`` and ``t[:j]``."""
    n, m = len(s), len(t)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        table[i][0] = i
    table[0] = list(range(m + 1))

    for i, a in enumerate(s):
        row, below = table[i], table[i + 1]
        for j, b in enumerate(t):
            below[j + 1] = min(below[j] + 1, row[j + 1] + 1, row[j] + (a != b))

    return table


def edit_distance(s: str, t: str) -> int:
    """Minimum number of insertions, deletions and substitutions turning ``s`` into ``t``."""
    row = list(range(len(t) + 1))
    for i, a in enumerate(s):
        below = [i + 1]
        for j, b in enumerate(t):
            below.append(min(below[j] + 1, row[j + 1] + 1, row[j] + (a != b)))
        row = below
    return row[-1]


def construct_edit_sequence(s: str, t: str) -> list[str]:
    """Strings from ``s`` to ``t``, each one edit away from the previous.

    The list has ``edit_distance(s, t) + 1`` entries.
    """
    table = edit_distance_table(s, t)
    n, m = len(s), len(t)
    left, right = [s], [t]

    while n > 0 or m > 0:
        if n > 0 and table[n][m] == table[n - 1][m] + 1:
            n -= 1
            current = left[-1]
            left.append(current[:n] + current[n + 1:])
        elif m > 0 and table[n][m] == table[n][m - 1] + 1:
            m -= 1
            current = right[-1]
            right.append(current[:m] + current[m + 1:])
        elif n > 0 and m > 0 and table[n][m] == table[n - 1][m - 1] + (s[n - 1] != t[m - 1]):
            n -= 1
            m -= 1
            if s[n] != t[m]:
                current = left[-1]
                left.append(current[:n] + t[m] + current[n + 1:])
        else:
            raise RuntimeError("inconsistent edit distance table")

    if left[-1] != right[-1]:
        raise RuntimeError("edit sequences failed to meet")
    right.pop()
    return left + right[::-1]