"""Count black/white colourings of a tree with no two adjacent black nodes."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 10**9 + 7


def count_colorings(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Colourings of the tree on nodes ``0..n-1`` with no adjacent black pair, modulo ``MOD``."""
    edge_list = list(edges)
    if n < 1:
        raise ValueError("a tree needs at least one node")
    if len(edge_list) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edge_list)}")

    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edge_list:
        adj[u].append(v)
        adj[v].append(u)

    parent = [-1] * n
    order = []
    seen = [False] * n
    seen[0] = True
    stack = [0]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbor in adj[node]:
            if not seen[neighbor]:
                seen[neighbor] = True
                parent[neighbor] = node
                stack.append(neighbor)

    if len(order) != n:
        raise ValueError("edges do not connect every node")

    black = [1] * n
    white = [1] * n
    for node in reversed(order):
        up = parent[node]
        if up >= 0:
            either = (black[node] + white[node]) % MOD
            black[up] = black[up] * white[node] % MOD
            white[up] = white[up] * either % MOD

    return (black[0] + white[0]) % MOD