"""Dynamic programming on trees: distance-constrained weighted subsets and connected colourings."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _rooted(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[list[int]], list[int], list[int]]:
    """Adjacency, parents and preorder of the tree on ``0..n-1`` rooted at 0."""
    edge_list = list(edges)
    if n < 1:
        raise ValueError("a tree needs at least one node")
    if len(edge_list) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edge_list)}")

    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edge_list:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) leaves the range [0, {n})")
        adj[u].append(v)
        adj[v].append(u)

    parent = [-1] * n
    seen = [False] * n
    seen[0] = True
    order = []
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
    return adj, parent, order


def _get(dp: deque[int], index: int) -> int:
    return dp[index] if index < len(dp) else 0


def _attach(root: deque[int], child: deque[int], limit: int) -> deque[int]:
    """Merge ``child`` into ``root``; the longer table absorbs the shorter one."""
    if len(root) < len(child):
        root, child = child, root

    combined = list(child)
    for d, value in enumerate(child):
        other = max(limit - d, d)
        combined[d] = max(combined[d], root[d] + _get(child, other), _get(root, other) + value)

    best = 0
    for i in range(len(child) - 1, -1, -1):
        best = max(best, combined[i])
        root[i] = max(root[i], best)
    return root


def max_weight_subset(weights: Sequence[int], edges: Iterable[tuple[int, int]], k: int) -> int:
    """Largest total weight of a node set whose pairwise distances all exceed ``k``.

    ``weights[i]`` is node ``i``'s weight; ``edges`` form a tree on those nodes.
    """
    values = list(weights)
    adj, parent, order = _rooted(len(values), edges)
    limit = k + 1

    # dp[d]: best weight in the subtree when the chosen node nearest the root is at depth >= d.
    results: list[deque[int] | None] = [None] * len(values)
    for node in reversed(order):
        current = deque([values[node]])
        for neighbor in adj[node]:
            if neighbor != parent[node]:
                child = results[neighbor]
                results[neighbor] = None
                child.appendleft(child[0])
                current = _attach(current, child, limit)
        results[node] = current

    return results[0][0]


def count_connected_black(n: int, edges: Iterable[tuple[int, int]], mod: int) -> list[int]:
    """For each node, colourings where the black nodes form a connected set holding it, modulo ``mod``."""
    if mod < 1:
        raise ValueError("modulus must be positive")
    adj, parent, order = _rooted(n, edges)
    children = [[c for c in adj[node] if c != parent[node]] for node in range(n)]

    # down: colourings of the subtree with the node black.
    down = [1] * n
    for node in reversed(order):
        value = 1
        for child in children[node]:
            value = value * (down[child] + 1) % mod
        down[node] = value

    # up: colourings of everything outside the subtree, the all-white one included.
    up = [0] * n
    up[0] = 1
    combined = [0] * n
    for node in order:
        kids = children[node]
        prefix = [1]
        for child in kids:
            prefix.append(prefix[-1] * (down[child] + 1) % mod)
        suffix = [1]
        for child in reversed(kids):
            suffix.append(suffix[-1] * (down[child] + 1) % mod)
        suffix.reverse()

        for i, child in enumerate(kids):
            up[child] = (1 + prefix[i] * suffix[i + 1] % mod * up[node]) % mod
        combined[node] = up[node] * down[node] % mod

    return combined