"""Disjoint-set forests: plain, parity-tracking, and Kruskal's spanning tree on top."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class UnionFind:
    """Union by size with path compression over elements ``0..n`` (both ends included)."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self.parent = list(range(n + 1))
        self.size = [1] * (n + 1)
        self.components = n

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while x != root:
            following = self.parent[x]
            self.parent[x] = root
            x = following
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return whether they were apart."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self.size[x] < self.size[y]:
            x, y = y, x
        self.parent[y] = x
        self.size[x] += self.size[y]
        self.components -= 1
        return True

    def get_size(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return self.size[self.find(x)]


class BipartiteUnionFind:
    """Union-find that tracks, for each element, its parity relative to its root.

    ``bipartite[root]`` turns false once a set receives a contradictory edge.
    """

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self.parent = list(range(n + 1))
        self.size = [1] * (n + 1)
        self.bipartite = [True] * (n + 1)
        self.edge_parity = [False] * (n + 1)
        self.components = n

    def find(self, x: int) -> int:
        """Root of ``x``'s set; afterwards ``edge_parity[x]`` is relative to that root."""
        path = []
        root = x
        while self.parent[root] != root:
            path.append(root)
            root = self.parent[root]
        for node in reversed(path):
            self.edge_parity[node] ^= self.edge_parity[self.parent[node]]
            self.parent[node] = root
        return root

    def query_component(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def query_parity(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` lie on different sides; they must share a set."""
        if not self.query_component(x, y):
            raise ValueError(f"{x} and {y} are in different components")
        return self.edge_parity[x] ^ self.edge_parity[y]

    def unite(self, x: int, y: int, different: bool = True) -> tuple[bool, bool]:
        """Record that ``x`` and ``y`` differ (or match, with ``different`` false).

        Returns ``(merged, consistent)``: whether two sets were joined, and
        whether the edge agrees with the parities already known.
        """
        x_root, y_root = self.find(x), self.find(y)

        if x_root == y_root:
            consistent = not (self.edge_parity[x] ^ self.edge_parity[y] ^ different)
            if not consistent:
                self.bipartite[x_root] = False
            return False, consistent

        needed_parity = self.edge_parity[x] ^ self.edge_parity[y] ^ different
        x, y = x_root, y_root
        if self.size[x] < self.size[y]:
            x, y = y, x

        self.parent[y] = x
        self.size[x] += self.size[y]
        self.bipartite[x] = self.bipartite[x] and self.bipartite[y]
        self.edge_parity[y] = needed_parity
        self.components -= 1
        return True, True

    def add_different_edge(self, x: int, y: int) -> tuple[bool, bool]:
        """An ordinary edge: ``x`` and ``y`` are on different sides."""
        return self.unite(x, y, True)

    def add_same_edge(self, x: int, y: int) -> tuple[bool, bool]:
        """``x`` and ``y`` are on the same side."""
        return self.unite(x, y, False)


@dataclass
class _Edge:
    a: int
    b: int
    weight: Any
    index: int


class Kruskal:
    """Minimum spanning forest by Kruskal's algorithm.

    After :meth:`solve`, ``in_tree[i]`` tells whether the i-th added edge was chosen.
    """

    def __init__(self, n: int = 0) -> None:
        self.uf = UnionFind(n)
        self._edges: list[_Edge] = []
        self.in_tree: list[bool] = []

    def add_edge(self, a: int, b: int, weight: Any) -> None:
        self._edges.append(_Edge(a, b, weight, len(self._edges)))
        self.in_tree.append(False)

    def solve(self) -> Any:
        """Total weight of the minimum spanning forest."""
        self._edges.sort(key=lambda edge: edge.weight)
        total = 0
        for edge in self._edges:
            if self.uf.unite(edge.a, edge.b):
                total += edge.weight
                self.in_tree[edge.index] = True
        return total