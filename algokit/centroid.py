"""Centroid decomposition of trees and path counting built on it."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable
from itertools import groupby
from typing import NamedTuple

from .fenwick import FenwickTree


class _Walk(NamedTuple):
    """Nodes reached from a root in depth-first preorder.

    ``subroots[i]`` is the root's child whose subtree holds ``nodes[i]`` (the
    root itself for the root), and ``weights[i]`` its weighted distance from
    the root.
    """

    nodes: list[int]
    subroots: list[int]
    weights: list[int]


class CentroidDecomposition:
    """Weighted tree on nodes ``0..n-1`` that can be split recursively at centroids."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("node count must not be negative")
        self.n = n
        self.adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        self.centroid_parent: list[int] = [-1] * n
        self._work: list[list[tuple[int, int]]] = []
        self._size: list[int] = [0] * n

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.n:
            raise IndexError(f"node {node} out of range [0, {self.n})")

    def add_edge(self, u: int, v: int, weight: int = 0) -> None:
        """Add the undirected edge ``u``-``v`` of the given weight."""
        self._check_node(u)
        self._check_node(v)
        if u == v:
            raise ValueError(f"self-loop at node {u}")
        self.adj[u].append((v, weight))
        self.adj[v].append((u, weight))

    def _require_tree(self, root: int) -> None:
        """Raise unless the component of ``root`` is acyclic."""
        seen = {root}
        stack = [root]
        degree_sum = 0
        while stack:
            node = stack.pop()
            degree_sum += len(self.adj[node])
            for neighbor, _ in self.adj[node]:
                if neighbor not in seen:
                    seen.add(neighbor)
                    stack.append(neighbor)
        if degree_sum // 2 != len(seen) - 1:
            raise ValueError("the graph around the root is not a tree")

    def _reset_work(self, root: int) -> None:
        self._check_node(root)
        self._require_tree(root)
        self._work = [list(edges) for edges in self.adj]
        self.centroid_parent = [-1] * self.n
        self._size = [0] * self.n

    def _erase_edge(self, source: int, target: int) -> None:
        edges = self._work[source]
        for i, (node, _) in enumerate(edges):
            if node == target:
                edges[i] = edges[-1]
                edges.pop()
                return
        raise ValueError(f"no edge from {source} to {target}")

    def _explore(self, root: int) -> _Walk:
        """Walk the current component of ``root``, recording subtree sizes."""
        nodes: list[int] = []
        parents: list[int] = []
        subroots: list[int] = []
        weights: list[int] = []
        stack = [(root, -1, root, 0)]

        while stack:
            node, parent, sub, weight = stack.pop()
            nodes.append(node)
            parents.append(parent)
            subroots.append(sub)
            weights.append(weight)
            for neighbor, edge_weight in reversed(self._work[node]):
                if neighbor != parent:
                    child_sub = neighbor if parent < 0 else sub
                    stack.append((neighbor, node, child_sub, weight + edge_weight))

        size = self._size
        for node in nodes:
            size[node] = 1
        for node, parent in zip(reversed(nodes), reversed(parents)):
            if parent >= 0:
                size[parent] += size[node]

        return _Walk(nodes, subroots, weights)

    def _centroid(self, root: int) -> tuple[int, _Walk]:
        walk = self._explore(root)
        total = len(walk.nodes)
        size = self._size

        # Keep stepping into a subtree holding at least half of the nodes.
        moved = True
        while moved:
            moved = False
            for neighbor, _ in self._work[root]:
                if size[neighbor] < size[root] and 2 * size[neighbor] >= total:
                    root = neighbor
                    moved = True
                    break

        return root, walk

    def _mark_parents(self, centroid: int, walk: _Walk) -> None:
        for node in walk.nodes:
            if node != centroid:
                self.centroid_parent[node] = centroid

    def decompose(self, root: int = 0) -> list[int]:
        """Decompose the component of ``root``; return each node's centroid parent.

        The top centroid, and nodes outside the component, get -1.
        """
        self._reset_work(root)
        self._decompose(root)
        return list(self.centroid_parent)

    def _decompose(self, root: int) -> None:
        centroid, walk = self._centroid(root)
        self._mark_parents(centroid, walk)

        for neighbor, _ in self._work[centroid]:
            self._erase_edge(neighbor, centroid)
        for neighbor, _ in self._work[centroid]:
            self._decompose(neighbor)

    def _count_pairs(self, root: int, weight_max: int) -> int:
        weights = sorted(self._explore(root).weights)
        pairs = 0
        i, j = 0, len(weights) - 1
        while i < j:
            while j > i and weights[i] + weights[j] > weight_max:
                j -= 1
            pairs += j - i
            i += 1
        return pairs

    def _count_by_subtraction(self, root: int, k: int) -> int:
        centroid, walk = self._centroid(root)
        self._mark_parents(centroid, walk)

        # All pairs through the centroid's component, minus those inside one subtree.
        pairs = self._count_pairs(centroid, k)
        for neighbor, weight in self._work[centroid]:
            self._erase_edge(neighbor, centroid)
            pairs -= self._count_pairs(neighbor, k - 2 * weight)

        for neighbor, _ in self._work[centroid]:
            pairs += self._count_by_subtraction(neighbor, k)
        return pairs

    @staticmethod
    def _count_crossing(walk: _Walk, k: int) -> int:
        sorted_weights = sorted(walk.weights)
        tree = FenwickTree(len(sorted_weights))
        pairs = 0

        # Preorder keeps each subtree contiguous; query a subtree before adding it.
        entries = zip(walk.subroots, walk.weights)
        for _, group in groupby(entries, key=lambda entry: entry[0]):
            group_weights = [weight for _, weight in group]
            for weight in group_weights:
                pairs += tree.query(bisect_right(sorted_weights, k - weight))
            for weight in group_weights:
                tree.update(bisect_left(sorted_weights, weight), 1)

        return pairs

    def _count_by_prefixes(self, root: int, k: int) -> int:
        centroid, walk = self._centroid(root)
        self._mark_parents(centroid, walk)

        pairs = self._count_crossing(self._explore(centroid), k)
        for neighbor, _ in self._work[centroid]:
            self._erase_edge(neighbor, centroid)
            pairs += self._count_by_prefixes(neighbor, k)
        return pairs


def _tree(n: int, edges: Iterable[tuple[int, int, int]]) -> CentroidDecomposition:
    if n < 1:
        raise ValueError("a tree needs at least one node")
    decomposition = CentroidDecomposition(n)
    for u, v, weight in edges:
        decomposition.add_edge(u, v, weight)
    decomposition._reset_work(0)
    reached = len(decomposition._explore(0).nodes)
    if reached != n:
        raise ValueError("edges do not connect every node")
    return decomposition


def count_paths_by_subtraction(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> int:
    """Number of paths (unordered node pairs) of total weight at most ``k``.

    ``edges`` are ``(u, v, weight)`` triples forming a tree on ``0..n-1``.
    """
    return _tree(n, edges)._count_by_subtraction(0, k)


def count_paths_by_prefixes(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> int:
    """Same count as :func:`count_paths_by_subtraction`, via per-subtree prefix sums."""
    return _tree(n, edges)._count_by_prefixes(0, k)