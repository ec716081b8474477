"""Aho-Corasick automaton for matching many words against a text at once."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

_MISSING = 2**63


@dataclass(slots=True)
class _Node:
    # suff: node of the longest strict suffix that is also in the trie.
    # dict_link: node of the longest strict suffix that ends a word.
    # word_index: the first word ending here, or -1.
    # word_count: words ending here or at any suffix of this node.
    suff: int = -1
    dict_link: int = -1
    depth: int = 0
    word_index: int = -1
    word_count: int = 0
    children: dict[str, int] = field(default_factory=dict)


class AhoCorasick:
    """Trie of ``words`` with suffix links; node 0 is the root.

    Nodes are numbered in breadth-first order, children in increasing
    character order.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.words: list[str] = list(words)
        self._build()

    def __len__(self) -> int:
        """Number of trie nodes, the root included."""
        return len(self._nodes)

    def _child(self, node: int, ch: str) -> int:
        return self._nodes[node].children.get(ch, -1)

    def _get_or_add_child(self, current: int, ch: str) -> int:
        node = self._nodes[current]
        child = node.children.get(ch)
        if child is not None:
            return child
        index = len(self._nodes)
        node.children[ch] = index
        self._nodes.append(_Node(depth=node.depth + 1))
        return index

    def _suffix_link(self, location: int, ch: str) -> int:
        """Node reached from ``location`` after reading ``ch``."""
        while location >= 0:
            child = self._child(location, ch)
            if child >= 0:
                return child
            location = self._nodes[location].suff
        return 0

    def _build(self) -> None:
        words = self.words
        count = len(words)
        self._nodes: list[_Node] = [_Node()]
        self._word_location = [0] * count

        # Insert level by level over the sorted words, so nodes come out in BFS order.
        remaining = sorted(range(count), key=lambda i: words[i])
        depth = 0
        while remaining:
            still = []
            for word in remaining:
                location = self._word_location[word]
                if depth >= len(words[word]):
                    node = self._nodes[location]
                    if node.word_index < 0:
                        node.word_index = word
                    node.word_count += 1
                else:
                    self._word_location[word] = self._get_or_add_child(location, words[word][depth])
                    still.append(word)
            remaining = still
            depth += 1

        self._defer = [self._nodes[location].word_index for location in self._word_location]
        self._by_depth = sorted(range(count), key=lambda i: -len(words[i]))

        for node in self._nodes:
            for ch, index in node.children.items():
                parent = self._suffix_link(node.suff, ch)
                target = self._nodes[index]
                suffix_parent = self._nodes[parent]
                target.suff = parent
                target.word_count += suffix_parent.word_count
                target.dict_link = suffix_parent.dict_link if suffix_parent.word_index < 0 else parent

    def _dict_node(self, current: int) -> int:
        node = self._nodes[current]
        return current if node.word_index >= 0 else node.dict_link

    def build_suffix_adj(self) -> list[list[int]]:
        """Children lists of the tree formed by the suffix links."""
        adj: list[list[int]] = [[] for _ in self._nodes]
        for index, node in enumerate(self._nodes[1:], start=1):
            adj[node.suff].append(index)
        return adj

    def count_matches(self, text: str) -> list[int]:
        """Number of occurrences of each word in ``text``."""
        matches = [0] * len(self.words)
        current = 0

        for ch in text:
            current = self._suffix_link(current, ch)
            dict_node = self._dict_node(current)
            if dict_node >= 0:
                matches[self._nodes[dict_node].word_index] += 1

        # Deepest words first, so each count is complete before it is passed on.
        for word in self._by_depth:
            dict_node = self._nodes[self._word_location[word]].dict_link
            if dict_node >= 0:
                matches[self._nodes[dict_node].word_index] += matches[word]

        return [matches[first] for first in self._defer]

    def find_first_occurrence(self, text: str) -> list[int | None]:
        """Index in ``text`` of the last character of each word's first occurrence.

        ``None`` for words that do not occur.
        """
        first = [_MISSING] * len(self.words)
        current = 0

        for i, ch in enumerate(text):
            current = self._suffix_link(current, ch)
            dict_node = self._dict_node(current)
            if dict_node >= 0:
                word = self._nodes[dict_node].word_index
                first[word] = min(first[word], i)

        for word in self._by_depth:
            dict_node = self._nodes[self._word_location[word]].dict_link
            if dict_node >= 0:
                parent = self._nodes[dict_node].word_index
                first[parent] = min(first[parent], first[word])

        return [None if first[d] == _MISSING else first[d] for d in self._defer]

    def count_matches_by_position(self, text: str) -> list[int]:
        """For each position of ``text``, how many word occurrences end there."""
        matches = []
        current = 0
        for ch in text:
            current = self._suffix_link(current, ch)
            matches.append(self._nodes[current].word_count)
        return matches

    def count_total_matches(self, text: str) -> int:
        """Total number of word occurrences in ``text``."""
        return sum(self.count_matches_by_position(text))