"""Prefix trie that counts how many stored words prefix a string."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, int] = field(default_factory=dict)
    words: int = 0


class Trie:
    """Trie of words; node 0 is the root."""

    ROOT = 0

    def __init__(self) -> None:
        self._nodes: list[_TrieNode] = [_TrieNode()]

    def __len__(self) -> int:
        """Number of nodes, the root included."""
        return len(self._nodes)

    def _get_or_create_child(self, node: int, ch: str) -> int:
        children = self._nodes[node].children
        if ch not in children:
            children[ch] = len(self._nodes)
            self._nodes.append(_TrieNode())
        return children[ch]

    def add(self, word: str) -> int:
        """Insert ``word`` (duplicates are counted) and return its node."""
        node = self.ROOT
        for ch in word:
            node = self._get_or_create_child(node, ch)
        self._nodes[node].words += 1
        return node

    def count_prefixes(self, text: str, include_full: bool = True) -> int:
        """How many stored words are prefixes of ``text``.

        With ``include_full`` false, words equal to ``text`` itself are not counted.
        """
        node: int | None = self.ROOT
        count = 0

        for ch in text:
            count += self._nodes[node].words
            node = self._nodes[node].children.get(ch)
            if node is None:
                break

        if include_full and node is not None:
            count += self._nodes[node].words
        return count