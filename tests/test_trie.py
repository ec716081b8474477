import random

from algokit.trie import Trie


def _naive(words, text, include_full):
    return sum(
        text.startswith(word) and (include_full or len(word) < len(text))
        for word in words
    )


def test_empty_trie_counts_nothing():
    trie = Trie()
    assert trie.count_prefixes("abc", True) == 0
    assert len(trie) == 1


def test_add_returns_stable_nodes():
    trie = Trie()
    first = trie.add("abc")
    assert trie.add("abc") == first
    assert trie.add("abd") != first
    assert trie.add("") == Trie.ROOT


def test_shared_prefixes_share_nodes():
    trie = Trie()
    trie.add("abc")
    size = len(trie)
    trie.add("ab")
    assert len(trie) == size


def test_counts_match_naive_random():
    rng = random.Random(3)
    trie = Trie()
    words = []
    for _ in range(150):
        text = "".join(rng.choice("abc") for _ in range(rng.randint(0, 6)))
        assert trie.count_prefixes(text, True) == _naive(words, text, True)
        assert trie.count_prefixes(text, False) == _naive(words, text, False)
        trie.add(text)
        words.append(text)


def test_include_full_difference_is_exact_copies():
    trie = Trie()
    for word in ["a", "ab", "ab", "abc"]:
        trie.add(word)
    with_full = trie.count_prefixes("ab", True)
    without_full = trie.count_prefixes("ab", False)
    assert with_full - without_full == 2
    assert without_full == 1


def test_missing_branch_stops_counting():
    trie = Trie()
    trie.add("x")
    trie.add("xyz")
    assert trie.count_prefixes("xq", True) == 1