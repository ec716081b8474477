import os

import pytest

from algokit.suffix_array import SparseTable, SuffixArray

TEXTS = ["banana", "mississippi", "aaaaaa", "abcabcab", "z", "abracadabra", "ba"]


def test_banana_worked_example():
    sa = SuffixArray("banana")
    assert sa.suffix == [5, 3, 1, 0, 4, 2]
    assert sa.lcp == [0, 1, 3, 0, 0, 2]


@pytest.mark.parametrize("text", TEXTS)
def test_suffixes_are_sorted_permutation(text):
    sa = SuffixArray(text)
    assert sorted(sa.suffix) == list(range(len(text)))
    for prev, cur in zip(sa.suffix, sa.suffix[1:]):
        assert text[prev:] < text[cur:]


@pytest.mark.parametrize("text", TEXTS)
def test_rank_is_inverse(text):
    sa = SuffixArray(text)
    for r, s in enumerate(sa.suffix):
        assert sa.rank[s] == r


@pytest.mark.parametrize("text", TEXTS)
def test_lcp_matches_common_prefixes(text):
    sa = SuffixArray(text)
    assert sa.lcp[0] == 0
    for r in range(1, len(text)):
        common = os.path.commonprefix([text[sa.suffix[r]:], text[sa.suffix[r - 1]:]])
        assert sa.lcp[r] == len(common)


@pytest.mark.parametrize("text", TEXTS)
def test_get_lcp_and_compare(text):
    sa = SuffixArray(text)
    n = len(text)
    for a in range(n):
        for b in range(n):
            common = os.path.commonprefix([text[a:], text[b:]])
            assert sa.get_lcp(a, b) == len(common)
            x, y = text[a:], text[b:]
            assert sa.compare(a, b) == (x > y) - (x < y)
            x2, y2 = text[a:a + 2], text[b:b + 2]
            assert sa.compare(a, b, 2) == (x2 > y2) - (x2 < y2)


@pytest.mark.parametrize("text", TEXTS)
def test_distinct_substrings(text):
    sa = SuffixArray(text)
    substrings = {text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)}
    assert sa.distinct_substrings() == len(substrings)


def test_get_lcp_out_of_range_is_zero():
    sa = SuffixArray("abc")
    assert sa.get_lcp(3, 0) == 0


def test_without_rmq_raises_for_distinct_suffixes():
    sa = SuffixArray("abab", build_rmq=False)
    assert sa.get_lcp(1, 1) == 3
    with pytest.raises(RuntimeError):
        sa.get_lcp(0, 2)


def test_works_on_integer_sequences():
    data = [3, 1, 3, 1, 2]
    sa = SuffixArray(data)
    for prev, cur in zip(sa.suffix, sa.suffix[1:]):
        assert data[prev:] < data[cur:]


def test_empty_text():
    sa = SuffixArray("")
    assert sa.suffix == []
    assert sa.distinct_substrings() == 0


@pytest.mark.parametrize("values", [[5, 2, 8, 1, 9, 3, 7], [4], [2, 2, 1, 3]])
def test_sparse_table_min_and_max(values):
    low = SparseTable(values)
    high = SparseTable(values, maximum_mode=True)
    for a in range(len(values)):
        for b in range(a + 1, len(values) + 1):
            assert low.query(a, b) == min(values[a:b])
            assert high.query(a, b) == max(values[a:b])


def test_sparse_table_rejects_empty_range():
    table = SparseTable([1, 2, 3])
    with pytest.raises(IndexError):
        table.query(1, 1)
    with pytest.raises(IndexError):
        table.query(0, 4)