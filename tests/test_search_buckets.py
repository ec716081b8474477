import random

import pytest

from algokit.search_buckets import SearchBuckets


def _naive(data, start, end, value):
    return sum(1 for x in data[start:end] if x < value)


def test_small_example():
    buckets = SearchBuckets([5, 1, 4, 2, 3])
    assert buckets.count_less_than(0, 5, 3) == 2
    assert buckets.count_less_than(2, 4, 5) == 2
    assert buckets.prefix_count_less_than(0, 100) == 0


@pytest.mark.parametrize("n", [1, 7, 50, 300])
def test_all_ranges_match_naive(n):
    rng = random.Random(n)
    data = [rng.randint(-20, 20) for _ in range(n)]
    buckets = SearchBuckets(data)
    step = max(1, n // 25)
    for start in range(0, n + 1, step):
        for end in range(start, n + 1, step):
            value = rng.randint(-25, 25)
            assert buckets.count_less_than(start, end, value) == _naive(data, start, end, value)


def test_modifications_keep_counts_correct():
    rng = random.Random(99)
    n = 400
    data = [rng.randint(0, 1000) for _ in range(n)]
    buckets = SearchBuckets(data)
    for _ in range(500):
        index = rng.randrange(n)
        value = rng.randint(0, 1000)
        buckets.modify(index, value)
        data[index] = value
        start = rng.randint(0, n)
        end = rng.randint(start, n)
        bound = rng.randint(0, 1001)
        assert buckets.count_less_than(start, end, bound) == _naive(data, start, end, bound)
    assert buckets.values == data


def test_prefix_matches_range_from_zero():
    data = [3, 3, 1, 9, 0, 7, 2]
    buckets = SearchBuckets(data)
    for length in range(len(data) + 1):
        assert buckets.prefix_count_less_than(length, 4) == buckets.count_less_than(0, length, 4)


def test_empty_array_counts_nothing():
    buckets = SearchBuckets([])
    assert len(buckets) == 0
    assert buckets.count_less_than(0, 0, 10) == 0


def test_invalid_arguments_raise():
    buckets = SearchBuckets([1, 2, 3])
    with pytest.raises(IndexError):
        buckets.count_less_than(2, 1, 0)
    with pytest.raises(IndexError):
        buckets.count_less_than(0, 4, 0)
    with pytest.raises(IndexError):
        buckets.modify(3, 0)


def test_modify_with_duplicates():
    buckets = SearchBuckets([2, 2, 2, 2])
    buckets.modify(1, 0)
    assert buckets.count_less_than(0, 4, 2) == 1
    buckets.modify(1, 2)
    assert buckets.count_less_than(0, 4, 2) == 0
    assert buckets.count_less_than(0, 4, 3) == 4