import random

import pytest

from algokit.kmp import compute_failure_function, find_matches


def test_failure_function_example():
    assert compute_failure_function("abab") == [0, 0, 0, 1, 2]


def test_failure_function_is_longest_border():
    rng = random.Random(5)
    for _ in range(50):
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 12)))
        fail = compute_failure_function(pattern)
        assert len(fail) == len(pattern) + 1
        for i in range(1, len(pattern) + 1):
            k = fail[i]
            assert k < i
            assert pattern[:k] == pattern[i - k:i]
            assert all(pattern[:j] != pattern[i - j:i] for j in range(k + 1, i))


def test_overlapping_matches():
    assert find_matches("aba", "abababa") == [0, 2, 4]


def test_matches_agree_with_startswith():
    rng = random.Random(9)
    for _ in range(100):
        pattern = "".join(rng.choice("abc") for _ in range(rng.randint(1, 4)))
        text = "".join(rng.choice("abc") for _ in range(rng.randint(0, 30)))
        expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
        assert find_matches(pattern, text) == expected


def test_precomputed_failure_and_lists():
    pattern = [1, 1]
    fail = compute_failure_function(pattern)
    assert find_matches(pattern, [1, 1, 1, 2, 1, 1], fail) == [0, 1, 4]


def test_pattern_longer_than_text():
    assert find_matches("abcd", "abc") == []


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        find_matches("", "abc")