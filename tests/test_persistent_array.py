import random

import pytest

from algokit.persistent_array import PersistentArray


def contents(arr, root):
    return [arr.get(root, i) for i in range(arr.tree_n)]


def test_initial_values_round_trip():
    data = [4, 8, 15, 16, 23, 42, 7]
    arr = PersistentArray(data)
    assert contents(arr, PersistentArray.ROOT) == data


def test_update_creates_new_version():
    arr = PersistentArray([0, 0, 0])
    root = arr.update(PersistentArray.ROOT, 1, 5)
    assert contents(arr, root) == [0, 5, 0]
    assert contents(arr, PersistentArray.ROOT) == [0, 0, 0]


def test_random_versions_match_snapshots():
    rng = random.Random(11)
    n = 13
    arr = PersistentArray([0] * n)
    versions = [(PersistentArray.ROOT, [0] * n)]

    for _ in range(80):
        base_root, base = rng.choice(versions)
        index = rng.randrange(n)
        value = rng.randint(-100, 100)
        root = arr.update(base_root, index, value)
        snapshot = list(base)
        snapshot[index] = value
        versions.append((root, snapshot))

    for root, snapshot in versions:
        assert contents(arr, root) == snapshot


def test_roots_are_distinct():
    arr = PersistentArray([1, 2, 3, 4])
    first = arr.update(PersistentArray.ROOT, 0, 9)
    second = arr.update(PersistentArray.ROOT, 0, 9)
    assert first != second
    assert arr.get(first, 0) == arr.get(second, 0) == 9


def test_errors():
    arr = PersistentArray([1, 2])
    with pytest.raises(IndexError):
        arr.get(PersistentArray.ROOT, 2)
    with pytest.raises(ValueError):
        arr.get(0, 0)
    with pytest.raises(IndexError):
        arr.update(PersistentArray.ROOT, -1, 3)
    with pytest.raises(ValueError):
        PersistentArray([]).get(PersistentArray.ROOT, 0)