import random

import pytest

from algokit.seg_tree_beats import BeatsChange, BeatsSegment, SegTreeBeats


def _build(values):
    tree = SegTreeBeats()
    tree.build(BeatsSegment.of(v, 1) for v in values)
    return tree


def _random_change(rng):
    kind = rng.randrange(4)
    if kind == 0:
        return BeatsChange(to_add=rng.randint(-5, 5))
    if kind == 1:
        return BeatsChange(to_set=rng.randint(-10, 10))
    if kind == 2:
        return BeatsChange(to_max=rng.randint(-10, 10))
    return BeatsChange(to_add=rng.randint(-5, 5), to_max=rng.randint(-10, 10))


def _apply_value(value, change):
    result = BeatsSegment.of(value, 1).apply(1, change)
    return result.minimum


def test_empty_segment_is_identity_for_join():
    seg = BeatsSegment.of(4, 3)
    assert BeatsSegment().join(seg) == seg
    assert seg.join(BeatsSegment()) == seg
    assert BeatsSegment().is_empty()
    assert BeatsSegment.of(4, 0).is_empty()


def test_join_tracks_two_smallest_values():
    joined = BeatsSegment.of(5, 1).join(BeatsSegment.of(3, 1)).join(BeatsSegment.of(5, 1))
    assert joined.minimum == 3
    assert joined.min_count == 1
    assert joined.second_min == 5
    assert joined.second_count == 2
    assert joined.maximum == 5


def test_apply_max_above_second_min_needs_push():
    seg = BeatsSegment.of(1, 1).join(BeatsSegment.of(3, 1))
    assert seg.apply(2, BeatsChange(to_max=5)) is None
    raised = seg.apply(2, BeatsChange(to_max=2))
    assert raised.minimum == 2
    assert raised.sum == 2 + 3


def test_combine_matches_sequential_application():
    rng = random.Random(11)
    for _ in range(500):
        first, second = _random_change(rng), _random_change(rng)
        value = rng.randint(-10, 10)
        sequential = _apply_value(_apply_value(value, first), second)
        assert _apply_value(value, first.combine(second)) == sequential


def test_combine_with_set_returns_other():
    other = BeatsChange(to_set=7)
    assert BeatsChange(to_add=3, to_max=1).combine(other) == other
    assert not BeatsChange().has_change()


def test_random_operations_match_list():
    rng = random.Random(7)
    n = 13
    values = [rng.randint(-20, 20) for _ in range(n)]
    tree = _build(values)

    for _ in range(600):
        a = rng.randrange(n)
        b = rng.randint(a + 1, n)
        op = rng.randrange(5)
        x = rng.randint(-30, 30)

        if op == 0:
            tree.update(a, b, BeatsChange(to_max=x))
            values[a:b] = [max(v, x) for v in values[a:b]]
        elif op == 1:
            tree.update(a, b, BeatsChange(to_set=x))
            values[a:b] = [x] * (b - a)
        elif op == 2:
            tree.update(a, b, BeatsChange(to_add=x))
            values[a:b] = [v + x for v in values[a:b]]
        elif op == 3:
            seg = tree.query(a, b)
            assert seg.sum == sum(values[a:b])
            assert seg.minimum == min(values[a:b])
            assert seg.maximum == max(values[a:b])
        else:
            index = tree.find_last_subarray(lambda cur, add: add.maximum < x, n, a)
            expected = next((i for i in range(a, n) if values[i] >= x), n)
            assert index == expected

    full = tree.query_full()
    assert full.sum == sum(values)
    assert [seg.sum for seg in tree.to_list()[:n]] == values


def test_find_last_subarray_degenerate_rejection():
    tree = _build([1, 2, 3])
    assert tree.find_last_subarray(lambda cur, add: cur.sum + add.sum < 0, 3, 2) == 1


def test_invalid_range_raises():
    tree = _build([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(2, 1)
    with pytest.raises(IndexError):
        tree.update(0, 9, BeatsChange(to_add=1))