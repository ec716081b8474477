import pytest

from algokit.edit_distance import construct_edit_sequence, edit_distance, edit_distance_table

PAIRS = [
    ("kitten", "sitting"),
    ("", "abc"),
    ("abc", ""),
    ("same", "same"),
    ("flaw", "lawn"),
    ("intention", "execution"),
    ("a", "b"),
    ("", ""),
]


def test_classic_example():
    assert edit_distance("kitten", "sitting") == 3


def test_distance_to_empty_is_length():
    assert edit_distance("", "abcd") == len("abcd")
    assert edit_distance("abcd", "") == len("abcd")


@pytest.mark.parametrize("s, t", PAIRS)
def test_table_agrees_with_linear_memory(s, t):
    table = edit_distance_table(s, t)
    assert len(table) == len(s) + 1
    assert all(len(row) == len(t) + 1 for row in table)
    assert table[-1][-1] == edit_distance(s, t)
    for i in range(len(s) + 1):
        for j in range(len(t) + 1):
            assert table[i][j] == edit_distance(s[:i], t[:j])


@pytest.mark.parametrize("s, t", PAIRS)
def test_symmetric(s, t):
    assert edit_distance(s, t) == edit_distance(t, s)


@pytest.mark.parametrize("s, t", PAIRS)
def test_identity_is_zero(s, t):
    assert edit_distance(s, s) == 0


def test_triangle_inequality():
    words = ["kitten", "sitting", "mitten", "fitting", ""]
    for a in words:
        for b in words:
            for c in words:
                assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


@pytest.mark.parametrize("s, t", PAIRS)
def test_sequence_steps_are_single_edits(s, t):
    dist = edit_distance(s, t)
    sequence = construct_edit_sequence(s, t)
    assert len(sequence) == dist + 1
    assert sequence[0] == s
    assert sequence[-1] == t
    for before, after in zip(sequence, sequence[1:]):
        assert edit_distance(before, after) == 1