import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.groupby import chunks, group_by


def _reference(data, key):
    return [(k, list(g)) for k, g in itertools.groupby(data, key)]


def test_sequential_groups():
    data = [1, 1, 2, 3, 3, 3, 1]
    result = [(k, list(g)) for k, g in group_by(data, lambda x: x)]
    assert result == [(1, [1, 1]), (2, [2]), (3, [3, 3, 3]), (1, [1])]


def test_empty_input_has_no_groups():
    assert list(group_by([], lambda x: x)) == []


def test_none_keys_group_together():
    result = [(k, list(g)) for k, g in group_by([1, 2, 3], lambda x: None)]
    assert result == [(None, [1, 2, 3])]


def test_later_group_before_earlier_buffers():
    it = iter(group_by("aabbbc", lambda c: c))
    k1, g1 = next(it)
    k2, g2 = next(it)
    assert (k1, k2) == ("a", "b")
    assert list(g2) == ["b", "b", "b"]
    assert list(g1) == ["a", "a"]
    k3, g3 = next(it)
    assert (k3, list(g3)) == ("c", ["c"])
    assert next(it, None) is None


def test_groups_collected_then_read_in_reverse():
    data = [0, 0, 1, 2, 2, 2, 3, 3]
    groups = list(group_by(data, lambda x: x))
    read = [(k, list(g)) for k, g in reversed(groups)]
    assert list(reversed(read)) == _reference(data, lambda x: x)


def test_keys_only_when_groups_discarded():
    data = [5, 5, 6, 7, 7, 5]
    assert [k for k, _ in group_by(data, lambda x: x)] == [5, 6, 7, 5]


def test_group_is_exhausted_after_reading():
    (_, group), = list(group_by([4, 4], lambda x: x))
    assert list(group) == [4, 4]
    with pytest.raises(StopIteration):
        next(group)


def test_key_function_by_parity():
    data = [2, 4, 1, 3, 6]
    result = [(k, list(g)) for k, g in group_by(data, lambda x: x % 2)]
    assert result == _reference(data, lambda x: x % 2)


@given(st.lists(st.integers(0, 3)))
def test_sequential_matches_reference(data):
    result = [(k, list(g)) for k, g in group_by(data, lambda x: x)]
    assert result == _reference(data, lambda x: x)


@given(st.lists(st.integers(0, 3)))
def test_reverse_consumption_matches_reference(data):
    groups = list(group_by(data, lambda x: x))
    read = [(k, list(g)) for k, g in reversed(groups)]
    assert list(reversed(read)) == _reference(data, lambda x: x)


def test_chunks_sequential():
    result = [list(c) for c in chunks(range(7), 3)]
    assert result == [[0, 1, 2], [3, 4, 5], [6]]


def test_chunks_out_of_order():
    all_chunks = list(chunks("abcdef", 2))
    assert [list(c) for c in reversed(all_chunks)] == [["e", "f"], ["c", "d"], ["a", "b"]]


def test_chunks_empty():
    assert list(chunks([], 4)) == []


@pytest.mark.parametrize("size", [0, -1])
def test_chunks_bad_size(size):
    with pytest.raises(ValueError):
        chunks([1, 2], size)


@given(st.lists(st.integers()), st.integers(1, 5))
def test_chunks_invariants(data, size):
    parts = [list(c) for c in chunks(data, size)]
    assert [x for part in parts for x in part] == data
    assert all(len(part) == size for part in parts[:-1])
    if parts:
        assert 1 <= len(parts[-1]) <= size