import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.adaptors import PutBack
from iterkit.filters import (
    filter_map_ok,
    filter_ok,
    positions,
    take_while_ref,
    tuple_combinations,
    update,
    while_some,
)
from iterkit.results import Err, Ok


@given(st.lists(st.integers(min_value=0, max_value=10)))
def test_take_while_ref_leaves_rest_in_put_back(data):
    pb = PutBack(data)
    taken = list(take_while_ref(pb, lambda x: x < 5))
    rest = list(pb)
    assert taken + rest == data
    assert all(x < 5 for x in taken)
    if rest:
        assert rest[0] >= 5


def test_take_while_ref_requires_put_back():
    with pytest.raises(TypeError):
        take_while_ref(iter([1, 2]), lambda x: True)


@given(st.lists(st.one_of(st.none(), st.integers())))
def test_while_some_stops_at_first_none(data):
    result = list(while_some(data))
    assert None not in result
    assert data[: len(result)] == result
    if len(result) < len(data):
        assert data[len(result)] is None


@pytest.mark.parametrize("n,k", [(5, 1), (5, 2), (5, 3), (4, 4), (3, 4)])
def test_tuple_combinations_count_and_order(n, k):
    result = list(tuple_combinations(range(n), k))
    assert len(result) == math.comb(n, k)
    assert all(len(t) == k for t in result)
    assert all(list(t) == sorted(set(t)) for t in result)
    assert result == sorted(result)


def test_tuple_combinations_pairs_of_four_columns():
    result = list(tuple_combinations(range(4), 2))
    assert result[0] == (0, 1)
    assert result[-1] == (2, 3)


def test_tuple_combinations_rejects_zero():
    with pytest.raises(ValueError):
        tuple_combinations([1, 2], 0)


def test_filter_ok_keeps_errors_and_matching_values():
    data = [Ok(1), Err("bad"), Ok(2), Ok(4), Err("worse")]
    result = list(filter_ok(data, lambda v: v % 2 == 0))
    assert result == [Err("bad"), Ok(2), Ok(4), Err("worse")]


def test_filter_ok_rejects_non_results():
    with pytest.raises(TypeError):
        list(filter_ok([Ok(1), 3], lambda v: True))


def test_filter_map_ok_maps_and_drops_none():
    data = [Ok(1), Ok(2), Err("bad"), Ok(3)]
    result = list(filter_map_ok(data, lambda v: v * 10 if v != 2 else None))
    assert result == [Ok(10), Err("bad"), Ok(30)]


def test_filter_map_ok_rejects_non_results():
    with pytest.raises(TypeError):
        list(filter_map_ok(["x"], lambda v: v))


@given(st.lists(st.integers()))
def test_positions_invariants(data):
    result = list(positions(data, lambda x: x > 0))
    assert all(data[i] > 0 for i in result)
    assert len(result) == sum(1 for x in data if x > 0)
    assert result == sorted(set(result))


def test_update_mutates_each_element():
    rows = [[1], [2], [3]]
    result = list(update(rows, lambda row: row.append(0)))
    assert result == [[1, 0], [2, 0], [3, 0]]
    assert all(a is b for a, b in zip(result, rows))


def test_update_is_lazy():
    seen = []
    gen = update([[1], [2]], seen.append)
    assert seen == []
    next(gen)
    assert seen == [[1]]