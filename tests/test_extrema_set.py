from hypothesis import given, strategies as st

from iterkit.extrema_set import (
    max_set,
    max_set_by,
    max_set_by_key,
    min_set,
    min_set_by,
    min_set_by_key,
)


def test_empty_inputs_give_empty_lists():
    assert min_set([]) == []
    assert max_set([]) == []
    assert min_set_by_key([], len) == []
    assert max_set_by([], lambda a, b: 0) == []


def test_min_set_keeps_all_ties():
    assert min_set([3, 1, 2, 1]) == [1, 1]


def test_max_set_keeps_all_ties():
    assert max_set([3, 1, 3, 2]) == [3, 3]


def test_by_key_preserves_order():
    words = ["bb", "a", "c", "dd"]
    assert min_set_by_key(words, len) == ["a", "c"]
    assert max_set_by_key(words, len) == ["bb", "dd"]


def test_by_compare():
    pairs = [(1, "x"), (0, "y"), (0, "z"), (1, "w")]
    by_first = lambda a, b: (a[0] > b[0]) - (a[0] < b[0])
    assert min_set_by(pairs, by_first) == [(0, "y"), (0, "z")]
    assert max_set_by(pairs, by_first) == [(1, "x"), (1, "w")]


@given(st.lists(st.integers(), min_size=1))
def test_min_set_invariant(xs):
    result = min_set(xs)
    assert all(x == min(xs) for x in result)
    assert len(result) == xs.count(min(xs))


@given(st.lists(st.integers(), min_size=1))
def test_max_set_invariant(xs):
    result = max_set(xs)
    assert all(x == max(xs) for x in result)
    assert len(result) == xs.count(max(xs))


@given(st.lists(st.integers()))
def test_by_key_result_is_subsequence(xs):
    result = max_set_by_key(xs, abs)
    it = iter(xs)
    assert all(any(r == x for x in it) for r in result)