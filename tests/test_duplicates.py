from collections import Counter

import pytest
from hypothesis import given, strategies as st

from iterkit.duplicates import duplicates, duplicates_by


def test_duplicates_basic():
    assert list(duplicates([1, 2, 1, 3, 1, 2])) == [1, 2]


def test_no_duplicates():
    assert list(duplicates([1, 2, 3])) == []
    assert list(duplicates([])) == []


def test_duplicates_by_yields_second_occurrence():
    words = ["a", "bb", "c", "dd", "e"]
    assert list(duplicates_by(words, len)) == ["c", "dd"]


def test_is_lazy():
    gen = duplicates(iter([5, 5, 6]))
    assert next(gen) == 5


def test_unhashable_rejected():
    with pytest.raises(TypeError):
        list(duplicates([[1], [1]]))


@given(st.lists(st.integers(min_value=0, max_value=5)))
def test_duplicates_invariants(items):
    result = list(duplicates(items))
    counts = Counter(items)
    assert len(result) == len(set(result))
    assert set(result) == {item for item, n in counts.items() if n >= 2}

    def second_index(value):
        return [i for i, x in enumerate(items) if x == value][1]

    assert [second_index(v) for v in result] == sorted(second_index(v) for v in result)


@given(st.lists(st.integers(min_value=-10, max_value=10)))
def test_duplicates_by_key_invariant(items):
    result = list(duplicates_by(items, abs))
    keys = [abs(x) for x in result]
    assert len(keys) == len(set(keys))
    key_counts = Counter(abs(x) for x in items)
    assert set(keys) == {k for k, n in key_counts.items() if n >= 2}