import pytest

from iterkit.free import concat, fold, join, maximum, minimum


def test_fold_max():
    assert fold([1.0, 2.0, 3.0], 0.0, max) == 3.0


def test_fold_empty_returns_init():
    assert fold([], "start", lambda acc, x: acc + x) == "start"


def test_fold_order_is_left_to_right():
    assert fold(["a", "b", "c"], "", lambda acc, x: acc + x) == "abc"


def test_join_numbers():
    assert join([1, 2, 3], ", ") == "1, 2, 3"


def test_join_empty():
    assert join([], ", ") == ""


def test_concat_lists():
    assert concat([[1], [2, 3], [4, 5, 6]]) == [1, 2, 3, 4, 5, 6]


def test_concat_does_not_mutate_first():
    first = [1]
    result = concat([first, [2]])
    assert result == [1, 2]
    assert first == [1]


def test_concat_strings():
    assert concat(["ab", "c", ""]) == "abc"


def test_concat_tuples_keep_type():
    assert concat([(1,), (2, 3)]) == (1, 2, 3)


def test_concat_empty():
    assert concat([]) == []


@pytest.mark.parametrize("values", [[3, 1, 2], [5], list(range(10))])
def test_maximum_minimum_agree_with_builtins(values):
    assert maximum(values) == max(values)
    assert minimum(values) == min(values)


def test_maximum_minimum_of_range():
    assert maximum(range(10)) == 9
    assert minimum(range(10)) == 0


def test_maximum_minimum_empty():
    assert maximum([]) is None
    assert minimum(iter([])) is None