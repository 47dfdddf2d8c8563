import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.formatting import format_items, format_with


def _recording_source(consumed):
    for i in range(3):
        consumed.append(i)
        yield i


def test_format_default():
    assert str(format_items([1, 2, 3], ", ")) == "1, 2, 3"


def test_format_empty():
    assert str(format_items([], ", ")) == ""


def test_format_single_has_no_separator():
    assert str(format_items(["x"], "--")) == "x"


def test_format_spec_applied_to_each():
    assert f"{format_items([1.25, 2.5], ', '):.1f}" == "1.2, 2.5"


def test_format_is_lazy_until_formatted():
    consumed = []
    view = format_items(_recording_source(consumed), "|")
    assert consumed == []
    assert str(view) == "0|1|2"
    assert consumed == [0, 1, 2]


def test_format_twice_raises():
    view = format_items([1], ",")
    assert str(view) == "1"
    with pytest.raises(RuntimeError):
        str(view)


@given(st.lists(st.integers()))
def test_format_round_trip(values):
    text = str(format_items(values, ","))
    parsed = [int(part) for part in text.split(",")] if text else []
    assert parsed == values


def test_format_with_writes_pieces():
    def show(item, write):
        write(item)
        write("!")

    assert str(format_with(["a", "b"], "|", show)) == "a!|b!"


def test_format_with_empty_separator():
    assert str(format_with([1, 2], "", lambda item, write: write(item))) == "12"


def test_format_with_twice_raises():
    view = format_with([1], ",", lambda item, write: write(item))
    assert str(view) == "1"
    with pytest.raises(RuntimeError):
        str(view)


@given(st.lists(st.integers(min_value=0)))
def test_format_with_round_trip(values):
    text = str(format_with(values, ";", lambda item, write: write(item)))
    parsed = [int(part) for part in text.split(";")] if text else []
    assert parsed == values