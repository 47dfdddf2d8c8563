"""All minimal or maximal elements of an iterable, in their original order."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _min_set_impl(
    iterable: Iterable[T],
    key_for: Optional[Callable[[T], K]],
    compare: Callable[[T, T, Any, Any], int],
) -> List[T]:
    it = iter(iterable)
    try:
        first = next(it)
    except StopIteration:
        return []
    current_key = key_for(first) if key_for is not None else None
    result = [first]
    for element in it:
        key = key_for(element) if key_for is not None else None
        order = compare(element, result[0], key, current_key)
        if order < 0:
            result = [element]
            current_key = key
        elif order == 0:
            result.append(element)
    return result


def _max_set_impl(
    iterable: Iterable[T],
    key_for: Optional[Callable[[T], K]],
    compare: Callable[[T, T, Any, Any], int],
) -> List[T]:
    return _min_set_impl(
        iterable, key_for, lambda a, b, ka, kb: compare(b, a, kb, ka)
    )


def min_set(iterable: Iterable[T]) -> List[T]:
    """All elements equal to the minimum, in iteration order."""
    return _min_set_impl(iterable, None, lambda a, b, _ka, _kb: _cmp(a, b))


def min_set_by(iterable: Iterable[T], compare: Callable[[T, T], int]) -> List[T]:
    """All minimal elements by a three-way ``compare`` (negative, zero, positive)."""
    return _min_set_impl(iterable, None, lambda a, b, _ka, _kb: compare(a, b))


def min_set_by_key(iterable: Iterable[T], key: Callable[[T], K]) -> List[T]:
    """All elements whose ``key`` is minimal."""
    return _min_set_impl(iterable, key, lambda _a, _b, ka, kb: _cmp(ka, kb))


def max_set(iterable: Iterable[T]) -> List[T]:
    """All elements equal to the maximum, in iteration order."""
    return _max_set_impl(iterable, None, lambda a, b, _ka, _kb: _cmp(a, b))


def max_set_by(iterable: Iterable[T], compare: Callable[[T, T], int]) -> List[T]:
    """All maximal elements by a three-way ``compare`` (negative, zero, positive)."""
    return _max_set_impl(iterable, None, lambda a, b, _ka, _kb: compare(a, b))


def max_set_by_key(iterable: Iterable[T], key: Callable[[T], K]) -> List[T]:
    """All elements whose ``key`` is maximal."""
    return _max_set_impl(iterable, key, lambda _a, _b, ka, kb: _cmp(ka, kb))