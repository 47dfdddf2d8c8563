"""Filtering and element-wise adaptors: take-while with put-back, Result filters and more."""

from __future__ import annotations

from itertools import combinations
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, TypeVar

from iterkit.adaptors import PutBack
from iterkit.results import Err, Ok

T = TypeVar("T")
U = TypeVar("U")

_EMPTY = object()


def _require_result(item: Any) -> None:
    if not isinstance(item, (Ok, Err)):
        raise TypeError(f"expected Ok or Err, got {type(item).__name__}")


def take_while_ref(put_back: PutBack, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    """Yield elements of ``put_back`` while ``predicate`` holds.

    The first element that fails the predicate is put back, so it remains
    the next element of ``put_back``.
    """
    if not isinstance(put_back, PutBack):
        raise TypeError("take_while_ref needs a PutBack iterator")
    return _take_while_ref(put_back, predicate)


def _take_while_ref(put_back: PutBack, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    while True:
        item = next(put_back, _EMPTY)
        if item is _EMPTY:
            return
        if not predicate(item):
            put_back.put_back(item)
            return
        yield item


def while_some(iterable: Iterable[Optional[T]]) -> Iterator[T]:
    """Yield elements until the first ``None``, which ends the iteration."""
    for item in iterable:
        if item is None:
            return
        yield item


def tuple_combinations(iterable: Iterable[T], k: int) -> Iterator[Tuple[T, ...]]:
    """All ``k``-tuples of elements in their original relative order.

    Raises ``ValueError`` if ``k`` is less than one.
    """
    if k < 1:
        raise ValueError("tuple size must be at least 1")
    return combinations(iterable, k)


def filter_ok(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> Iterator[Any]:
    """Keep ``Ok`` values for which ``predicate`` holds; pass every ``Err`` through."""
    for item in iterable:
        _require_result(item)
        if isinstance(item, Err) or predicate(item.value):
            yield item


def filter_map_ok(iterable: Iterable[Any], func: Callable[[Any], Optional[U]]) -> Iterator[Any]:
    """Map ``Ok`` values through ``func``, dropping those mapped to ``None``; pass ``Err`` through."""
    for item in iterable:
        _require_result(item)
        if isinstance(item, Err):
            yield item
            continue
        mapped = func(item.value)
        if mapped is not None:
            yield Ok(mapped)


def positions(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[int]:
    """Indices of the elements for which ``predicate`` holds."""
    for index, item in enumerate(iterable):
        if predicate(item):
            yield index


def update(iterable: Iterable[T], func: Callable[[T], Any]) -> Iterator[T]:
    """Call ``func`` on each element (to mutate it in place), then yield the element."""
    for item in iterable:
        func(item)
        yield item