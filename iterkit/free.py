"""Convenience functions that accept any iterable."""

from __future__ import annotations

from functools import reduce
from itertools import chain
from typing import Any, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")
B = TypeVar("B")

_EMPTY = object()


def fold(iterable: Iterable[T], init: B, func: Callable[[B, T], B]) -> B:
    """Combine the elements into one value, starting from ``init``."""
    return reduce(func, iterable, init)


def join(iterable: Iterable[Any], sep: str) -> str:
    """The string form of every element, separated by ``sep``."""
    return sep.join(str(item) for item in iterable)


def concat(iterable: Iterable[Any]) -> Any:
    """Extend the first element with the contents of all the others.

    The result has the type of the first element; strings and bytes are
    concatenated, other collections are rebuilt from all the elements in
    order. Nothing is mutated. An empty iterable gives an empty list.
    """
    it = iter(iterable)
    first = next(it, _EMPTY)
    if first is _EMPTY:
        return []
    rest = list(it)
    if isinstance(first, str):
        return first + "".join(rest)
    if isinstance(first, (bytes, bytearray)):
        return type(first)(first + b"".join(rest))
    return type(first)(chain(first, *rest))


def maximum(iterable: Iterable[T]) -> Optional[T]:
    """The largest element, or ``None`` if there are none."""
    return max(iterable, default=None)


def minimum(iterable: Iterable[T]) -> Optional[T]:
    """The smallest element, or ``None`` if there are none."""
    return min(iterable, default=None)