"""Yield elements that occur more than once."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def duplicates_by(iterable: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield each element whose ``key`` was seen before, once per key.

    The element yielded is the second one with that key.
    """
    produced: Dict[Any, bool] = {}
    for item in iterable:
        k = key(item)
        seen = produced.get(k)
        if seen is None:
            produced[k] = False
        elif not seen:
            produced[k] = True
            yield item


def duplicates(iterable: Iterable[T]) -> Iterator[T]:
    """Yield each element that occurs more than once, at its second occurrence."""
    return duplicates_by(iterable, lambda item: item)