"""Flatten the iterables inside ``Ok`` results, passing errors through."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from iterkit.results import Err, Ok


def flatten_ok(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield ``Ok(x)`` for each ``x`` inside every ``Ok`` value; yield ``Err`` unchanged."""
    for item in iterable:
        if isinstance(item, Ok):
            for inner in item.value:
                yield Ok(inner)
        elif isinstance(item, Err):
            yield item
        else:
            raise TypeError(f"expected Ok or Err, got {type(item).__name__}")