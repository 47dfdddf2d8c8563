"""Adaptors that join adjacent elements: coalescing and run de-duplication."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Tuple, TypeVar

from iterkit.results import Err, Ok

T = TypeVar("T")

_EMPTY = object()


def coalesce(iterable: Iterable[T], func: Callable[[T, T], Any]) -> Iterator[T]:
    """Join adjacent elements with ``func``.

    ``func(previous, current)`` returns ``Ok(joined)`` to merge the two into
    ``joined``, or ``Err((a, b))`` to emit ``a`` and continue with ``b``.
    """
    it = iter(iterable)
    last = next(it, _EMPTY)
    if last is _EMPTY:
        return
    for item in it:
        outcome = func(last, item)
        if isinstance(outcome, Ok):
            last = outcome.value
        elif isinstance(outcome, Err):
            emitted, last = outcome.error
            yield emitted
        else:
            raise TypeError(f"coalesce function must return Ok or Err, got {type(outcome).__name__}")
    yield last


def dedup_by(iterable: Iterable[T], same: Callable[[T, T], bool]) -> Iterator[T]:
    """Drop elements that ``same`` deems equal to the first element of their run."""
    it = iter(iterable)
    last = next(it, _EMPTY)
    if last is _EMPTY:
        return
    for item in it:
        if not same(last, item):
            yield last
            last = item
    yield last


def dedup(iterable: Iterable[T]) -> Iterator[T]:
    """Collapse runs of equal consecutive elements into one."""
    return dedup_by(iterable, lambda a, b: a == b)


def dedup_by_with_count(
    iterable: Iterable[T], same: Callable[[T, T], bool]
) -> Iterator[Tuple[int, T]]:
    """Like :func:`dedup_by`, yielding ``(run_length, first_element)`` pairs."""
    it = iter(iterable)
    last = next(it, _EMPTY)
    if last is _EMPTY:
        return
    count = 1
    for item in it:
        if same(last, item):
            count += 1
        else:
            yield (count, last)
            last, count = item, 1
    yield (count, last)


def dedup_with_count(iterable: Iterable[T]) -> Iterator[Tuple[int, T]]:
    """Collapse runs of equal elements into ``(run_length, element)`` pairs."""
    return dedup_by_with_count(iterable, lambda a, b: a == b)