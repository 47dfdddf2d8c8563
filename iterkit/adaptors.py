"""General iterator adaptors: put-back, interleaving, products, merging and more."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_EMPTY = object()


class PutBack(Iterator[T]):
    """An iterator that lets a single value be pushed back onto its front."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._top: Any = _EMPTY
        self._iter: Iterator[T] = iter(iterable)

    def with_value(self, value: T) -> "PutBack[T]":
        """Put back ``value`` and return this iterator."""
        self.put_back(value)
        return self

    def into_parts(self) -> Tuple[Optional[T], Iterator[T]]:
        """Split into the put-back value (``None`` if empty) and the rest."""
        top = None if self._top is _EMPTY else self._top
        self._top = _EMPTY
        return top, self._iter

    def put_back(self, value: T) -> None:
        """Put ``value`` back; a value already waiting is overwritten."""
        self._top = value

    def __iter__(self) -> "PutBack[T]":
        return self

    def __next__(self) -> T:
        if self._top is not _EMPTY:
            value, self._top = self._top, _EMPTY
            return value
        return next(self._iter)


def interleave(a: Iterable[T], b: Iterable[T]) -> Iterator[T]:
    """Alternate elements of ``a`` and ``b``; when one runs out, continue with the other."""
    first, second = iter(a), iter(b)
    while True:
        try:
            yield next(first)
        except StopIteration:
            yield from second
            return
        try:
            yield next(second)
        except StopIteration:
            yield from first
            return


def interleave_shortest(a: Iterable[T], b: Iterable[T]) -> Iterator[T]:
    """Alternate elements of ``a`` and ``b``, stopping as soon as the next one to use is empty."""
    current, following = iter(a), iter(b)
    while True:
        try:
            value = next(current)
        except StopIteration:
            return
        yield value
        current, following = following, current


def _product(a_it: Iterator[T], b_it: Iterator[U]) -> Iterator[Tuple[T, U]]:
    try:
        first = next(a_it)
    except StopIteration:
        return
    cache = []
    for y in b_it:
        cache.append(y)
        yield (first, y)
    if not cache:
        return
    for x in a_it:
        for y in cache:
            yield (x, y)


def cartesian_product(a: Iterable[T], b: Iterable[U]) -> Iterator[Tuple[T, U]]:
    """All pairs ``(x, y)`` with ``x`` from ``a`` and ``y`` from ``b``, ``a`` varying slowest.

    ``b`` is iterated once and its elements are replayed for every later ``x``.
    """
    return _product(iter(a), iter(b))


def batching(
    iterable: Iterable[T], func: Callable[[Iterator[T]], Optional[U]]
) -> Iterator[U]:
    """Repeatedly call ``func`` with the underlying iterator and yield what it returns.

    Iteration ends when ``func`` returns ``None`` or lets ``StopIteration`` escape.
    """
    it = iter(iterable)
    while True:
        try:
            value = func(it)
        except StopIteration:
            return
        if value is None:
            return
        yield value


def step(iterable: Iterable[T], n: int) -> Iterator[T]:
    """Yield every ``n``-th element, starting with the first.

    Raises ``ValueError`` if ``n`` is zero or negative.
    """
    if n <= 0:
        raise ValueError("step must be positive")
    return islice(iterable, 0, None, n)


def merge_by(
    a: Iterable[T], b: Iterable[T], less_than: Callable[[T, T], bool]
) -> Iterator[T]:
    """Merge two iterables; the head of ``a`` is taken when ``less_than(head_a, head_b)``."""
    it_a, it_b = iter(a), iter(b)
    head_a = next(it_a, _EMPTY)
    head_b = next(it_b, _EMPTY)
    while head_a is not _EMPTY and head_b is not _EMPTY:
        if less_than(head_a, head_b):
            yield head_a
            head_a = next(it_a, _EMPTY)
        else:
            yield head_b
            head_b = next(it_b, _EMPTY)
    if head_a is not _EMPTY:
        yield head_a
        yield from it_a
    elif head_b is not _EMPTY:
        yield head_b
        yield from it_b


def merge(a: Iterable[T], b: Iterable[T]) -> Iterator[T]:
    """Merge two ascending iterables into one ascending stream, preferring ``a`` on ties."""
    return merge_by(a, b, lambda x, y: x <= y)


def cons_tuples(iterable: Iterable[Tuple[Tuple[Any, ...], Any]]) -> Iterator[Tuple[Any, ...]]:
    """Turn elements shaped like ``((a, b), c)`` into ``(a, b, c)``."""
    for head, last in iterable:
        yield (*head, last)