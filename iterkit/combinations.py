"""Lazy ``k``-length combinations of an iterable, with and without replacement."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class _LazyBuffer:
    """Elements pulled from an iterator so far, pulled only on demand."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._items: List[Any] = []
        self._done = False

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def get_next(self) -> bool:
        """Pull one more element; return whether one was available."""
        if self._done:
            return False
        try:
            self._items.append(next(self._iter))
        except StopIteration:
            self._done = True
            return False
        return True

    def prefill(self, length: int) -> None:
        """Pull elements until ``length`` are held or the source is exhausted."""
        while len(self._items) < length and self.get_next():
            pass


class Combinations(Iterator[List[T]]):
    """All ``k``-length combinations of an iterable, in lexicographic index order.

    Elements are pulled from the source only as they are needed.
    """

    def __init__(self, iterable: Iterable[T], k: int) -> None:
        if k < 0:
            raise ValueError("combination length must not be negative")
        self._pool = _LazyBuffer(iterable)
        self._pool.prefill(k)
        self._indices: List[int] = list(range(k))
        self._first = True

    def k(self) -> int:
        """The length of each combination."""
        return len(self._indices)

    def n(self) -> int:
        """The number of source elements pulled so far; may grow while iterating."""
        return len(self._pool)

    def reset(self, k: int) -> None:
        """Start over with combinations of length ``k`` over the same source."""
        if k < 0:
            raise ValueError("combination length must not be negative")
        self._first = True
        self._indices = list(range(k))
        self._pool.prefill(k)

    def __iter__(self) -> "Combinations[T]":
        return self

    def __next__(self) -> List[T]:
        indices = self._indices
        pool = self._pool
        if self._first:
            if self.k() > self.n():
                raise StopIteration
            self._first = False
        elif not indices:
            raise StopIteration
        else:
            i = len(indices) - 1
            if indices[i] == len(pool) - 1:
                pool.get_next()
            while indices[i] == i + len(pool) - len(indices):
                if i > 0:
                    i -= 1
                else:
                    raise StopIteration
            indices[i] += 1
            for j in range(i + 1, len(indices)):
                indices[j] = indices[j - 1] + 1
        return [pool[index] for index in indices]


def combinations(iterable: Iterable[T], k: int) -> Combinations[T]:
    """All ``k``-length combinations of ``iterable`` as lists."""
    return Combinations(iterable, k)


def combinations_with_replacement(iterable: Iterable[T], k: int) -> Iterator[List[T]]:
    """All ``k``-length combinations of ``iterable`` where elements may repeat."""
    if k < 0:
        raise ValueError("combination length must not be negative")
    return _combinations_with_replacement(_LazyBuffer(iterable), k)


def _combinations_with_replacement(pool: _LazyBuffer, k: int) -> Iterator[List[Any]]:
    indices = [0] * k
    if k != 0 and not pool.get_next():
        return
    yield [pool[index] for index in indices]
    while True:
        pool.get_next()
        limit = len(pool) - 1
        target = next(
            (i for i in reversed(range(len(indices))) if indices[i] < limit), None
        )
        if target is None:
            return
        value = indices[target] + 1
        for i in range(target, len(indices)):
            indices[i] = value
        yield [pool[index] for index in indices]