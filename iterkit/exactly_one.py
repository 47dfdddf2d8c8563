"""Take exactly one element from an iterable."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TypeVar

T = TypeVar("T")


class ExactlyOneError(Exception):
    """Raised when an iterable does not hold exactly one element.

    The error is itself an iterator yielding every element of the original
    iterable, including the ones already pulled to detect the problem.
    """

    def __init__(self, first_two: Iterable[Any], inner: Iterable[Any]) -> None:
        self._pending = list(first_two)
        if len(self._pending) > 2:
            raise ValueError("at most two buffered elements are allowed")
        self._inner = iter(inner)
        super().__init__(str(self))

    def __str__(self) -> str:
        if self._pending:
            return "got at least 2 elements when exactly one was expected"
        return "got zero elements when exactly one was expected"

    def __repr__(self) -> str:
        if len(self._pending) == 2:
            first, second = self._pending
            return (
                f"ExactlyOneError[First: {first!r}, Second: {second!r}, "
                f"RemainingIter: {self._inner!r}]"
            )
        if self._pending:
            return (
                f"ExactlyOneError[Second: {self._pending[0]!r}, "
                f"RemainingIter: {self._inner!r}]"
            )
        return f"ExactlyOneError[RemainingIter: {self._inner!r}]"

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._pending:
            return self._pending.pop(0)
        return next(self._inner)


def exactly_one(iterable: Iterable[T]) -> T:
    """Return the only element of ``iterable``.

    Raises :class:`ExactlyOneError` if there are zero or more than one elements;
    only as many elements as needed are consumed.
    """
    it = iter(iterable)
    try:
        first = next(it)
    except StopIteration:
        raise ExactlyOneError((), it) from None
    try:
        second = next(it)
    except StopIteration:
        return first
    raise ExactlyOneError((first, second), it)