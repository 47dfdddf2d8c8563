"""Result values (``Ok`` / ``Err``) and adaptors that transform streams of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result holding ``value``."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result holding ``error``."""

    error: E


Result = Union[Ok[T], Err[E]]


def _check_result(item: Any) -> None:
    if not isinstance(item, (Ok, Err)):
        raise TypeError(f"expected Ok or Err, got {type(item).__name__}")


def map_ok(iterable: Iterable[Result], func: Callable[[T], U]) -> Iterator[Result]:
    """Apply ``func`` to the value of every ``Ok``; pass every ``Err`` through unchanged."""
    for item in iterable:
        _check_result(item)
        if isinstance(item, Ok):
            yield Ok(func(item.value))
        else:
            yield item


def map_into(iterable: Iterable[Any], target: Callable[[Any], U]) -> Iterator[U]:
    """Convert each element by calling ``target`` on it."""
    for item in iterable:
        yield target(item)