"""Lock-step comparison of two iterables, reporting where they first differ."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Union

from iterkit.adaptors import PutBack

_EMPTY = object()


@dataclass(eq=False)
class FirstMismatch:
    """Elements at ``index`` differ; ``left`` and ``right`` start with the mismatching pair."""

    index: int
    left: PutBack
    right: PutBack


@dataclass(eq=False)
class Shorter:
    """The second iterable held ``count`` elements; ``remaining`` is the rest of the first."""

    count: int
    remaining: PutBack


@dataclass(eq=False)
class Longer:
    """The first iterable held ``count`` elements; ``remaining`` is the rest of the second."""

    count: int
    remaining: PutBack


Diff = Union[FirstMismatch, Shorter, Longer]


def diff_with(
    a: Iterable[Any], b: Iterable[Any], is_equal: Callable[[Any, Any], bool]
) -> Optional[Diff]:
    """Compare ``a`` and ``b`` element by element; ``None`` if they match completely."""
    it_a, it_b = iter(a), iter(b)
    index = 0
    for elem_a in it_a:
        elem_b = next(it_b, _EMPTY)
        if elem_b is _EMPTY:
            return Shorter(index, PutBack(it_a).with_value(elem_a))
        if not is_equal(elem_a, elem_b):
            return FirstMismatch(
                index,
                PutBack(it_a).with_value(elem_a),
                PutBack(it_b).with_value(elem_b),
            )
        index += 1
    elem_b = next(it_b, _EMPTY)
    if elem_b is _EMPTY:
        return None
    return Longer(index, PutBack(it_b).with_value(elem_b))