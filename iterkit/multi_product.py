"""Cartesian product over any number of iterables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Tuple

_EMPTY = object()


@dataclass
class _ProductSlot:
    """One factor of the product: its elements, position and current value."""

    items: Tuple[Any, ...]
    pos: int = 0
    cur: Any = field(default=_EMPTY)

    def iterate(self) -> None:
        if self.pos < len(self.items):
            self.cur = self.items[self.pos]
            self.pos += 1
        else:
            self.cur = _EMPTY

    def reset(self) -> None:
        self.pos = 0

    def in_progress(self) -> bool:
        return self.cur is not _EMPTY

    def remaining(self) -> Tuple[Any, ...]:
        return self.items[self.pos:]


class MultiProduct(Iterator[List[Any]]):
    """Iterate the cartesian product of several iterables, rightmost varying fastest.

    Each element is a list with one value from every iterable. With no
    iterables at all, nothing is produced.
    """

    def __init__(self, iterables: Iterable[Iterable[Any]]) -> None:
        self._slots = [_ProductSlot(tuple(it)) for it in iterables]
        self._done = False

    def _iterate_last(self, end: int, state: Optional[bool]) -> bool:
        # ``state`` is None at the start of a step, else whether this is the first step.
        if end == 0:
            return False if state is None else state
        last = self._slots[end - 1]
        if state is None:
            on_first = not last.in_progress()
            state = on_first
        else:
            on_first = state
        if not on_first:
            last.iterate()
        if last.in_progress():
            return True
        if self._iterate_last(end - 1, state):
            last.reset()
            last.iterate()
            return last.in_progress()
        return False

    def _in_progress(self) -> bool:
        return bool(self._slots) and self._slots[-1].in_progress()

    def __iter__(self) -> "MultiProduct":
        return self

    def __next__(self) -> List[Any]:
        if self._done or not self._iterate_last(len(self._slots), None):
            self._done = True
            raise StopIteration
        return [slot.cur for slot in self._slots]

    def count(self) -> int:
        """The number of products still to come."""
        if not self._slots or self._done:
            return 0
        if not self._in_progress():
            total = 1
            for slot in self._slots:
                total *= len(slot.remaining())
            return total
        total = 0
        for slot in self._slots:
            total = total * len(slot.items) + len(slot.remaining())
        return total

    def last(self) -> Optional[List[Any]]:
        """The last remaining element of every factor, or ``None`` if any factor is spent."""
        lasts = []
        for slot in self._slots:
            rest = slot.remaining()
            if not rest:
                return None
            lasts.append(rest[-1])
        return lasts


def multi_cartesian_product(iterables: Iterable[Iterable[Any]]) -> MultiProduct:
    """The cartesian product of all ``iterables`` as lists."""
    return MultiProduct(iterables)