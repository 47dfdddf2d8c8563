"""Lazy grouping of consecutive elements by key, and lazy fixed-size chunking.

Groups and chunks may be consumed in any order. Elements are buffered only
when a later group is requested while an earlier one is still alive.
"""

from __future__ import annotations

import weakref
from collections import deque
from typing import Any, Callable, Deque, Hashable, Iterable, Iterator, List, Tuple

_EMPTY = object()
_NONE_DROPPED = -1


class _ChunkIndex:
    """Key function that numbers consecutive runs of ``size`` elements."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._index = 0
        self._key = 0

    def __call__(self, _item: Any) -> int:
        if self._index == self._size:
            self._key += 1
            self._index = 0
        self._index += 1
        return self._key


class _GroupState:
    """Shared state behind every group (or chunk) of one grouping operation."""

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Any]) -> None:
        self._key = key
        self._iter = iter(iterable)
        self._current_key: Any = _EMPTY
        self._current_elt: Any = _EMPTY
        self._done = False
        # Index of the group currently being buffered or visited.
        self._top_group = 0
        # Least group index for which elements are still buffered.
        self._oldest_buffered_group = 0
        # Group index of ``_buffer[0]``.
        self._bottom_group = 0
        self._buffer: List[Deque[Any]] = []
        self._dropped_group = _NONE_DROPPED
        self.next_index = 0

    def step(self, client: int) -> Any:
        """Next element for group ``client``, or the sentinel when it is finished."""
        if client < self._oldest_buffered_group:
            return _EMPTY
        if client < self._top_group or (
            client == self._top_group
            and len(self._buffer) > self._top_group - self._bottom_group
        ):
            return self._lookup_buffer(client)
        if self._done:
            return _EMPTY
        if client == self._top_group:
            return self._step_current()
        return self._step_buffering(client)

    def _lookup_buffer(self, client: int) -> Any:
        bufidx = client - self._bottom_group
        if client < self._oldest_buffered_group:
            return _EMPTY
        elt = _EMPTY
        if bufidx < len(self._buffer) and self._buffer[bufidx]:
            elt = self._buffer[bufidx].popleft()
        if elt is _EMPTY and client == self._oldest_buffered_group:
            self._oldest_buffered_group += 1
            while True:
                idx = self._oldest_buffered_group - self._bottom_group
                if idx < len(self._buffer) and not self._buffer[idx]:
                    self._oldest_buffered_group += 1
                else:
                    break
            nclear = self._oldest_buffered_group - self._bottom_group
            if nclear > 0 and nclear >= len(self._buffer) // 2:
                del self._buffer[:nclear]
                self._bottom_group = self._oldest_buffered_group
        return elt

    def _next_element(self) -> Any:
        elt = next(self._iter, _EMPTY)
        if elt is _EMPTY:
            self._done = True
        return elt

    def _step_buffering(self, client: int) -> Any:
        keep = self._top_group != self._dropped_group
        group: List[Any] = []
        if self._current_elt is not _EMPTY:
            elt, self._current_elt = self._current_elt, _EMPTY
            if keep:
                group.append(elt)
        first_elt = _EMPTY
        while True:
            elt = self._next_element()
            if elt is _EMPTY:
                break
            key = self._key(elt)
            old_key = self._current_key
            self._current_key = key
            if old_key is not _EMPTY and old_key != key:
                first_elt = elt
                break
            if keep:
                group.append(elt)
        if keep:
            self._push_next_group(group)
        if first_elt is not _EMPTY:
            self._top_group += 1
        return first_elt

    def _push_next_group(self, group: List[Any]) -> None:
        while self._top_group - self._bottom_group > len(self._buffer):
            if not self._buffer:
                self._bottom_group += 1
                self._oldest_buffered_group += 1
            else:
                self._buffer.append(deque())
        self._buffer.append(deque(group))

    def _step_current(self) -> Any:
        if self._current_elt is not _EMPTY:
            elt, self._current_elt = self._current_elt, _EMPTY
            return elt
        elt = self._next_element()
        if elt is _EMPTY:
            return _EMPTY
        key = self._key(elt)
        old_key = self._current_key
        self._current_key = key
        if old_key is not _EMPTY and old_key != key:
            self._current_elt = elt
            self._top_group += 1
            return _EMPTY
        return elt

    def group_key(self) -> Any:
        """Key of the group whose first element was just returned."""
        old_key, self._current_key = self._current_key, _EMPTY
        if not self._done:
            elt = self._next_element()
            if elt is not _EMPTY:
                key = self._key(elt)
                if old_key != key:
                    self._top_group += 1
                self._current_key = key
                self._current_elt = elt
        return old_key

    def drop_group(self, client: int) -> None:
        """Record that group ``client`` will not be read any more."""
        if self._dropped_group == _NONE_DROPPED or client > self._dropped_group:
            self._dropped_group = client


class _Member:
    """Common machinery of a single group or chunk iterator."""

    def __init__(self, state: _GroupState, index: int, first: Any) -> None:
        self._state = state
        self._index = index
        self._first = first
        weakref.finalize(self, state.drop_group, index)

    def _advance(self) -> Any:
        if self._first is not _EMPTY:
            elt, self._first = self._first, _EMPTY
            return elt
        elt = self._state.step(self._index)
        if elt is _EMPTY:
            raise StopIteration
        return elt


class Group(_Member):
    """The elements of one group produced by :class:`GroupBy`."""

    def __iter__(self) -> "Group":
        return self

    def __next__(self) -> Any:
        return self._advance()


class Chunk(_Member):
    """The elements of one chunk produced by :class:`IntoChunks`."""

    def __iter__(self) -> "Chunk":
        return self

    def __next__(self) -> Any:
        return self._advance()


class GroupBy:
    """Groups of consecutive elements sharing the same key.

    Iterating yields ``(key, Group)`` pairs. All iterators over one
    ``GroupBy`` share the same position.
    """

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Any]) -> None:
        self._state = _GroupState(iterable, key)

    def __iter__(self) -> Iterator[Tuple[Any, Group]]:
        state = self._state
        while True:
            index = state.next_index
            state.next_index += 1
            elt = state.step(index)
            if elt is _EMPTY:
                return
            key = state.group_key()
            yield key, Group(state, index, elt)


class IntoChunks:
    """Consecutive chunks of at most ``size`` elements; iterating yields ``Chunk`` objects."""

    def __init__(self, iterable: Iterable[Any], size: int) -> None:
        if size < 1:
            raise ValueError("chunk size must be at least 1")
        self._state = _GroupState(iterable, _ChunkIndex(size))

    def __iter__(self) -> Iterator[Chunk]:
        state = self._state
        while True:
            index = state.next_index
            state.next_index += 1
            elt = state.step(index)
            if elt is _EMPTY:
                return
            yield Chunk(state, index, elt)


def group_by(iterable: Iterable[Any], key: Callable[[Any], Hashable]) -> GroupBy:
    """Group consecutive elements of ``iterable`` that have equal ``key``."""
    return GroupBy(iterable, key)


def chunks(iterable: Iterable[Any], size: int) -> IntoChunks:
    """Split ``iterable`` lazily into chunks of ``size`` elements (the last may be shorter)."""
    return IntoChunks(iterable, size)