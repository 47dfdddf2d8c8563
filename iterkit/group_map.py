"""Collect values into a dict of lists keyed by group."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, List, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def into_group_map(pairs: Iterable[Tuple[K, V]]) -> Dict[K, List[V]]:
    """Map each key to the list of its values, in iteration order."""
    lookup: Dict[K, List[V]] = {}
    for key, value in pairs:
        lookup.setdefault(key, []).append(value)
    return lookup


def into_group_map_by(iterable: Iterable[V], key: Callable[[V], K]) -> Dict[K, List[V]]:
    """Group elements by ``key(element)``."""
    return into_group_map((key(value), value) for value in iterable)