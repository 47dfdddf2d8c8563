"""Lazy, one-shot formatting of iterables with a separator."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List


class Format:
    """Formats the elements of an iterable separated by ``sep``.

    The format spec given to ``format()`` or an f-string is applied to every
    element. The iterable is consumed, so the value can be formatted once only.
    """

    def __init__(self, iterable: Iterable[Any], sep: str) -> None:
        self._sep = sep
        self._iter: Any = iter(iterable)

    def _take(self) -> Any:
        if self._iter is None:
            raise RuntimeError("Format: was already formatted once")
        it, self._iter = self._iter, None
        return it

    def __str__(self) -> str:
        return self.__format__("")

    def __format__(self, spec: str) -> str:
        return self._sep.join(format(item, spec) for item in self._take())


class FormatWith:
    """Formats elements through ``func(item, write)``, separated by ``sep``.

    ``func`` calls ``write(value)`` any number of times to emit ``str(value)``.
    The value can be formatted once only.
    """

    def __init__(
        self,
        iterable: Iterable[Any],
        sep: str,
        func: Callable[[Any, Callable[[Any], None]], Any],
    ) -> None:
        self._sep = sep
        self._inner: Any = (iter(iterable), func)

    def __str__(self) -> str:
        if self._inner is None:
            raise RuntimeError("FormatWith: was already formatted once")
        (it, func), self._inner = self._inner, None
        parts: List[str] = []

        def write(value: Any) -> None:
            parts.append(str(value))

        for position, item in enumerate(it):
            if position and self._sep:
                parts.append(self._sep)
            func(item, write)
        return "".join(parts)


def format_items(iterable: Iterable[Any], sep: str) -> Format:
    """A lazily formatted view of ``iterable`` with ``sep`` between elements."""
    return Format(iterable, sep)


def format_with(
    iterable: Iterable[Any],
    sep: str,
    func: Callable[[Any, Callable[[Any], None]], Any],
) -> FormatWith:
    """A lazily formatted view of ``iterable`` using ``func`` for each element."""
    return FormatWith(iterable, sep, func)