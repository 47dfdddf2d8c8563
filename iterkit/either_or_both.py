"""A value holding a left item, a right item, or both."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple


class EitherOrBoth:
    """Base of ``Left``, ``Right`` and ``Both``."""

    __slots__ = ()

    def has_left(self) -> bool:
        """True for ``Left`` and ``Both``."""
        return isinstance(self, (Left, Both))

    def has_right(self) -> bool:
        """True for ``Right`` and ``Both``."""
        return isinstance(self, (Right, Both))

    def is_left(self) -> bool:
        """True only for ``Left``."""
        return isinstance(self, Left)

    def is_right(self) -> bool:
        """True only for ``Right``."""
        return isinstance(self, Right)

    def is_both(self) -> bool:
        """True only for ``Both``."""
        return isinstance(self, Both)

    def left(self) -> Optional[Any]:
        """The left value if present, else ``None``."""
        match self:
            case Left(value) | Both(value, _):
                return value
        return None

    def right(self) -> Optional[Any]:
        """The right value if present, else ``None``."""
        match self:
            case Right(value) | Both(_, value):
                return value
        return None

    def both(self) -> Optional[Tuple[Any, Any]]:
        """The pair ``(left, right)`` for ``Both``, else ``None``."""
        match self:
            case Both(a, b):
                return (a, b)
        return None

    def flip(self) -> "EitherOrBoth":
        """Swap the left and right sides."""
        match self:
            case Left(a):
                return Right(a)
            case Right(b):
                return Left(b)
            case Both(a, b):
                return Both(b, a)
        raise TypeError("unknown EitherOrBoth variant")

    def map_left(self, func: Callable[[Any], Any]) -> "EitherOrBoth":
        """Apply ``func`` to the left value, keeping the variant."""
        match self:
            case Both(a, b):
                return Both(func(a), b)
            case Left(a):
                return Left(func(a))
        return self

    def map_right(self, func: Callable[[Any], Any]) -> "EitherOrBoth":
        """Apply ``func`` to the right value, keeping the variant."""
        match self:
            case Both(a, b):
                return Both(a, func(b))
            case Right(b):
                return Right(func(b))
        return self

    def map_any(
        self, left_func: Callable[[Any], Any], right_func: Callable[[Any], Any]
    ) -> "EitherOrBoth":
        """Apply ``left_func`` and ``right_func`` to whichever values are present."""
        match self:
            case Left(a):
                return Left(left_func(a))
            case Right(b):
                return Right(right_func(b))
            case Both(a, b):
                return Both(left_func(a), right_func(b))
        raise TypeError("unknown EitherOrBoth variant")

    def left_and_then(self, func: Callable[[Any], "EitherOrBoth"]) -> "EitherOrBoth":
        """Replace the whole value by ``func(left)`` if a left value is present."""
        match self:
            case Left(a) | Both(a, _):
                return func(a)
        return self

    def right_and_then(self, func: Callable[[Any], "EitherOrBoth"]) -> "EitherOrBoth":
        """Replace the whole value by ``func(right)`` if a right value is present."""
        match self:
            case Right(b) | Both(_, b):
                return func(b)
        return self

    def or_(self, left_default: Any, right_default: Any) -> Tuple[Any, Any]:
        """A ``(left, right)`` pair, filling a missing side from the defaults."""
        match self:
            case Left(a):
                return (a, right_default)
            case Right(b):
                return (left_default, b)
            case Both(a, b):
                return (a, b)
        raise TypeError("unknown EitherOrBoth variant")

    def or_default(self) -> Tuple[Any, Any]:
        """A ``(left, right)`` pair with ``None`` for a missing side."""
        return self.or_(None, None)

    def or_else(
        self, left_factory: Callable[[], Any], right_factory: Callable[[], Any]
    ) -> Tuple[Any, Any]:
        """Like :meth:`or_`, but the missing side is computed only when needed."""
        match self:
            case Left(a):
                return (a, right_factory())
            case Right(b):
                return (left_factory(), b)
            case Both(a, b):
                return (a, b)
        raise TypeError("unknown EitherOrBoth variant")

    def reduce(self, func: Callable[[Any, Any], Any]) -> Any:
        """The single present value, or ``func(left, right)`` for ``Both``."""
        match self:
            case Left(a):
                return a
            case Right(b):
                return b
            case Both(a, b):
                return func(a, b)
        raise TypeError("unknown EitherOrBoth variant")

    def into_either(self) -> Optional["EitherOrBoth"]:
        """``Left`` or ``Right`` unchanged; ``None`` for ``Both``."""
        if isinstance(self, Both):
            return None
        return self


@dataclass(frozen=True)
class Left(EitherOrBoth):
    """Only a left value is present."""

    value: Any


@dataclass(frozen=True)
class Right(EitherOrBoth):
    """Only a right value is present."""

    value: Any


@dataclass(frozen=True)
class Both(EitherOrBoth):
    """Both a left and a right value are present."""

    left_value: Any
    right_value: Any