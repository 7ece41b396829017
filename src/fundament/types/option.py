"""Option: a value that is either present (``Some``) or absent (``Nothing``).

Only `from_nullable` treats ``None`` as absence. ``Some(None)`` is a present
value like any other.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fundament.errors import UnwrapError

if TYPE_CHECKING:
    from fundament.types.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_nullable', 'is_option']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """A present value.

    Examples:
        >>> Some(2).map(lambda n: n + 1)
        Some(value=3)
        >>> Some(2).filter(lambda n: n > 5)
        NothingType()
    """

    value: T

    # --- querying ---

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        return bool(pred(self.value))

    def match[U](self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Dispatch on the variant: ``on_some(value)`` here."""
        return on_some(self.value)

    # --- extracting ---

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or(self, fallback: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, make_fallback: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the value; ``make_fallback`` is never called."""
        return self.value

    # --- transforming ---

    def map[U](self, fn: Callable[[T], U]) -> Some[U]:
        """Apply ``fn`` to the value.

        The result is always wrapped in ``Some``, even when ``fn`` returns None.
        """
        return Some(fn(self.value))

    def map_or[U](self, fallback: U, fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return fn(self.value)

    def map_or_else[U](self, make_fallback: Callable[[], U], fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return fn(self.value)

    def and_then[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a step that may itself produce ``Nothing``."""
        return fn(self.value)

    def or_else(self, make_alternative: Callable[[], Option[T]]) -> Some[T]:  # noqa: ARG002
        return self

    def filter(self, pred: Callable[[T], bool]) -> Option[T]:
        """Keep the value only when ``pred`` accepts it."""
        return self if pred(self.value) else Nothing

    # --- combining ---

    def and_[U](self, other: Option[U]) -> Option[U]:
        return other

    def or_(self, other: Option[T]) -> Some[T]:  # noqa: ARG002
        return self

    # --- converting ---

    def ok_or[E](self, error: E) -> Ok[T]:  # noqa: ARG002
        from fundament.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, make_error: Callable[[], E]) -> Ok[T]:  # noqa: ARG002
        from fundament.types.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """The absent value.

    Use the shared `Nothing` instance. Any other instance compares equal to
    it, but identity checks (``opt is Nothing``) only hold for the constant.
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def is_some_and(self, pred: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        return False

    def match[U](self, on_some: Callable[[Any], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Dispatch on the variant: ``on_none()`` here."""
        return on_none()

    def unwrap(self) -> NoReturn:
        """Fail: there is no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('called Option.unwrap on a `None` value')

    def expect(self, message: str) -> NoReturn:
        """Fail with ``message`` as the UnwrapError text."""
        raise UnwrapError(message)

    def unwrap_or[T](self, fallback: T) -> T:
        return fallback

    def unwrap_or_else[T](self, make_fallback: Callable[[], T]) -> T:
        return make_fallback()

    def map(self, fn: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        return self

    def map_or[U](self, fallback: U, fn: Callable[[Any], U]) -> U:  # noqa: ARG002
        return fallback

    def map_or_else[U](self, make_fallback: Callable[[], U], fn: Callable[[Any], U]) -> U:  # noqa: ARG002
        return make_fallback()

    def and_then(self, fn: Callable[[Any], Option[Any]]) -> NothingType:  # noqa: ARG002
        return self

    def or_else[T](self, make_alternative: Callable[[], Option[T]]) -> Option[T]:
        """Recover by asking ``make_alternative`` for another Option."""
        return make_alternative()

    def filter(self, pred: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        return self

    def and_(self, other: Option[Any]) -> NothingType:  # noqa: ARG002
        return self

    def or_[T](self, other: Option[T]) -> Option[T]:
        return other

    def ok_or[E](self, error: E) -> Err[E]:
        """Turn absence into ``Err(error)``."""
        from fundament.types.result import Err

        return Err(error)

    def ok_or_else[E](self, make_error: Callable[[], E]) -> Err[E]:
        """Turn absence into ``Err(make_error())``; the factory runs only here."""
        from fundament.types.result import Err

        return Err(make_error())


Nothing: NothingType = NothingType()
"""The shared absent value."""

type Option[T] = Some[T] | NothingType


def from_nullable[T](value: T | None) -> Option[T]:
    """Map ``None`` to `Nothing` and anything else to ``Some(value)``.

    Falsy values such as ``0`` or ``''`` are present.

    Examples:
        >>> from_nullable(None)
        NothingType()
        >>> from_nullable(0)
        Some(value=0)
    """
    return Nothing if value is None else Some(value)


def is_option(value: object) -> TypeIs[Option[Any]]:
    return isinstance(value, Some | NothingType)
