"""Result: the outcome of an operation, either ``Ok(value)`` or ``Err(error)``.

`from_call` and `from_async` convert code that raises into code that
returns a Result.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fundament._logging import get_logger
from fundament.errors import UnwrapError

if TYPE_CHECKING:
    from fundament.types.option import NothingType, Some

__all__ = ['Err', 'Ok', 'Result', 'from_async', 'from_call', 'is_result']

logger = get_logger(__name__)


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """A successful outcome.

    Examples:
        >>> Ok(2).map(lambda n: n * 10)
        Ok(value=20)
        >>> Ok(2).ok()
        Some(value=2)
    """

    value: T

    # --- querying ---

    def is_ok(self) -> TypeIs[Ok[T]]:
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        return bool(pred(self.value))

    def is_err_and(self, pred: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        return False

    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Dispatch on the variant: ``on_ok(value)`` here."""
        return on_ok(self.value)

    # --- extracting ---

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Fail: an Ok holds no error.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('called Result.unwrap_err on an `Ok` value')

    def expect_err(self, message: str) -> NoReturn:
        raise UnwrapError(message)

    def unwrap_or(self, fallback: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, recover: Callable[[Any], T]) -> T:  # noqa: ARG002
        return self.value

    # --- transforming ---

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def map_or[U](self, fallback: U, fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return fn(self.value)

    def map_or_else[U](self, recover: Callable[[Any], U], fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return fn(self.value)

    def inspect(self, fn: Callable[[T], Any]) -> Ok[T]:
        """Run ``fn`` on the value for its side effect; return self."""
        fn(self.value)
        return self

    def inspect_err(self, fn: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def and_then[U, E](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a step that may itself fail.

        This is how parsers compose: each step sees the previous value only
        when everything before it succeeded.
        """
        return fn(self.value)

    def or_else(self, recover: Callable[[Any], Result[T, Any]]) -> Ok[T]:  # noqa: ARG002
        return self

    # --- combining ---

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        return other

    def or_(self, other: Result[T, Any]) -> Ok[T]:  # noqa: ARG002
        return self

    # --- converting ---

    def ok(self) -> Some[T]:
        from fundament.types.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        from fundament.types.option import Nothing

        return Nothing


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """A failed outcome.

    Examples:
        >>> Err('boom').unwrap_or(0)
        0
        >>> Err('boom').map_err(str.upper)
        Err(error='BOOM')
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        return True

    def is_ok_and(self, pred: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        return bool(pred(self.error))

    def match[U](self, on_ok: Callable[[Any], U], on_err: Callable[[E], U]) -> U:  # noqa: ARG002
        """Dispatch on the variant: ``on_err(error)`` here."""
        return on_err(self.error)

    def unwrap(self) -> NoReturn:
        """Fail: an Err holds no value.

        Raises:
            UnwrapError: Always. The error itself is not chained; inspect it
                with `unwrap_err` instead.
        """
        raise UnwrapError('called Result.unwrap on an `Err` value')

    def expect(self, message: str) -> NoReturn:
        raise UnwrapError(message)

    def unwrap_err(self) -> E:
        return self.error

    def expect_err(self, message: str) -> E:  # noqa: ARG002
        return self.error

    def unwrap_or[T](self, fallback: T) -> T:
        return fallback

    def unwrap_or_else[T](self, recover: Callable[[E], T]) -> T:
        """Compute a replacement value from the error."""
        return recover(self.error)

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err[F](self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def map_or[U](self, fallback: U, fn: Callable[[Any], U]) -> U:  # noqa: ARG002
        return fallback

    def map_or_else[U](self, recover: Callable[[E], U], fn: Callable[[Any], U]) -> U:  # noqa: ARG002
        return recover(self.error)

    def inspect(self, fn: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def inspect_err(self, fn: Callable[[E], Any]) -> Err[E]:
        """Run ``fn`` on the error for its side effect; return self."""
        fn(self.error)
        return self

    def and_then(self, fn: Callable[[Any], Result[Any, E]]) -> Err[E]:  # noqa: ARG002
        return self

    def or_else[T, F](self, recover: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Try to recover by turning the error into a new Result."""
        return recover(self.error)

    def and_(self, other: Result[Any, E]) -> Err[E]:  # noqa: ARG002
        return self

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        return other

    def ok(self) -> NothingType:
        from fundament.types.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        from fundament.types.option import Some

        return Some(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    return isinstance(value, Ok | Err)


def from_call[T](fn: Callable[[], T]) -> Result[T, Exception]:
    """Call ``fn`` and capture a raised ``Exception`` as ``Err``.

    ``BaseException`` subclasses such as KeyboardInterrupt are not captured.

    Examples:
        >>> from_call(lambda: int('42'))
        Ok(value=42)
        >>> from_call(lambda: int('x')).is_err()
        True
    """
    try:
        return Ok(fn())
    except Exception as e:
        logger.debug('captured exception', error=repr(e))
        return Err(e)


async def from_async[T](
    source: Awaitable[T] | Callable[[], Awaitable[T]],
) -> Result[T, Exception]:
    """Await ``source`` once and capture a raised ``Exception`` as ``Err``.

    Cancellation propagates to the caller.

    Args:
        source: An awaitable, or a zero-argument callable returning one.

    Example:
        ```python
        async def fetch() -> bytes: ...

        result = await from_async(fetch)
        ```
    """
    try:
        awaitable = source if inspect.isawaitable(source) else source()
        return Ok(await awaitable)
    except Exception as e:
        logger.debug('captured exception', error=repr(e))
        return Err(e)
