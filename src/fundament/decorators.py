"""Decorators turning raising functions into Result-returning ones.

``@safe`` is the decorator form of `fundament.types.result.from_call`;
``@safe_async`` is the decorator form of `from_async`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fundament._logging import get_logger
from fundament.types.result import Err, Ok

__all__ = ['safe', 'safe_async']

logger = get_logger(__name__)

type ExceptionTypes = tuple[type[BaseException], ...]


def _captured(wrapped: Callable[..., Any], error: BaseException) -> Err[BaseException]:
    logger.debug(
        'captured exception',
        function=getattr(wrapped, '__qualname__', repr(wrapped)),
        error=repr(error),
    )
    return Err(error)


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(func: Callable[..., Any] | None = None, *, exceptions: ExceptionTypes | None = None) -> Any:
    """Make ``func`` return ``Ok(result)``, or ``Err(exc)`` when it raises.

    Works bare (``@safe``) or configured (``@safe(exceptions=(KeyError,))``).
    Exceptions outside ``exceptions`` (default: ``Exception``) propagate.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def to_int(text: str) -> int:
            return int(text)

        to_int('7')    # Ok(value=7)
        to_int('x')    # Err(error=ValueError(...))
        ```
    """
    catch = exceptions or (Exception,)

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            return _captured(wrapped, e)
        return Ok(result)

    return wrapper if func is None else wrapper(func)


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[E]]]]: ...


def safe_async(func: Callable[..., Any] | None = None, *, exceptions: ExceptionTypes | None = None) -> Any:
    """Async counterpart of `safe`.

    Cancellation is a ``BaseException`` and is only captured when listed in
    ``exceptions``.
    """
    catch = exceptions or (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            result = await wrapped(*args, **kwargs)
        except catch as e:
            return _captured(wrapped, e)
        return Ok(result)

    return wrapper if func is None else wrapper(func)
