"""Primitive parsers: string, number, boolean, date, literal, enums, unknown.

Coercing parsers convert first and then run the same validation as an
uncoerced value, so a failed conversion is reported as an ordinary type
error.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from fundament.errors import ParseError
from fundament.guards import is_boolean, is_number, is_string, is_valid_date, is_valid_number
from fundament.parsers.core import Parser, type_error
from fundament.types.result import Err, Ok, Result
from fundament.util import Type

__all__ = [
    'boolean',
    'date',
    'enums',
    'literal',
    'number',
    'string',
    'unknown',
]

type Literal = str | int | float | bool | None

MS_PER_SECOND = 1000


def _strict_equals(a: object, b: object) -> bool:
    """Equality that does not let booleans stand in for numbers."""
    if is_boolean(a) != is_boolean(b):
        return False
    return a == b


def _to_number(value: Any) -> Any:
    """Best-effort numeric conversion; returns NaN when it fails."""
    match value:
        case bool():
            return int(value)
        case int() | float():
            return value
        case str():
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                pass
            try:
                return float(text)
            except ValueError:
                return math.nan
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def _to_datetime(value: Any) -> Any:
    """Convert ISO 8601 strings and epoch milliseconds; leave anything else as is."""
    if is_string(value):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return value
    if is_number(value):
        try:
            return datetime.fromtimestamp(value / MS_PER_SECOND, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return value
    return value


def string(*, coerce: bool = False) -> Parser[str]:
    """Parse a ``str``.

    Args:
        coerce: Convert the input with ``str()`` before validating, so
            ``None`` becomes ``'None'``.
    """

    def parse(input: Any) -> Result[str, ParseError]:  # noqa: A002
        if coerce:
            input = str(input)
        return Ok(input) if is_string(input) else Err(type_error(Type.STRING, input))

    return Parser(Type.STRING.value, parse)


def number(*, coerce: bool = False) -> Parser[int | float]:
    """Parse a finite ``int`` or ``float``.

    ``bool``, NaN and infinities are rejected.

    Args:
        coerce: Convert strings, booleans and other numeric-like values
            before validating. Unconvertible input, ``None`` included,
            becomes NaN and fails.
    """

    def parse(input: Any) -> Result[int | float, ParseError]:  # noqa: A002
        if coerce:
            input = _to_number(input)
        return Ok(input) if is_valid_number(input) else Err(type_error(Type.NUMBER, input))

    return Parser(Type.NUMBER.value, parse)


def boolean() -> Parser[bool]:
    """Parse a ``bool``. No coercion: truthiness is not a boolean."""

    def parse(input: Any) -> Result[bool, ParseError]:  # noqa: A002
        return Ok(input) if is_boolean(input) else Err(type_error(Type.BOOLEAN, input))

    return Parser(Type.BOOLEAN.value, parse)


def date(*, coerce: bool = False) -> Parser[datetime]:
    """Parse a ``datetime``.

    Args:
        coerce: Accept ISO 8601 strings and epoch timestamps in
            milliseconds (interpreted as UTC).
    """

    def parse(input: Any) -> Result[datetime, ParseError]:  # noqa: A002
        if coerce:
            input = _to_datetime(input)
        return Ok(input) if is_valid_date(input) else Err(type_error(Type.DATE, input))

    return Parser(Type.DATE.value, parse)


def literal[T: Literal](constant: T) -> Parser[T]:
    """Parse exactly ``constant``.

    Examples:
        >>> literal('admin')('admin')
        Ok(value='admin')
        >>> literal(1)(True).is_err()
        True
    """
    expected = str(constant)

    def parse(input: Any) -> Result[T, ParseError]:  # noqa: A002
        return Ok(constant) if _strict_equals(input, constant) else Err(type_error(expected, input))

    return Parser(expected, parse)


def enums(members: type[enum.Enum] | Mapping[str, Any]) -> Parser[Any]:
    """Parse one of the values of an Enum class or of a name-to-value mapping.

    For an Enum class the matching member is returned, so ``enums(Role)``
    turns ``'admin'`` into ``Role.ADMIN``. For a mapping the value itself is
    returned.
    """
    if isinstance(members, Mapping):
        values = list(members.values())
        lookup = None
    else:
        values = [m.value for m in members]
        lookup = members
    expected = ' | '.join(str(v) for v in values)

    def parse(input: Any) -> Result[Any, ParseError]:  # noqa: A002
        if lookup is not None and isinstance(input, lookup):
            return Ok(input)
        for value in values:
            if _strict_equals(input, value):
                return Ok(lookup(value) if lookup is not None else value)
        return Err(type_error(expected, input))

    return Parser(expected, parse)


unknown: Parser[Any] = Parser('unknown', Ok)
"""Identity parser: always succeeds with the input unchanged."""
