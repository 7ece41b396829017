"""Runtime type guards used by the primitive parsers.

Every guard is a pure predicate. ``bool`` is deliberately not a number here
even though it subclasses ``int``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeIs

__all__ = [
    'is_array',
    'is_boolean',
    'is_date',
    'is_email',
    'is_function',
    'is_nil',
    'is_number',
    'is_plain_object',
    'is_present',
    'is_string',
    'is_uuid',
    'is_valid_date',
    'is_valid_number',
]

EMAIL_MAX_LENGTH = 320

EMAIL_REGEX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r'@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?'
    r'(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$'
)

UUID_REGEX = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$',
    re.IGNORECASE,
)


def is_string(value: object) -> TypeIs[str]:
    return isinstance(value, str)


def is_number(value: object) -> TypeIs[int | float]:
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_valid_number(value: object) -> TypeIs[int | float]:
    """Return True for numbers that are neither NaN nor infinite."""
    if isinstance(value, float):
        return math.isfinite(value)
    return is_number(value)


def is_boolean(value: object) -> TypeIs[bool]:
    return isinstance(value, bool)


def is_nil(value: object) -> TypeIs[None]:
    return value is None


def is_present[T](value: T | None) -> TypeIs[T]:
    return value is not None


def is_function(value: object) -> TypeIs[Callable[..., Any]]:
    return callable(value)


def is_array(value: object) -> TypeIs[list[Any] | tuple[Any, ...]]:
    """Return True for lists and tuples.

    Strings and bytes are sequences too but are never treated as arrays.
    """
    return isinstance(value, list | tuple)


def is_plain_object(value: object) -> TypeIs[dict[Any, Any]]:
    return isinstance(value, dict)


def is_date(value: object) -> TypeIs[datetime]:
    return isinstance(value, datetime)


def is_valid_date(value: object) -> TypeIs[datetime]:
    """Return True for datetimes whose POSIX timestamp can be computed."""
    if not is_date(value):
        return False
    try:
        value.timestamp()
    except (OverflowError, OSError, ValueError):
        return False
    return True


def is_email(value: str) -> bool:
    """Check an address against a permissive RFC 5322 shape, 320 chars max."""
    return len(value) <= EMAIL_MAX_LENGTH and EMAIL_REGEX.fullmatch(value) is not None


def is_uuid(value: str) -> bool:
    """Check for a version 4 UUID in canonical 8-4-4-4-12 form."""
    return UUID_REGEX.fullmatch(value) is not None
