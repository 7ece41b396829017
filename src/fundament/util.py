"""Small helpers shared by the parsers: type names, identity, raise_, parse_json."""

from __future__ import annotations

import math
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any, NoReturn

import msgspec

from fundament._logging import get_logger
from fundament.types.result import Err, Ok, Result

if TYPE_CHECKING:
    from fundament.errors import ParseError
    from fundament.parsers import Parser

__all__ = [
    'Type',
    'get_type_of',
    'identity',
    'parse_json',
    'raise_',
]

logger = get_logger(__name__)


class Type(StrEnum):
    """Descriptors reported as ``expected``/``actual`` in parse errors."""

    ARRAY = 'array'
    BOOLEAN = 'boolean'
    BYTES = 'bytes'
    DATE = 'date'
    ERROR = 'error'
    FUNCTION = 'function'
    INFINITY = 'infinity'
    NAN = 'nan'
    NULL = 'null'
    NUMBER = 'number'
    OBJECT = 'object'
    SET = 'set'
    STRING = 'string'


def get_type_of(value: object) -> Type:
    """Describe the runtime type of ``value``.

    Examples:
        >>> get_type_of(None)
        <Type.NULL: 'null'>
        >>> get_type_of(float('nan'))
        <Type.NAN: 'nan'>
    """
    match value:
        case None:
            return Type.NULL
        case bool():
            return Type.BOOLEAN
        case float() if math.isnan(value):
            return Type.NAN
        case float() if math.isinf(value):
            return Type.INFINITY
        case int() | float():
            return Type.NUMBER
        case str():
            return Type.STRING
        case bytes() | bytearray():
            return Type.BYTES
        case list() | tuple():
            return Type.ARRAY
        case dict():
            return Type.OBJECT
        case datetime():
            return Type.DATE
        case BaseException():
            return Type.ERROR
        case set() | frozenset():
            return Type.SET
    if callable(value):
        return Type.FUNCTION
    return Type.OBJECT


def identity[T](value: T) -> T:
    return value


def raise_(err: str | BaseException) -> NoReturn:
    """Raise ``err``, wrapping plain strings in a RuntimeError.

    Usable in expression position, e.g. inside a lambda.
    """
    if isinstance(err, str):
        raise RuntimeError(err)
    raise err


def parse_json[T](
    data: str | bytes,
    parser: Parser[T],
) -> Result[T, msgspec.DecodeError | ParseError]:
    """Decode JSON text and validate the decoded value with ``parser``.

    Malformed text yields ``Err(msgspec.DecodeError)``; well-formed text that
    the parser rejects yields ``Err(ParseError)``. Nothing is raised.

    Examples:
        >>> from fundament.parsers import array, number
        >>> parse_json('[1, 2]', array(number()))
        Ok(value=[1, 2])
        >>> parse_json('[1,', array(number())).is_err()
        True
    """
    try:
        decoded: Any = msgspec.json.decode(data)
    except msgspec.DecodeError as e:
        logger.debug('json decode failed', error=str(e))
        return Err(e)
    return Ok(decoded).and_then(parser)
