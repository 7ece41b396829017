"""Structural combinators: array, object_, record, tuple_, union, intersection.

Every combinator fails fast. When a child parser fails, the combinator that
introduced the nesting level prepends its own locator (index or key) to the
child's error path before returning it, so after a full unwind the path
reads from the root down to the failing value.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from fundament.errors import ParseError
from fundament.guards import is_array, is_plain_object
from fundament.lists import List
from fundament.parsers.core import Parser, type_error
from fundament.types.result import Err, Ok, Result
from fundament.util import Type

__all__ = [
    'array',
    'intersection',
    'list_',
    'object_',
    'record',
    'tuple_',
    'union',
]


def array[T](parser: Parser[T]) -> Parser[list[T]]:
    """Parse a list or tuple whose every item satisfies ``parser``.

    Examples:
        >>> from fundament.parsers import number
        >>> array(number())([1, 2, '3']).unwrap_err().path
        ('2',)
    """

    def parse(input: Any) -> Result[list[T], ParseError]:  # noqa: A002
        if not is_array(input):
            return Err(type_error(Type.ARRAY, input))
        items: list[T] = []
        for index, item in enumerate(input):
            result = parser(item)
            if isinstance(result, Err):
                return Err(result.error.prepend(str(index), index=True))
            items.append(result.value)
        return Ok(items)

    return Parser(f'array[{parser.name}]', parse)


def list_[T](parser: Parser[T]) -> Parser[List[T]]:
    """Like `array`, but the parsed items arrive as an immutable `List`.

    Examples:
        >>> from fundament.parsers import number
        >>> list_(number())([3, 1]).map(lambda items: items.sort().first())
        Ok(value=Some(value=1))
    """
    items = array(parser)

    def parse(input: Any) -> Result[List[T], ParseError]:  # noqa: A002
        return items(input).map(List.from_iter)

    return Parser(f'list[{parser.name}]', parse)


def object_(shape: Mapping[str, Parser[Any]]) -> Parser[dict[str, Any]]:
    """Parse a dict against a fixed shape of per-key parsers.

    Keys absent from the input are handed to their parser as ``None``.
    Keys absent from ``shape`` are dropped from the output.

    Examples:
        >>> from fundament.parsers import number, string
        >>> object_({'a': number(), 'b': string()})({'a': 1, 'b': 'x', 'c': True})
        Ok(value={'a': 1, 'b': 'x'})
    """
    fields = dict(shape)
    name = '{' + ', '.join(f'{key}: {parser.name}' for key, parser in fields.items()) + '}'

    def parse(input: Any) -> Result[dict[str, Any], ParseError]:  # noqa: A002
        if not is_plain_object(input):
            return Err(type_error(Type.OBJECT, input))
        out: dict[str, Any] = {}
        for key, parser in fields.items():
            result = parser(input.get(key))
            if isinstance(result, Err):
                return Err(result.error.prepend(key))
            out[key] = result.value
        return Ok(out)

    return Parser(name, parse)


def record[K, V](key_parser: Parser[K], value_parser: Parser[V]) -> Parser[dict[K, V]]:
    """Parse a dict whose every key and value satisfy the given parsers.

    Unlike `object_`, the keys are whatever the input holds. A failure on
    either the key or its value is located at that key.
    """

    def parse(input: Any) -> Result[dict[K, V], ParseError]:  # noqa: A002
        if not is_plain_object(input):
            return Err(type_error(Type.OBJECT, input))
        out: dict[K, V] = {}
        for raw_key, raw_value in input.items():
            key = key_parser(raw_key)
            if isinstance(key, Err):
                return Err(key.error.prepend(str(raw_key)))
            value = value_parser(raw_value)
            if isinstance(value, Err):
                return Err(value.error.prepend(str(raw_key)))
            out[key.value] = value.value
        return Ok(out)

    return Parser(f'record[{key_parser.name}, {value_parser.name}]', parse)


def tuple_(parsers: Sequence[Parser[Any]]) -> Parser[tuple[Any, ...]]:
    """Parse a list or tuple positionally, one parser per position.

    Extra trailing items are ignored. Missing positions are handed to their
    parser as ``None``.

    Examples:
        >>> from fundament.parsers import number, string
        >>> tuple_([number(), string()])([10, 'hi', 'extra'])
        Ok(value=(10, 'hi'))
    """
    members = tuple(parsers)

    def parse(input: Any) -> Result[tuple[Any, ...], ParseError]:  # noqa: A002
        if not is_array(input):
            return Err(type_error(Type.ARRAY, input))
        items: list[Any] = []
        for index, parser in enumerate(members):
            result = parser(input[index] if index < len(input) else None)
            if isinstance(result, Err):
                return Err(result.error.prepend(str(index), index=True))
            items.append(result.value)
        return Ok(tuple(items))

    return Parser('tuple[' + ', '.join(p.name for p in members) + ']', parse)


def union(parsers: Sequence[Parser[Any]]) -> Parser[Any]:
    """Try each parser in order and return the first success.

    When every alternative fails, the individual errors are discarded and a
    single error naming all alternatives is returned.

    Raises:
        ValueError: If no parsers are given.
    """
    alternatives = tuple(parsers)
    if not alternatives:
        msg = 'union requires at least one parser'
        raise ValueError(msg)
    expected = ' | '.join(p.name for p in alternatives)

    def parse(input: Any) -> Result[Any, ParseError]:  # noqa: A002
        for parser in alternatives:
            result = parser(input)
            if isinstance(result, Ok):
                return result
        return Err(type_error(expected, input))

    return Parser(expected, parse)


def intersection(parsers: Sequence[Parser[Mapping[str, Any]]]) -> Parser[dict[str, Any]]:
    """Run every parser on the same input and merge their dict outputs.

    Later parsers win on key collisions. The first failure is returned
    unchanged; intersection adds no nesting level, so no path segment.

    Raises:
        ValueError: If no parsers are given.
    """
    members = tuple(parsers)
    if not members:
        msg = 'intersection requires at least one parser'
        raise ValueError(msg)

    def parse(input: Any) -> Result[dict[str, Any], ParseError]:  # noqa: A002
        merged: dict[str, Any] = {}
        for parser in members:
            result = parser(input)
            if isinstance(result, Err):
                return result
            if not isinstance(result.value, Mapping):
                return Err(type_error(Type.OBJECT, result.value))
            merged.update(result.value)
        return Ok(merged)

    return Parser(' & '.join(p.name for p in members), parse)
