"""Transform combinators: chain, map_, refine."""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any

from fundament.errors import ParseError
from fundament.parsers.core import Parser, type_error
from fundament.types.result import Err, Ok, Result

__all__ = ['chain', 'map_', 'refine']


def chain[T](parser: Parser[T], *fns: Callable[[T], T]) -> Parser[T]:
    """Pipe a successful value through plain functions, left to right.

    The functions cannot fail; use `map_` for a step that can.

    Examples:
        >>> from fundament.parsers import string
        >>> chain(string(), str.strip, str.lower)('  FOO  ')
        Ok(value='foo')
    """

    def parse(input: Any) -> Result[T, ParseError]:  # noqa: A002
        return parser(input).map(lambda value: reduce(lambda acc, f: f(acc), fns, value))

    return Parser(parser.name, parse)


def map_[T, O](parser: Parser[T], f: Callable[[T], Result[O, ParseError]]) -> Parser[O]:
    """Feed a successful value to a step that may itself fail."""

    def parse(input: Any) -> Result[O, ParseError]:  # noqa: A002
        return parser(input).and_then(f)

    return Parser(parser.name, parse)


def refine[T](parser: Parser[T], predicate: Callable[[T], bool], expected: str) -> Parser[T]:
    """Keep values satisfying ``predicate``; reject the rest as ``expected``.

    Examples:
        >>> from fundament.parsers import number
        >>> positive = refine(number(), lambda n: n > 0, 'positive number')
        >>> positive(-1).unwrap_err().expected
        'positive number'
    """

    def check(value: T) -> Result[T, ParseError]:
        return Ok(value) if predicate(value) else Err(type_error(expected, value))

    return map_(parser, check).named(expected)
