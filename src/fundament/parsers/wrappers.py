"""Combinators deciding what a missing (``None``) input means."""

from __future__ import annotations

from typing import Any

from fundament.errors import ParseError
from fundament.parsers.core import Parser
from fundament.types.option import Nothing, Option, Some
from fundament.types.result import Ok, Result

__all__ = ['defaulted', 'maybe', 'optional']


def optional[T](parser: Parser[T]) -> Parser[Option[T]]:
    """Wrap a parser so that ``None`` becomes ``Ok(Nothing)``.

    Present values are parsed by ``parser`` and wrapped in ``Some``; its
    failures pass through unchanged.

    Examples:
        >>> from fundament.parsers import string
        >>> optional(string())(None)
        Ok(value=NothingType())
        >>> optional(string())('x')
        Ok(value=Some(value='x'))
    """

    def parse(input: Any) -> Result[Option[T], ParseError]:  # noqa: A002
        if input is None:
            return Ok(Nothing)
        return parser(input).map(Some)

    return Parser(f'optional[{parser.name}]', parse)


def defaulted[T](parser: Parser[T], default: T) -> Parser[T]:
    """Wrap a parser so that ``None`` becomes ``Ok(default)``."""

    def parse(input: Any) -> Result[T, ParseError]:  # noqa: A002
        if input is None:
            return Ok(default)
        return parser(input)

    return Parser(parser.name, parse)


def maybe[T](parser: Parser[T]) -> Parser[T | None]:
    """Wrap a parser so that ``None`` is accepted as is."""

    def parse(input: Any) -> Result[T | None, ParseError]:  # noqa: A002
        if input is None:
            return Ok(None)
        return parser(input)

    return Parser(f'{parser.name} | null', parse)
