"""Parser type and the shared error constructor."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from fundament.errors import ParseError
from fundament.types.result import Result
from fundament.util import get_type_of

__all__ = ['Parser', 'type_error']


class Parser[O](msgspec.Struct, frozen=True):
    """A labelled, pure function from untyped input to Result[O, ParseError].

    Calling a parser never raises for bad input; every failure comes back
    as ``Err(ParseError)``. The ``name`` is the diagnostic label used when a
    union reports which alternatives it tried.

    Attributes:
        name: Human readable descriptor of what the parser accepts.
        fn: The parsing function.

    Examples:
        >>> from fundament.parsers import number
        >>> number()(42)
        Ok(value=42)
        >>> number().named('age').name
        'age'
    """

    name: str
    fn: Callable[[Any], Result[O, ParseError]]

    def __call__(self, input: Any) -> Result[O, ParseError]:  # noqa: A002
        return self.fn(input)

    def named(self, name: str) -> Parser[O]:
        """Return a copy of this parser carrying a different label."""
        return msgspec.structs.replace(self, name=name)

    def __repr__(self) -> str:
        return f'Parser({self.name!r})'


def type_error(expected: str, input: Any) -> ParseError:  # noqa: A002
    """Build the error reported when ``input`` is not an ``expected``.

    Args:
        expected: Descriptor of the accepted type.
        input: The rejected value.

    Returns:
        A ParseError with an empty path.
    """
    actual = str(get_type_of(input))
    expected = str(expected)
    return ParseError(
        f"Type '{actual}' is not assignable to type '{expected}'",
        expected,
        actual,
        input,
    )
