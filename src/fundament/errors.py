"""Error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'ParseError',
    'ParseException',
    'UnwrapError',
]


class UnwrapError(RuntimeError):
    """Raised when a value is unwrapped from the wrong variant.

    This signals a programming error (calling ``unwrap`` on ``Nothing`` or
    on an ``Err``) and is never caught inside the package.
    """


# --- Parse Errors ---


class ParseError(msgspec.Struct, frozen=True):
    """Parsing failed - struct variant for Result[T, ParseError].

    Attributes:
        message: Human readable description of the failure.
        expected: Descriptor of the type the parser wanted.
        actual: Descriptor of the type it received.
        input: The offending raw value.
        path: Locators from the parse root down to the failure site.
        indexed: Per-segment flags, True where the segment is a sequence
            position rather than a mapping key. Segments without a flag
            count as keys.

    Examples:
        >>> err = ParseError("Type 'string' is not assignable to type 'number'", 'number', 'string', 'x')
        >>> err.prepend('2', index=True).prepend('items').path
        ('items', '2')
    """

    message: str
    expected: str
    actual: str
    input: Any = None
    path: tuple[str, ...] = ()
    indexed: tuple[bool, ...] = ()

    def prepend(self, segment: str, *, index: bool = False) -> ParseError:
        """Return a copy with ``segment`` placed in front of the path.

        Enclosing combinators call this as the error unwinds, so the path
        reads outer-to-inner once it reaches the caller. Sequence parsers
        pass ``index=True``; mapping parsers leave it off, even for keys
        that look like numbers.
        """
        flags = self._flags()
        return msgspec.structs.replace(self, path=(segment, *self.path), indexed=(index, *flags))

    def _flags(self) -> tuple[bool, ...]:
        missing = len(self.path) - len(self.indexed)
        if missing > 0:
            return (False,) * missing + self.indexed
        return self.indexed[len(self.indexed) - len(self.path) :]

    @property
    def location(self) -> str:
        """Render the path as ``users[0].email``-style text."""
        out = ''
        for segment, is_index in zip(self.path, self._flags(), strict=True):
            if is_index:
                out += f'[{segment}]'
            elif out:
                out += f'.{segment}'
            else:
                out = segment
        return out

    def __str__(self) -> str:
        if self.path:
            return f'{self.location}: {self.message}'
        return self.message

    def to_exception(self) -> ParseException:
        """Convert to exception for raise-based code."""
        return ParseException(self.message, self.expected, self.actual, self.input, self.path, self.indexed)


class ParseException(ValueError):
    """Parsing failed - exception variant."""

    def __init__(
        self,
        message: str,
        expected: str,
        actual: str,
        input: Any = None,  # noqa: A002
        path: tuple[str, ...] = (),
        indexed: tuple[bool, ...] = (),
    ) -> None:
        self.message = message
        self.expected = expected
        self.actual = actual
        self.input = input
        self.path = tuple(path)
        self.indexed = tuple(indexed)
        super().__init__(str(self.to_struct()))

    def to_struct(self) -> ParseError:
        """Convert to struct for Result-based code."""
        return ParseError(self.message, self.expected, self.actual, self.input, self.path, self.indexed)
