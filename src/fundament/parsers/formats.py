"""String formats built from the combinators: email and uuid."""

from __future__ import annotations

from fundament.guards import is_email, is_uuid
from fundament.parsers.core import Parser
from fundament.parsers.primitives import string
from fundament.parsers.transform import chain, refine

__all__ = ['email', 'uuid']


def email() -> Parser[str]:
    """Parse an email address, trimmed and lower-cased.

    Examples:
        >>> email()('  USER@Example.com  ')
        Ok(value='user@example.com')
    """
    return refine(chain(string(), str.strip, str.lower), is_email, 'email')


def uuid() -> Parser[str]:
    """Parse a version 4 UUID, trimmed and upper-cased."""
    return refine(chain(string(), str.strip, str.upper), is_uuid, 'uuid')
