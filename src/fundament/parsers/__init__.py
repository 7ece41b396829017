"""Parsers: pure functions from untyped input to Result[T, ParseError].

Examples:
    >>> from fundament.parsers import array, number, object_, optional, string
    >>> user = object_({'name': string(), 'age': optional(number())})
    >>> user({'name': 'ada', 'age': None})
    Ok(value={'name': 'ada', 'age': NothingType()})
    >>> array(user)([{'name': 'ada', 'age': 'old'}]).unwrap_err().path
    ('0', 'age')
"""

from fundament.parsers.core import Parser, type_error
from fundament.parsers.formats import email, uuid
from fundament.parsers.primitives import boolean, date, enums, literal, number, string, unknown
from fundament.parsers.structural import array, intersection, list_, object_, record, tuple_, union
from fundament.parsers.transform import chain, map_, refine
from fundament.parsers.wrappers import defaulted, maybe, optional

__all__ = [
    'Parser',
    'array',
    'boolean',
    'chain',
    'date',
    'defaulted',
    'email',
    'enums',
    'intersection',
    'list_',
    'literal',
    'map_',
    'maybe',
    'number',
    'object_',
    'optional',
    'record',
    'refine',
    'string',
    'tuple_',
    'type_error',
    'union',
    'unknown',
    'uuid',
]
