"""Core types: Result, Ok, Err, Option, Some, Nothing."""

from fundament.types.option import Nothing, NothingType, Option, Some, from_nullable, is_option
from fundament.types.result import Err, Ok, Result, from_async, from_call, is_result

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'from_async',
    'from_call',
    'from_nullable',
    'is_option',
    'is_result',
]
