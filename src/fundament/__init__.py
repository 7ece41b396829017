"""fundament: Option and Result types with a declarative parser toolkit.

Flat imports (preferred):
    from fundament import Result, Ok, Err, Option, Some, Nothing
    from fundament import from_nullable, from_call, from_async, safe, parse_json

Submodule imports (for organization):
    from fundament.types import Result, Option
    from fundament.parsers import object_, array, string, number
    from fundament.errors import ParseError
    from fundament.arrays import chunk, group, uniq
"""

# Configuration
from fundament._config import Config, get_config, init

# Sequence helpers
from fundament.arrays import at, compact, find, find_index, first, last

# Decorators
from fundament.decorators import safe, safe_async

# Errors
from fundament.errors import ParseError, ParseException, UnwrapError

# Immutable list
from fundament.lists import List

# Parsers
from fundament.parsers import Parser

# Types
from fundament.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    from_async,
    from_call,
    from_nullable,
    is_option,
    is_result,
)
from fundament.util import parse_json

__all__ = [
    'Config',
    'Err',
    'List',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'ParseError',
    'ParseException',
    'Parser',
    'Result',
    'Some',
    'UnwrapError',
    'at',
    'compact',
    'find',
    'find_index',
    'first',
    'from_async',
    'from_call',
    'from_nullable',
    'get_config',
    'init',
    'is_option',
    'is_result',
    'last',
    'parse_json',
    'safe',
    'safe_async',
]
