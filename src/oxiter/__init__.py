"""oxiter: lazy, pull-based iterators over an Option type, for Python 3.13+.

Flat imports (preferred):
    from oxiter import Iterator, from_iter, successors, Some, Nothing

Submodule imports (for organization):
    from oxiter.iterator import Iterator, Peekable, Fuse
    from oxiter.option import Some, Nothing, Option
"""

# Configuration and logging
from oxiter._config import IterConfig, get_config, init
from oxiter._logging import configure_logging, get_logger

# Errors
from oxiter.errors import NegativeCountError, UnwrapError

# Iterators
from oxiter.iterator import (
    Fuse,
    Iterator,
    Peekable,
    empty,
    from_fn,
    from_iter,
    once,
    repeat,
    successors,
)

# Option
from oxiter.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    is_none,
    is_some,
    unzip,
)

__all__ = [
    # Iterators
    'Fuse',
    # Configuration
    'IterConfig',
    'Iterator',
    # Errors
    'NegativeCountError',
    # Option
    'Nothing',
    'NothingType',
    'Option',
    'Peekable',
    'Some',
    'UnwrapError',
    # Logging
    'configure_logging',
    'empty',
    'from_fn',
    'from_iter',
    'get_config',
    'get_logger',
    'init',
    'is_none',
    'is_some',
    'once',
    'repeat',
    'successors',
    'unzip',
]
