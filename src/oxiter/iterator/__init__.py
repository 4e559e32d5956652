"""Lazy iterators: the Iterator base, sources and combinator adapters."""

from oxiter.iterator.adapters import Fuse, Peekable
from oxiter.iterator.base import Iterator
from oxiter.iterator.sources import (
    empty,
    from_fn,
    from_iter,
    once,
    repeat,
    successors,
)

__all__ = [
    'Fuse',
    'Iterator',
    'Peekable',
    'empty',
    'from_fn',
    'from_iter',
    'once',
    'repeat',
    'successors',
]
