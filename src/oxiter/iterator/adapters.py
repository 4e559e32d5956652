"""Combinator adapters.

Each adapter wraps (never subclasses) its source and keeps only the state it
needs. Adapters pass Nothing through without assuming it is permanent, except
where noted: Chain drops its first source, Take/TakeWhile/Fuse end for good.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from oxiter._logging import get_logger, trace
from oxiter.iterator.base import Iterator
from oxiter.option import Nothing, Option, Some, is_none, is_some

__all__ = [
    'Chain',
    'Enumerate',
    'Filter',
    'Flatten',
    'Fuse',
    'Inspect',
    'Intersperse',
    'Map',
    'Peekable',
    'Skip',
    'SkipWhile',
    'Take',
    'TakeWhile',
    'Zip',
]

logger = get_logger(__name__)


class Map[T, U](Iterator[U]):
    __slots__ = ('_f', '_iter')

    def __init__(self, iterator: Iterator[T], f: Callable[[T], U]) -> None:
        self._iter = iterator
        self._f = f

    def next(self) -> Option[U]:
        item = self._iter.next()
        if is_some(item):
            return Some(self._f(item.value))
        return Nothing


class Filter[T](Iterator[T]):
    __slots__ = ('_iter', '_predicate')

    def __init__(self, iterator: Iterator[T], predicate: Callable[[T], bool]) -> None:
        self._iter = iterator
        self._predicate = predicate

    def next(self) -> Option[T]:
        while is_some(item := self._iter.next()):
            if self._predicate(item.value):
                return item
        return Nothing


class Chain[T](Iterator[T]):
    __slots__ = ('_first', '_second')

    def __init__(self, first: Iterator[T], second: Iterator[T]) -> None:
        self._first: Iterator[T] | None = first
        self._second = second

    def next(self) -> Option[T]:
        if self._first is not None:
            item = self._first.next()
            if is_some(item):
                return item
            self._first = None
        return self._second.next()


class Zip[T, U](Iterator[tuple[T, U]]):
    __slots__ = ('_left', '_right')

    def __init__(self, left: Iterator[T], right: Iterator[U]) -> None:
        self._left = left
        self._right = right

    def next(self) -> Option[tuple[T, U]]:
        left = self._left.next()
        if is_none(left):
            return Nothing
        right = self._right.next()
        if is_none(right):
            return Nothing
        return Some((left.value, right.value))


class Enumerate[T](Iterator[tuple[int, T]]):
    __slots__ = ('_index', '_iter')

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iter = iterator
        self._index = 0

    def next(self) -> Option[tuple[int, T]]:
        item = self._iter.next()
        if is_none(item):
            return Nothing
        index = self._index
        self._index += 1
        return Some((index, item.value))


class Skip[T](Iterator[T]):
    __slots__ = ('_iter', '_remaining')

    def __init__(self, iterator: Iterator[T], n: int) -> None:
        self._iter = iterator
        self._remaining = n

    def next(self) -> Option[T]:
        while self._remaining > 0:
            self._remaining -= 1
            if is_none(self._iter.next()):
                return Nothing
        return self._iter.next()


class SkipWhile[T](Iterator[T]):
    __slots__ = ('_done', '_iter', '_predicate')

    def __init__(self, iterator: Iterator[T], predicate: Callable[[T], bool]) -> None:
        self._iter = iterator
        self._predicate = predicate
        self._done = False

    def next(self) -> Option[T]:
        if self._done:
            return self._iter.next()
        while is_some(item := self._iter.next()):
            if not self._predicate(item.value):
                self._done = True
                return item
        return Nothing


class Take[T](Iterator[T]):
    """Yields at most ``n`` items; the counter only moves on present items."""

    __slots__ = ('_iter', '_remaining')

    def __init__(self, iterator: Iterator[T], n: int) -> None:
        self._iter: Iterator[T] | None = iterator if n > 0 else None
        self._remaining = n

    def next(self) -> Option[T]:
        if self._iter is None:
            return Nothing
        item = self._iter.next()
        if is_some(item):
            self._remaining -= 1
            if self._remaining == 0:
                self._iter = None
        return item


class TakeWhile[T](Iterator[T]):
    __slots__ = ('_iter', '_predicate')

    def __init__(self, iterator: Iterator[T], predicate: Callable[[T], bool]) -> None:
        self._iter: Iterator[T] | None = iterator
        self._predicate = predicate

    def next(self) -> Option[T]:
        if self._iter is None:
            return Nothing
        item = self._iter.next()
        if is_some(item) and self._predicate(item.value):
            return item
        self._iter = None
        return Nothing


class Peekable[T](Iterator[T]):
    """An iterator with one item of lookahead.

    ``peek`` pulls from the source at most once until the peeked item is
    consumed by ``next``. A peeked Nothing is buffered too, so peeking an
    exhausted source repeatedly does not poll it again.

    Examples:
        >>> from oxiter import from_iter
        >>> it = from_iter([1, 2, 3]).peekable()
        >>> it.peek(), it.peek(), it.next()
        (Some(value=1), Some(value=1), Some(value=1))
        >>> it.next_if(lambda x: x > 5)
        NothingType()
        >>> it.next()
        Some(value=2)
    """

    __slots__ = ('_iter', '_peeked')

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iter = iterator
        # Some(item) when an item (possibly Nothing) is buffered.
        self._peeked: Option[Option[T]] = Nothing

    def next(self) -> Option[T]:
        peeked = self._peeked
        if is_some(peeked):
            self._peeked = Nothing
            return peeked.value
        return self._iter.next()

    def peek(self) -> Option[T]:
        """Return the next item without consuming it."""
        if is_none(self._peeked):
            self._peeked = Some(self._iter.next())
        return self._peeked.value

    def next_if(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Consume and return the next item only if ``predicate`` holds.

        Otherwise the item stays buffered and Nothing is returned.
        """
        item = self.peek()
        if is_some(item) and predicate(item.value):
            self._peeked = Nothing
            return item
        return Nothing

    def next_if_eq(self, expected: T) -> Option[T]:
        """Consume and return the next item only if it equals ``expected``."""
        return self.next_if(lambda item: item == expected)


class Fuse[T](Iterator[T]):
    """Returns Nothing forever once the source has returned Nothing once."""

    __slots__ = ('_iter',)

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iter: Iterator[T] | None = iterator

    def next(self) -> Option[T]:
        if self._iter is None:
            return Nothing
        item = self._iter.next()
        if is_none(item):
            self._iter = None
            trace(logger, 'fuse.tripped')
        return item


class Flatten[T](Iterator[T]):
    __slots__ = ('_inner', '_outer')

    def __init__(self, outer: Iterator[Iterator[T] | Iterable[T]]) -> None:
        self._outer = outer
        self._inner: Iterator[T] | None = None

    def next(self) -> Option[T]:
        while True:
            if self._inner is not None:
                item = self._inner.next()
                if is_some(item):
                    return item
                self._inner = None
            outer = self._outer.next()
            if is_none(outer):
                return Nothing
            self._inner = _as_iterator(outer.value)


class Inspect[T](Iterator[T]):
    __slots__ = ('_f', '_iter')

    def __init__(self, iterator: Iterator[T], f: Callable[[T], object]) -> None:
        self._iter = iterator
        self._f = f

    def next(self) -> Option[T]:
        item = self._iter.next()
        if is_some(item):
            self._f(item.value)
        return item


class Intersperse[T](Iterator[T]):
    __slots__ = ('_first', '_second', '_use_second')

    def __init__(self, first: Iterator[T], second: Iterator[T]) -> None:
        self._first = first
        self._second = second
        self._use_second = False

    def next(self) -> Option[T]:
        source = self._second if self._use_second else self._first
        self._use_second = not self._use_second
        return source.next()


def _as_iterator[T](items: Iterator[T] | Iterable[T]) -> Iterator[T]:
    if isinstance(items, Iterator):
        return items
    from oxiter.iterator.sources import from_fn, from_iter

    # Any object with a next() method follows the pull protocol; Python 3
    # iterators spell it __next__, so they fall through to from_iter.
    pull = getattr(items, 'next', None)
    if callable(pull):
        return from_fn(pull)
    return from_iter(items)
