"""Factories that create iterators from scratch.

``from_fn`` is the only source that may resume after returning Nothing;
``from_iter``, ``once`` and ``successors`` stay exhausted once they are.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from collections.abc import Iterator as PyIterator

from oxiter.iterator.base import Iterator
from oxiter.option import Nothing, Option, Some, is_none

__all__ = [
    'empty',
    'from_fn',
    'from_iter',
    'once',
    'repeat',
    'successors',
]


class FromFn[T](Iterator[T]):
    __slots__ = ('_f',)

    def __init__(self, f: Callable[[], Option[T]]) -> None:
        self._f = f

    def next(self) -> Option[T]:
        return self._f()


class FromIter[T](Iterator[T]):
    __slots__ = ('_it',)

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it: PyIterator[T] | None = iter(iterable)

    def next(self) -> Option[T]:
        if self._it is None:
            return Nothing
        try:
            return Some(next(self._it))
        except StopIteration:
            self._it = None
            return Nothing


class Empty[T](Iterator[T]):
    __slots__ = ()

    def next(self) -> Option[T]:
        return Nothing


class Once[T](Iterator[T]):
    __slots__ = ('_item',)

    def __init__(self, item: T) -> None:
        self._item: Option[T] = Some(item)

    def next(self) -> Option[T]:
        item = self._item
        self._item = Nothing
        return item


class Repeat[T](Iterator[T]):
    __slots__ = ('_item',)

    def __init__(self, item: T) -> None:
        self._item = Some(item)

    def next(self) -> Option[T]:
        return self._item


class Successors[T](Iterator[T]):
    __slots__ = ('_f', '_next')

    def __init__(self, first: Option[T], f: Callable[[T], Option[T]]) -> None:
        self._next = first
        self._f = f

    def next(self) -> Option[T]:
        current = self._next
        if is_none(current):
            return Nothing
        self._next = self._f(current.value)
        return current


def from_fn[T](f: Callable[[], Option[T]]) -> Iterator[T]:
    """Create an iterator whose ``next`` returns ``f()``.

    The iterator holds no state of its own, so it yields whatever ``f``
    yields, including Some after Nothing.

    Examples:
        >>> from oxiter import Some
        >>> counter = iter(range(100))
        >>> it = from_fn(lambda: Some(next(counter)))
        >>> it.next(), it.next()
        (Some(value=0), Some(value=1))
    """
    return FromFn(f)


def from_iter[T](iterable: Iterable[T]) -> Iterator[T]:
    """Create an iterator over any Python iterable.

    Examples:
        >>> it = from_iter([1, 2])
        >>> it.next(), it.next(), it.next()
        (Some(value=1), Some(value=2), NothingType())
    """
    return FromIter(iterable)


def empty[T]() -> Iterator[T]:
    """Create an iterator that yields nothing."""
    return Empty()


def once[T](item: T) -> Iterator[T]:
    """Create an iterator that yields ``item`` exactly once."""
    return Once(item)


def repeat[T](item: T) -> Iterator[T]:
    """Create an iterator that yields ``item`` forever."""
    return Repeat(item)


def successors[T](first: Option[T], f: Callable[[T], Option[T]]) -> Iterator[T]:
    """Create an iterator where each item is computed from the previous one.

    Yields ``first``, then ``f(first)``, and so on, stopping for good at the
    first Nothing.

    Args:
        first: The first item, or Nothing for an empty iterator.
        f: Computes the next item from the current one.

    Examples:
        >>> from oxiter import Nothing, Some
        >>> halve = lambda x: Some(x // 2) if x > 1 else Nothing
        >>> successors(Some(8), halve).collect()
        [8, 4, 2, 1]
    """
    return Successors(first, f)
