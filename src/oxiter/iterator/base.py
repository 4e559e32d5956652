"""The Iterator base class: one primitive, ``next``, and everything built on it.

A concrete iterator only implements ``next() -> Option[T]``. Combinators
(``map``, ``filter``, ``zip``, ...) wrap ``self`` in a small adapter and
return it without pulling anything; terminal operations (``fold``, ``count``,
``find``, ...) pull from ``self`` until they have an answer.

Wrapping transfers ownership: once ``it.map(f)`` has been created, ``it``
should no longer be advanced directly.

Examples:
    >>> from oxiter import from_iter
    >>> it = from_iter([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).map(str)
    >>> it.next()
    Some(value='2')
    >>> list(it)
    ['4']
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from oxiter._logging import get_logger, trace
from oxiter.errors import NegativeCountError
from oxiter.option import Nothing, Option, Some, is_some

if TYPE_CHECKING:
    from oxiter.iterator.adapters import Fuse, Peekable

__all__ = ['Iterator']

logger = get_logger(__name__)


def _check_count(operation: str, n: int) -> None:
    if n < 0:
        raise NegativeCountError(operation, n)


class Iterator[T](ABC):
    """A lazy, pull-based sequence of items of type T.

    ``next`` returns ``Some(item)`` while items are available and ``Nothing``
    once the sequence is exhausted. Exhaustion is not an error. Unless an
    iterator is fused, it may yield items again after returning ``Nothing``.

    Iterators also speak Python's iteration protocol: ``for`` loops and
    ``list(...)`` stop at the first ``Nothing``.
    """

    __slots__ = ()

    @abstractmethod
    def next(self) -> Option[T]:
        """Advance the iterator and return the next item."""

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self.next()
        if is_some(item):
            return item.value
        raise StopIteration

    # --- Combinators ---

    def map[U](self, f: Callable[[T], U]) -> Iterator[U]:
        """Apply ``f`` to every item.

        Examples:
            >>> from oxiter import from_iter
            >>> from_iter([1, 2, 3]).map(lambda x: x * 2).collect()
            [2, 4, 6]
        """
        from oxiter.iterator.adapters import Map

        return Map(self, f)

    def filter(self, predicate: Callable[[T], bool]) -> Iterator[T]:
        """Yield only the items for which ``predicate`` holds."""
        from oxiter.iterator.adapters import Filter

        return Filter(self, predicate)

    def chain(self, other: Iterator[T]) -> Iterator[T]:
        """Yield every item of ``self``, then every item of ``other``.

        ``self`` is dropped after it first returns Nothing.
        """
        from oxiter.iterator.adapters import Chain

        return Chain(self, other)

    def zip[U](self, other: Iterator[U]) -> Iterator[tuple[T, U]]:
        """Pair up items from ``self`` and ``other``.

        Stops as soon as either side is exhausted. When ``self`` is
        exhausted, ``other`` is not pulled.

        Examples:
            >>> from oxiter import from_iter
            >>> from_iter([1, 2]).zip(from_iter('abc')).collect()
            [(1, 'a'), (2, 'b')]
        """
        from oxiter.iterator.adapters import Zip

        return Zip(self, other)

    def enumerate(self) -> Iterator[tuple[int, T]]:
        """Pair each item with its zero-based position."""
        from oxiter.iterator.adapters import Enumerate

        return Enumerate(self)

    def skip(self, n: int) -> Iterator[T]:
        """Drop the first ``n`` items, then pass the rest through.

        The items are dropped on the first call to ``next``.

        Raises:
            NegativeCountError: If ``n`` is negative.
        """
        from oxiter.iterator.adapters import Skip

        _check_count('skip', n)
        return Skip(self, n)

    def skip_while(self, predicate: Callable[[T], bool]) -> Iterator[T]:
        """Drop items while ``predicate`` holds, then yield everything.

        The first item for which ``predicate`` is false is yielded; the
        predicate is not consulted again after that.

        Examples:
            >>> from oxiter import from_iter
            >>> from_iter([1, 3, 2, 3]).skip_while(lambda x: x % 2 != 0).collect()
            [2, 3]
        """
        from oxiter.iterator.adapters import SkipWhile

        return SkipWhile(self, predicate)

    def take(self, n: int) -> Iterator[T]:
        """Yield at most ``n`` items.

        The source is never pulled again once ``n`` items have been yielded.

        Raises:
            NegativeCountError: If ``n`` is negative.
        """
        from oxiter.iterator.adapters import Take

        _check_count('take', n)
        return Take(self, n)

    def take_while(self, predicate: Callable[[T], bool]) -> Iterator[T]:
        """Yield items while ``predicate`` holds.

        The first failing item is discarded and ends the iterator for good.
        """
        from oxiter.iterator.adapters import TakeWhile

        return TakeWhile(self, predicate)

    def peekable(self) -> Peekable[T]:
        """Wrap in a Peekable, adding ``peek`` and ``next_if``."""
        from oxiter.iterator.adapters import Peekable

        return Peekable(self)

    def fuse(self) -> Fuse[T]:
        """Make exhaustion permanent: after one Nothing, always Nothing."""
        from oxiter.iterator.adapters import Fuse

        return Fuse(self)

    def flatten[U](self: Iterator[Iterator[U] | Iterable[U]]) -> Iterator[U]:
        """Yield the items of each inner iterator in turn.

        Inner items may be oxiter iterators, objects with a ``next()`` method
        returning Option, or any Python iterable.

        Examples:
            >>> from oxiter import empty, from_iter, once
            >>> from_iter([once(1), empty(), [2, 3]]).flatten().collect()
            [1, 2, 3]
        """
        from oxiter.iterator.adapters import Flatten

        return Flatten(self)

    def flat_map[U](self, f: Callable[[T], Iterator[U] | Iterable[U]]) -> Iterator[U]:
        """Equivalent to ``self.map(f).flatten()``."""
        return self.map(f).flatten()

    def inspect(self, f: Callable[[T], object]) -> Iterator[T]:
        """Call ``f`` on each item as it passes through, unchanged."""
        from oxiter.iterator.adapters import Inspect

        return Inspect(self, f)

    def intersperse(self, other: Iterator[T]) -> Iterator[T]:
        """Alternate between ``self`` and ``other``, starting with ``self``.

        Examples:
            >>> from oxiter import from_iter
            >>> from_iter([1, 3, 5]).intersperse(from_iter([2, 4])).collect()
            [1, 2, 3, 4, 5]
        """
        from oxiter.iterator.adapters import Intersperse

        return Intersperse(self, other)

    # --- Terminal operations ---

    def _fold[A](self, operation: str, init: A, f: Callable[[A, T], A]) -> A:
        acc = init
        items = 0
        while is_some(item := self.next()):
            acc = f(acc, item.value)
            items += 1
        trace(logger, 'iterator.drained', operation=operation, items=items)
        return acc

    def fold[A](self, init: A, f: Callable[[A, T], A]) -> A:
        """Consume the iterator, threading an accumulator through ``f``.

        Args:
            init: Initial accumulator, returned unchanged if there are no items.
            f: Called as ``f(accumulator, item)``; returns the new accumulator.

        Returns:
            The final accumulator.

        Examples:
            >>> from oxiter import from_iter
            >>> from_iter([1, 2, 3]).fold(0, lambda acc, x: acc + x)
            6
        """
        return self._fold('fold', init, f)

    def for_each(self, f: Callable[[T], object]) -> None:
        """Consume the iterator, calling ``f`` on each item."""

        def step(_: None, item: T) -> None:
            f(item)

        self._fold('for_each', None, step)

    def count(self) -> int:
        """Consume the iterator and return the number of items."""
        return self._fold('count', 0, lambda n, _: n + 1)

    def last(self) -> Option[T]:
        """Consume the iterator and return its final item, if any."""
        return self._fold('last', Nothing, lambda _, item: Some(item))

    def collect(self, factory: Callable[[Iterable[T]], Any] = list) -> Any:
        """Consume the iterator into a collection built by ``factory``.

        Examples:
            >>> from oxiter import from_iter
            >>> from_iter([3, 1, 3]).collect(set) == {1, 3}
            True
        """
        collected = factory(self)
        trace(logger, 'iterator.drained', operation='collect')
        return collected

    def nth(self, n: int) -> Option[T]:
        """Return the item at zero-based position ``n``, consuming up to it.

        Raises:
            NegativeCountError: If ``n`` is negative.
        """
        _check_count('nth', n)
        return self.skip(n).next()

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Pull until ``predicate`` holds and return that item.

        Items after the match are left in the iterator.
        """
        while is_some(item := self.next()):
            if predicate(item.value):
                return item
        return Nothing

    def position(self, predicate: Callable[[T], bool]) -> Option[int]:
        """Return the index of the first item satisfying ``predicate``."""
        index = 0
        while is_some(item := self.next()):
            if predicate(item.value):
                return Some(index)
            index += 1
        return Nothing

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """Return True unless some item fails ``predicate``.

        Stops pulling at the first failing item.
        """
        while is_some(item := self.next()):
            if not predicate(item.value):
                return False
        return True

    def any(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if some item satisfies ``predicate``.

        Stops pulling at the first satisfying item.
        """
        while is_some(item := self.next()):
            if predicate(item.value):
                return True
        return False
