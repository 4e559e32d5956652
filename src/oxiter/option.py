"""Option type: Some[T] | Nothing, the item type returned by ``Iterator.next``.

The iterator core only ever asks two questions of an option, ``is_some`` and
``is_none``, and only ever builds ``Some(item)`` or returns ``Nothing``.
Absence is a distinct variant, so falsy payloads stay present:

    >>> is_some(Some(0)), is_some(Some(None)), is_some(Nothing)
    (True, True, False)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

from oxiter.errors import UnwrapError

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'is_none',
    'is_some',
    'unzip',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Option wrapping a value of type T.

    Examples:
        >>> Some(2).map(lambda x: x + 1)
        Some(value=3)
        >>> Some(2).filter(lambda x: x > 5)
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling ``f``."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def contains(self, value: object) -> bool:
        """Return True if the contained value equals ``value``."""
        return self.value == value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply ``f`` to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Some wrapping ``f(value)``.
        """
        return Some(f(self.value))

    def inspect(self, f: Callable[[T], object]) -> Some[T]:
        """Call ``f`` with the contained value and return self unchanged."""
        f(self.value)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only if ``predicate`` holds for it."""
        if predicate(self.value):
            return self
        return Nothing

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Return ``f(value)``; the flatmap of Option."""
        return f(self.value)

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return ``other`` since this is Some."""
        return other

    def or_(self, _other: Option[T]) -> Some[T]:
        """Return self since this is Some."""
        return self

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair this value with ``other``'s if ``other`` is also Some.

        Examples:
            >>> Some(1).zip(Some('a'))
            Some(value=(1, 'a'))
            >>> Some(1).zip(Nothing)
            NothingType()
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option.

    Use the ``Nothing`` singleton rather than instantiating this directly;
    all instances compare equal regardless.
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError

    def unwrap_or[T](self, default: T) -> T:
        """Return ``default``."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Return ``f()``."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, carrying ``msg``.
        """
        raise UnwrapError(msg)

    def contains(self, _value: object) -> bool:
        return False

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        return self

    def inspect[T](self, _f: Callable[[T], object]) -> NothingType:
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        return self

    def and_then[T, U](self, _f: Callable[[T], Option[U]]) -> NothingType:
        return self

    def and_[U](self, _other: Option[U]) -> NothingType:
        return self

    def or_[T](self, other: Option[T]) -> Option[T]:
        """Return ``other`` since this is Nothing."""
        return other

    def zip[U](self, _other: Option[U]) -> NothingType:
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing absence."""


type Option[T] = Some[T] | NothingType


def is_some[T](opt: Option[T]) -> TypeIs[Some[T]]:
    """Return True if ``opt`` carries a value."""
    return isinstance(opt, Some)


def is_none[T](opt: Option[T]) -> TypeIs[NothingType]:
    """Return True if ``opt`` is absent; always ``not is_some(opt)``."""
    return not isinstance(opt, Some)


def unzip[T, U](opt: Option[tuple[T, U]]) -> tuple[Option[T], Option[U]]:
    """Split an option of a pair into a pair of options.

    Examples:
        >>> unzip(Some((1, 'a')))
        (Some(value=1), Some(value='a'))
        >>> unzip(Nothing)
        (NothingType(), NothingType())
    """
    if isinstance(opt, Some):
        first, second = opt.value
        return Some(first), Some(second)
    return Nothing, Nothing
