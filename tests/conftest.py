"""Pytest configuration and shared fixtures for oxiter tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest
from oxiter import Iterator, Nothing, Option, Some, from_fn


class PullCounter[T](Iterator[T]):
    """Wraps an iterator and records how many times it was pulled."""

    def __init__(self, inner: Iterator[T]) -> None:
        self.inner = inner
        self.pulls = 0

    def next(self) -> Option[T]:
        self.pulls += 1
        return self.inner.next()


@pytest.fixture
def counted() -> Callable[[Iterator[object]], PullCounter[object]]:
    """Factory wrapping an iterator in a PullCounter."""
    return PullCounter


@pytest.fixture
def scripted() -> Callable[[Iterable[Option[object]]], Iterator[object]]:
    """Factory for a resumable iterator replaying a fixed script of options.

    Once the script runs out the iterator returns Nothing.
    """

    def make(script: Iterable[Option[object]]) -> Iterator[object]:
        steps = iter(script)
        return from_fn(lambda: next(steps, Nothing))

    return make


@pytest.fixture
def resumable(scripted):
    """An iterator that yields 1, 2, then Nothing, then 3, then Nothing."""
    return scripted([Some(1), Some(2), Nothing, Some(3)])
