"""Error types raised by oxiter.

Iteration itself never raises: exhaustion is ``Nothing``. These exceptions
cover misuse at the edges (unwrapping an absent value, negative counts).
"""

from __future__ import annotations

__all__ = [
    'NegativeCountError',
    'UnwrapError',
]


class UnwrapError(RuntimeError):
    """A present value was required but the option was Nothing."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(message or 'Called unwrap on Nothing')


class NegativeCountError(ValueError):
    """A count argument (take, skip, nth) was negative."""

    def __init__(self, operation: str, count: int) -> None:
        self.operation = operation
        self.count = count
        super().__init__(f'{operation}: count must be non-negative, got {count}')
