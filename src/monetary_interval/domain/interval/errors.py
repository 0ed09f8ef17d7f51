"""Errors raised while building or parsing a MonetaryInterval."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monetary_interval.domain.monetary.money import Money


class IntervalError(ValueError):
    """Base class for all interval errors."""


class ParseError(IntervalError):
    """Raised when text is not a valid interval, or defines no endpoint at all."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message if message is not None else f"Invalid interval: {text}")


class BoundaryError(IntervalError):
    """Raised when a closed side of an interval has no endpoint."""

    def __init__(self, side: str):
        self.side = side
        super().__init__(f"{side.capitalize()} endpoint must be defined when {side} side is closed.")


class InvariantViolation(IntervalError):
    """Raised when the endpoints of an interval do not form a valid interval."""

    def __init__(self, left: Money, right: Money, message: str):
        self.left = left
        self.right = right
        super().__init__(message)
