from __future__ import annotations

from enum import Enum

from bidict import bidict


class IntervalNotation(Enum):
    """Represents which boundaries of an interval are open and which are closed.

    The value of each member is its pair of bracket symbols.

    Members:
        OPEN: Both boundaries open, `(a,b)`.
        CLOSED: Both boundaries closed, `[a,b]`.
        LEFT_OPEN: Left boundary open, right closed, `(a,b]`.
        RIGHT_OPEN: Left boundary closed, right open, `[a,b)`.
    """

    OPEN = "()"
    CLOSED = "[]"
    LEFT_OPEN = "(]"
    RIGHT_OPEN = "[)"

    @property
    def is_left_open(self) -> bool:
        """True if the left boundary value is excluded from the interval."""
        return _OPENNESS_BY_NOTATION[self][0]

    @property
    def is_right_open(self) -> bool:
        """True if the right boundary value is excluded from the interval."""
        return _OPENNESS_BY_NOTATION[self][1]

    @property
    def opening_symbol(self) -> str:
        """Return `(` for an open left boundary, `[` for a closed one."""
        return "(" if self.is_left_open else "["

    @property
    def closing_symbol(self) -> str:
        """Return `)` for an open right boundary, `]` for a closed one."""
        return ")" if self.is_right_open else "]"

    @classmethod
    def from_openness(cls, left_open: bool, right_open: bool) -> IntervalNotation:
        """Return the notation with the given openness of its left and right boundary."""
        return _OPENNESS_BY_NOTATION.inverse[(bool(left_open), bool(right_open))]

    @classmethod
    def from_symbols(cls, opening_symbol: str, closing_symbol: str) -> IntervalNotation:
        """Return the notation written with $opening_symbol and $closing_symbol.

        Raises:
            ValueError: If the symbols are not one of `(`/`[` and `)`/`]`.
        """
        try:
            return cls(f"{opening_symbol}{closing_symbol}")
        except ValueError as e:
            raise ValueError(f"Cannot call `IntervalNotation.from_symbols` because '{opening_symbol}{closing_symbol}' is not a valid pair of interval symbols") from e


# Single source of truth for boundary openness: (left_open, right_open), usable in both directions
_OPENNESS_BY_NOTATION: bidict[IntervalNotation, tuple[bool, bool]] = bidict(
    {
        IntervalNotation.OPEN: (True, True),
        IntervalNotation.CLOSED: (False, False),
        IntervalNotation.LEFT_OPEN: (True, False),
        IntervalNotation.RIGHT_OPEN: (False, True),
    }
)
