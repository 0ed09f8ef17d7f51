from __future__ import annotations

import logging
import re
from decimal import Decimal

from monetary_interval.domain.interval.errors import BoundaryError, InvariantViolation, ParseError
from monetary_interval.domain.interval.interval_notation import IntervalNotation
from monetary_interval.domain.monetary.currency import Currency
from monetary_interval.domain.monetary.money import Money
from monetary_interval.utils.numeric_tools import DECIMAL_CONTEXT, DecimalLike

logger = logging.getLogger(__name__)

# Amounts standing in for a missing endpoint. An endpoint equal to one of them is rendered blank.
UNBOUNDED_LEFT_AMOUNT = -(2**63)
UNBOUNDED_RIGHT_AMOUNT = 2**63 - 1

_ENDPOINT = r"[A-Z]{3}\s*\d+(?:\.\d{1,2})?"
_INTERVAL_PATTERN = re.compile(
    rf"(?P<opening>[\[(])\s*(?P<left>{_ENDPOINT})?\s*,\s*(?P<right>{_ENDPOINT})?\s*(?P<closing>[\])])",
    re.ASCII,
)
_TWO_PLACES = Decimal("0.01")


class MonetaryInterval:
    """Represents an interval between two Money endpoints of the same currency.

    Instances are immutable. Both construction paths, direct and `from_str`,
    go through `__init__`, which enforces:

    - $left and $right share the same currency
    - $left <= $right

    A side without an explicit bound holds a sentinel amount
    (`UNBOUNDED_LEFT_AMOUNT` / `UNBOUNDED_RIGHT_AMOUNT`). The sentinel cannot be told
    apart from a finite endpoint of the same amount.

    Attributes:
        left (Money): Left endpoint.
        right (Money): Right endpoint.
        notation (IntervalNotation): Which boundaries are open.
    """

    __slots__ = ("_left", "_right", "_notation")

    def __init__(self, left: Money, right: Money, notation: IntervalNotation):
        """Initialize a new MonetaryInterval.

        Args:
            left: Left endpoint.
            right: Right endpoint, in the same currency as $left.
            notation: Open/closed kind of both boundaries.

        Raises:
            TypeError: If an endpoint is not Money or $notation is not IntervalNotation.
            InvariantViolation: If currencies differ or $left > $right.
        """
        # Raise: endpoints must be Money to have a currency and an ordering
        if not isinstance(left, Money) or not isinstance(right, Money):
            raise TypeError(f"Cannot call `MonetaryInterval.__init__` because $left and $right must be Money (got types '{type(left).__name__}' and '{type(right).__name__}')")

        if not isinstance(notation, IntervalNotation):
            raise TypeError(f"Cannot call `MonetaryInterval.__init__` because $notation is not IntervalNotation (got type '{type(notation).__name__}')")

        # Raise: one interval, one currency
        if not left.is_same_currency(right):
            raise InvariantViolation(left, right, "Left and right endpoints must have the same currency.")

        # Raise: endpoints must be ordered
        if not left <= right:
            raise InvariantViolation(left, right, f"Left must be less than or equal to right. Got {left} and {right}")

        self._left = left
        self._right = right
        self._notation = notation

    @property
    def left(self) -> Money:
        return self._left

    @property
    def right(self) -> Money:
        return self._right

    @property
    def notation(self) -> IntervalNotation:
        return self._notation

    @property
    def currency(self) -> Currency:
        """Get the currency shared by both endpoints."""
        return self._left.currency

    @property
    def is_left_unbounded(self) -> bool:
        """True if the left endpoint holds the sentinel for a missing bound."""
        return self._left.value == UNBOUNDED_LEFT_AMOUNT

    @property
    def is_right_unbounded(self) -> bool:
        """True if the right endpoint holds the sentinel for a missing bound."""
        return self._right.value == UNBOUNDED_RIGHT_AMOUNT

    # region Parsing

    @classmethod
    def from_str(cls, text: str) -> MonetaryInterval:
        """Parse an interval written like `[GBP 1.50,GBP 2.00)` or `(,GBP2]`.

        The whole string must match: one opening symbol `(` or `[`, an optional
        left endpoint, a comma, an optional right endpoint and one closing
        symbol `)` or `]`. An endpoint is a 3-letter uppercase currency code
        followed by an amount with at most 2 decimal places; whitespace between
        code and amount, and around the comma, is allowed.

        A missing endpoint is only allowed on an open side and is replaced by
        the sentinel amount in the currency of the other endpoint.

        Args:
            text: Interval in canonical text form.

        Returns:
            MonetaryInterval: The parsed interval.

        Raises:
            ParseError: If $text does not match the grammar, or both endpoints are missing.
            BoundaryError: If an endpoint is missing on a closed side.
            InvariantViolation: If the endpoints have different currencies or are not ordered.
            ValueError: If the currency code is unknown or an amount does not fit Money.
        """
        match = _INTERVAL_PATTERN.fullmatch(text)
        if match is None:
            raise ParseError(text)

        opening_symbol = match.group("opening")
        closing_symbol = match.group("closing")
        left_endpoint = match.group("left")
        right_endpoint = match.group("right")

        # Raise: a closed side includes its endpoint, so the endpoint must exist
        if left_endpoint is None and opening_symbol != "(":
            raise BoundaryError("left")
        if right_endpoint is None and closing_symbol != ")":
            raise BoundaryError("right")

        left = Money.from_str(left_endpoint) if left_endpoint is not None else None
        right = Money.from_str(right_endpoint) if right_endpoint is not None else None

        if left is None and right is None:
            raise ParseError(text, "At least one endpoint must be defined.")

        currency = left.currency if left is not None else right.currency

        result = cls(
            left=left if left is not None else Money(UNBOUNDED_LEFT_AMOUNT, currency),
            right=right if right is not None else Money(UNBOUNDED_RIGHT_AMOUNT, currency),
            notation=IntervalNotation.from_symbols(opening_symbol, closing_symbol),
        )
        logger.debug(f"Parsed $text '{text}' into {result!r}")
        return result

    # endregion

    # region Comparisons

    def is_greater_than(self, value: Money | DecimalLike) -> bool:
        """True if $value lies left of the interval.

        On an open left side, $value equal to the left endpoint is outside too.
        Bare numbers are amounts in the interval's currency.
        """
        if self._notation.is_left_open:
            return self._left >= value
        return self._left > value

    def is_greater_than_or_equal_to(self, value: Money | DecimalLike) -> bool:
        """True if the left endpoint is >= $value, whatever the left boundary kind."""
        return self._left >= value

    def is_less_than(self, value: Money | DecimalLike) -> bool:
        """True if $value lies right of the interval.

        On an open right side, $value equal to the right endpoint is outside too.
        Bare numbers are amounts in the interval's currency.
        """
        if self._notation.is_right_open:
            return self._right <= value
        return self._right < value

    def is_less_than_or_equal_to(self, value: Money | DecimalLike) -> bool:
        """True if the right endpoint is <= $value, whatever the right boundary kind."""
        return self._right <= value

    def contains(self, value: Money | DecimalLike) -> bool:
        """True if $value lies inside the interval, honouring both boundary kinds."""
        return not self.is_greater_than(value) and not self.is_less_than(value)

    def __contains__(self, value: Money | DecimalLike) -> bool:
        return self.contains(value)

    def is_equal_to(self, other: MonetaryInterval) -> bool:
        """True if both endpoints and the notation of $other match this interval."""
        return self._left == other.left and self._right == other.right and self._notation is other.notation

    # endregion

    # region Magic methods

    def __eq__(self, other) -> bool:
        if not isinstance(other, MonetaryInterval):
            return NotImplemented
        return self.is_equal_to(other)

    def __hash__(self) -> int:
        return hash((self._left, self._right, self._notation))

    def __str__(self) -> str:
        """Return canonical text like `[GBP 1.50,GBP 2.00)`; sentinel endpoints render blank."""
        left = "" if self.is_left_unbounded else _format_endpoint(self._left)
        right = "" if self.is_right_unbounded else _format_endpoint(self._right)
        return f"{self._notation.opening_symbol}{left},{right}{self._notation.closing_symbol}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(left={self._left!r}, right={self._right!r}, notation={self._notation})"

    # endregion


def _format_endpoint(money: Money) -> str:
    """Render $money as `CODE amount`, dropping zeros beyond 2 decimal places.

    Currencies finer than 2 places (BTC, XAU, ...) then stay readable by `from_str`.
    """
    value = money.value
    if value.as_tuple().exponent < -2:
        two_places = value.quantize(_TWO_PLACES, context=DECIMAL_CONTEXT)
        if two_places == value:
            value = two_places
    return f"{money.currency.code} {value}"
