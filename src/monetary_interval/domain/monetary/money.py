from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from monetary_interval.domain.monetary.currency import Currency
from monetary_interval.utils.numeric_tools import DECIMAL_CONTEXT, DecimalLike, as_decimal

_MONEY_PATTERN = re.compile(r"(?P<code>[A-Za-z]{3,4})\s*(?P<amount>[-+]?\d+(?:\.\d+)?)", re.ASCII)


class Money:
    """Represents a monetary amount with currency.

    Uses Python's Decimal for precision arithmetic. The amount is quantized to
    the precision of its currency, so `Money(1, GBP)` holds `1.00`.
    Supports values between -2**63 and 2**63 - 1 (the signed 64-bit integer range).
    """

    __slots__ = ("_value", "_currency")

    # Value limits
    MAX_VALUE = Decimal(2**63 - 1)
    MIN_VALUE = Decimal(-(2**63))

    def __init__(self, value: DecimalLike, currency: Currency):
        """Initialize Money with value and currency.

        Args:
            value: Numeric value (Decimal-like scalar).
            currency (Currency): Currency object.

        Raises:
            ValueError: If value is invalid or out of range.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $value must be convertible to Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $value ({value}) cannot be converted to Decimal") from e

        # Raise: NaN and infinities have no place in a monetary amount
        if not decimal_value.is_finite():
            raise ValueError(f"Cannot init `Money` because $value ({value}) is not a finite number")

        # Raise: value must be within allowed range
        if decimal_value > self.MAX_VALUE:
            raise ValueError(f"$value exceeds maximum allowed value {self.MAX_VALUE}, but provided value is: {decimal_value}")
        if decimal_value < self.MIN_VALUE:
            raise ValueError(f"$value is below minimum allowed value {self.MIN_VALUE}, but provided value is: {decimal_value}")

        # Round to currency precision
        precision_str = f"0.{'0' * currency.precision}" if currency.precision > 0 else "1"
        self._value = decimal_value.quantize(Decimal(precision_str), context=DECIMAL_CONTEXT)
        self._currency = currency

    @classmethod
    def of(cls, value: DecimalLike, currency: Currency) -> Money:
        """Create Money without rounding.

        Unlike the constructor, which rounds to the currency precision, this
        factory refuses amounts carrying more decimal places than $currency allows.

        Raises:
            ValueError: If $value is invalid, out of range, or would need rounding.
        """
        result = cls(value, currency)

        # Raise: quantizing must not change the amount
        if result.value != as_decimal(value):
            raise ValueError(f"Cannot call `Money.of` because $value ({value}) has more decimal places than {currency.code} allows ({currency.precision})")

        return result

    @property
    def value(self) -> Decimal:
        """Get the decimal value."""
        return self._value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def is_same_currency(self, other: Money) -> bool:
        """Return True if $other is Money in the same currency as this one."""
        return isinstance(other, Money) and self.currency.is_same_as(other.currency)

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            ValueError: If currencies don't match.
        """
        if self.currency != other.currency:
            raise ValueError(f"Cannot operate on different currencies: {self.currency} and {other.currency}")

    def _comparable_value(self, other) -> Decimal | None:
        """Return the Decimal to compare against, or None when $other is not comparable.

        Bare numbers are interpreted as amounts in this Money's own currency.
        """
        if isinstance(other, Money):
            self._check_same_currency(other)
            return other.value
        if isinstance(other, bool):
            return None
        try:
            return as_decimal(other)
        except (ValueError, TypeError, InvalidOperation):
            return None

    # Comparison operators (same currency required)
    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.value == other.value

    def __lt__(self, other) -> bool:
        """Check if this Money is less than another Money or a bare amount."""
        other_value = self._comparable_value(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    def __le__(self, other) -> bool:
        """Check if this Money is less than or equal to another Money or a bare amount."""
        other_value = self._comparable_value(other)
        if other_value is None:
            return NotImplemented
        return self.value <= other_value

    def __gt__(self, other) -> bool:
        """Check if this Money is greater than another Money or a bare amount."""
        other_value = self._comparable_value(other)
        if other_value is None:
            return NotImplemented
        return self.value > other_value

    def __ge__(self, other) -> bool:
        """Check if this Money is greater than or equal to another Money or a bare amount."""
        other_value = self._comparable_value(other)
        if other_value is None:
            return NotImplemented
        return self.value >= other_value

    # Arithmetic operations
    def __add__(self, other):
        """Add two Money objects (same currency) or Money + number."""
        if isinstance(other, Money):
            self._check_same_currency(other)
            return Money(DECIMAL_CONTEXT.add(self.value, other.value), self.currency)
        try:
            return Money(DECIMAL_CONTEXT.add(self.value, as_decimal(other)), self.currency)
        except (ValueError, TypeError, InvalidOperation):
            return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency) or Money - number."""
        if isinstance(other, Money):
            self._check_same_currency(other)
            return Money(DECIMAL_CONTEXT.subtract(self.value, other.value), self.currency)
        try:
            return Money(DECIMAL_CONTEXT.subtract(self.value, as_decimal(other)), self.currency)
        except (ValueError, TypeError, InvalidOperation):
            return NotImplemented

    def __neg__(self):
        return Money(self.value.copy_negate(), self.currency)

    def __abs__(self):
        return Money(self.value.copy_abs(), self.currency)

    # String representations
    def __str__(self) -> str:
        """Return string like 'GBP 1000.50'."""
        return f"{self.currency.code} {self.value}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, GBP)'."""
        return f"{self.__class__.__name__}({self.value}, {self.currency.code})"

    def __hash__(self) -> int:
        """Hash based on value and currency code."""
        return hash((self.value, self.currency.code))

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like 'GBP 1000.50' or 'GBP1000.50'.

        The amount is taken exactly (see `Money.of`).

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid, the currency is unknown or the amount needs rounding.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        match = _MONEY_PATTERN.fullmatch(value_str)
        if match is None:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'CODE amount'")

        code_part, value_part = match.group("code"), match.group("amount")

        try:
            currency = Currency.from_str(code_part)
        except ValueError as e:
            raise ValueError(f"Invalid currency part '{code_part}' in string '{value_str}'") from e

        return cls.of(Decimal(value_part), currency)
