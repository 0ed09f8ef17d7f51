__version__ = "0.0.1"

from monetary_interval.domain.monetary import Currency, CurrencyType, Money
from monetary_interval.domain.interval import BoundaryError, IntervalError, IntervalNotation, InvariantViolation, MonetaryInterval, ParseError

__all__ = [
    "BoundaryError",
    "Currency",
    "CurrencyType",
    "IntervalError",
    "IntervalNotation",
    "InvariantViolation",
    "MonetaryInterval",
    "Money",
    "ParseError",
]
