"""Interval domain package: interval notation, MonetaryInterval and its errors."""

from monetary_interval.domain.interval.errors import BoundaryError, IntervalError, InvariantViolation, ParseError
from monetary_interval.domain.interval.interval_notation import IntervalNotation
from monetary_interval.domain.interval.monetary_interval import MonetaryInterval

__all__ = ["BoundaryError", "IntervalError", "IntervalNotation", "InvariantViolation", "MonetaryInterval", "ParseError"]
