"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions and Money comparisons with exact decimal
precision. Importing it registers the predefined currencies.
"""

from monetary_interval.domain.monetary.currency import Currency, CurrencyType
from monetary_interval.domain.monetary import currency_registry
from monetary_interval.domain.monetary.money import Money

__all__ = ["Currency", "CurrencyType", "Money", "currency_registry"]
