import pytest

from monetary_interval.domain.monetary.currency import Currency, CurrencyType
from monetary_interval.domain.monetary.currency_registry import GBP, INR


def test_predefined_currencies_are_registered():
    assert Currency.from_str("GBP") is GBP
    assert Currency.from_str(" inr ") is INR
    assert GBP.precision == 2
    assert GBP.is_same_as(Currency.from_str("GBP"))


def test_unknown_currency_code_raises():
    with pytest.raises(ValueError, match="'ABC' not found in registry"):
        Currency.from_str("ABC")


def test_register_new_currency(monkeypatch):
    monkeypatch.setattr(Currency, "_registry", dict(Currency._registry))
    abc = Currency("ABC", 3, "Test Currency", CurrencyType.FIAT)

    Currency.register(abc)
    assert Currency.from_str("ABC") is abc

    # Raise: a registered code is not replaced silently
    with pytest.raises(ValueError, match="already exists"):
        Currency.register(Currency("ABC", 2, "Other", CurrencyType.FIAT))

    replacement = Currency("ABC", 2, "Other", CurrencyType.FIAT)
    Currency.register(replacement, overwrite=True)
    assert Currency.from_str("ABC").precision == 2


@pytest.mark.parametrize(
    "code, precision, name, currency_type, error",
    [
        ("", 2, "Empty", CurrencyType.FIAT, ValueError),
        ("ABC", -1, "Negative", CurrencyType.FIAT, ValueError),
        ("ABC", 19, "Too precise", CurrencyType.FIAT, ValueError),
        ("ABC", 2, " ", CurrencyType.FIAT, ValueError),
        ("ABC", 2, "Wrong type", "FIAT", TypeError),
    ],
)
def test_currency_validates_arguments(code, precision, name, currency_type, error):
    with pytest.raises(error):
        Currency(code, precision, name, currency_type)


def test_currency_equality_by_code():
    assert Currency("gbp", 2, "Pound", CurrencyType.FIAT) == GBP
    assert hash(Currency("GBP", 4, "Pound", CurrencyType.FIAT)) == hash(GBP)
    assert str(GBP) == "GBP"
