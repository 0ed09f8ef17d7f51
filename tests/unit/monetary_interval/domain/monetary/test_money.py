import threading
from decimal import Decimal, localcontext

import pytest

from monetary_interval.domain.monetary.currency_registry import ETH, EUR, GBP, JPY
from monetary_interval.domain.monetary.money import Money


def test_money_is_quantized_to_currency_precision():
    assert Money(1, GBP).value == Decimal("1.00")
    assert str(Money(1, GBP)) == "GBP 1.00"
    assert str(Money("1.5", GBP)) == "GBP 1.50"
    assert str(Money(100, JPY)) == "JPY 100"


def test_money_accepts_signed_64bit_range():
    assert str(Money(-(2**63), GBP)) == "GBP -9223372036854775808.00"
    assert str(Money(2**63 - 1, GBP)) == "GBP 9223372036854775807.00"

    with pytest.raises(ValueError, match="exceeds maximum"):
        Money(2**63, GBP)
    with pytest.raises(ValueError, match="below minimum"):
        Money(-(2**63) - 1, GBP)


def test_money_rejects_invalid_values():
    with pytest.raises(ValueError, match="cannot be converted to Decimal"):
        Money("abc", GBP)
    with pytest.raises(ValueError, match="not a finite number"):
        Money("NaN", GBP)
    with pytest.raises(TypeError):
        Money(1, "GBP")


def test_money_of_refuses_rounding():
    assert Money.of("1.5", GBP) == Money("1.50", GBP)

    with pytest.raises(ValueError, match="more decimal places"):
        Money.of("1.005", GBP)
    with pytest.raises(ValueError, match="more decimal places"):
        Money.of("1.5", JPY)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("GBP 1.50", Money("1.50", GBP)),
        ("GBP1.50", Money("1.50", GBP)),
        ("  EUR   2 ", Money(2, EUR)),
        ("JPY 100", Money(100, JPY)),
    ],
)
def test_money_from_str(text: str, expected: Money):
    assert Money.from_str(text) == expected


@pytest.mark.parametrize("text", ["", "1.50 GBP", "GBP", "GBP 1.5.0"])
def test_money_from_str_rejects_malformed_text(text: str):
    with pytest.raises(ValueError):
        Money.from_str(text)


def test_money_from_str_rejects_unknown_currency():
    with pytest.raises(ValueError, match="Invalid currency part 'ABC'"):
        Money.from_str("ABC 1.00")


def test_money_comparisons_with_money_and_bare_numbers():
    two = Money(2, GBP)

    assert two < Money(3, GBP)
    assert two <= Money(2, GBP)
    assert two > Money(1, GBP)
    assert two >= Money("2.00", GBP)

    assert two > 1
    assert two >= Decimal("2")
    assert two < "2.01"
    assert two <= 2.0
    assert 3 > two


def test_money_comparison_across_currencies_raises():
    with pytest.raises(ValueError, match="different currencies"):
        _ = Money(1, GBP) < Money(2, EUR)


def test_money_equality_requires_same_currency():
    assert Money(1, GBP) == Money("1.00", GBP)
    assert Money(1, GBP) != Money(1, EUR)
    assert Money(1, GBP) != Decimal("1.00")
    assert hash(Money(1, GBP)) == hash(Money("1.00", GBP))
    assert Money(1, GBP).is_same_currency(Money(5, GBP))
    assert not Money(1, GBP).is_same_currency(Money(5, EUR))


def test_money_arithmetic_keeps_currency():
    assert Money("1.25", GBP) + Money("0.75", GBP) == Money(2, GBP)
    assert Money(5, GBP) - 2 == Money(3, GBP)
    assert -Money(5, GBP) == Money(-5, GBP)
    assert abs(Money(-5, GBP)) == Money(5, GBP)

    with pytest.raises(ValueError, match="different currencies"):
        Money(1, GBP) + Money(1, EUR)


def test_money_does_not_depend_on_thread_decimal_context():
    results = {}

    def build():
        with localcontext() as context:
            context.prec = 28
            results["max"] = Money(2**63 - 1, ETH)
            results["sum"] = Money("9223372036854775806.000000000000000001", ETH) + Money("0.000000000000000001", ETH)

    worker = threading.Thread(target=build)
    worker.start()
    worker.join()

    assert results["max"].value == Decimal("9223372036854775807.000000000000000000")
    assert results["sum"].value == Decimal("9223372036854775806.000000000000000002")
