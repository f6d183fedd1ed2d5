import pytest

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import CHF, CHF_CASH, USD


def test_currency_attributes():
    assert USD.code == "USD"
    assert USD.fraction_digits == 2
    assert USD.rounding_increment == 0
    assert USD.name == "US Dollar"
    assert USD.symbol == "$"
    assert str(USD) == "USD"


def test_symbol_defaults_to_code():
    assert Currency("BHD", 3, "Bahraini Dinar").symbol == "BHD"


def test_equality_by_code():
    assert CHF == CHF_CASH
    assert hash(CHF) == hash(CHF_CASH)
    assert CHF != USD
    assert CHF != "CHF"


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(code="", fraction_digits=2, name="Empty"),
        dict(code="USD", fraction_digits=-1, name="US Dollar"),
        dict(code="USD", fraction_digits=7, name="US Dollar"),
        dict(code="USD", fraction_digits=True, name="US Dollar"),
        dict(code="USD", fraction_digits=2, name=" "),
        dict(code="USD", fraction_digits=2, name="US Dollar", rounding_increment=-5),
        dict(code="USD", fraction_digits=2, name="US Dollar", symbol=""),
    ],
)
def test_invalid_currency_raises(kwargs):
    with pytest.raises(ValueError):
        Currency(**kwargs)
