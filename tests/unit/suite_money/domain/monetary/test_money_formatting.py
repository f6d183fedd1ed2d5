import pytest

from suite_money import Money
from tests.helpers.helper_currency import create_cash_currencies, create_money


@pytest.mark.parametrize(
    "amount, currency_code, expected",
    [
        ("10.000", "USD", "$10.00"),
        (10, "USD", "$10.00"),
        (9.995000000, "USD", "$10.00"),
        (-10, "USD", "-$10.00"),
        (-10, "CAD", "-CA$10.00"),
        (-10.4999, "JPY", "-¥10"),
        (1234567.891, "USD", "$1,234,567.89"),
        (-0.001, "USD", "$0.00"),
        (12.345, "GBP", "£12.35"),
    ],
)
def test_formatting(amount, currency_code, expected):
    money = Money(amount, currency_code)
    assert money.format() == expected
    assert str(money) == expected


@pytest.mark.parametrize(
    "amount, currency_code, expected",
    [
        (-10, "BHD", "-BHD10.000"),
        ("9.99950000", "BHD", "BHD10.000"),
        (-1234.5, "CAD", "-CA$1,234.50"),
    ],
)
def test_formatting_with_in_memory_metadata(amount, currency_code, expected):
    assert create_money(amount, currency_code).format() == expected


@pytest.mark.parametrize(
    "amount, currency_code, display_country_prefix, expected",
    [
        (-10, "USD", False, "-$10.00"),
        (-10, "USD", True, "-US$10.00"),
        (10, "USD", True, "US$10.00"),
        (-10, "CAD", False, "-CA$10.00"),
        (-10, "CAD", True, "-CA$10.00"),
    ],
)
def test_country_prefix_formatting(amount, currency_code, display_country_prefix, expected):
    money = Money(amount, currency_code)
    assert money.format(display_country_prefix) == expected


@pytest.mark.parametrize(
    "amount, currency_code, display_country_prefix, expected",
    [
        (0, "USD", False, "$0.00"),
        (10, "USD", False, "+$10.00"),
        (-10, "USD", False, "-$10.00"),
        (0, "USD", True, "US$0.00"),
        (10, "USD", True, "+US$10.00"),
        (-10, "USD", True, "-US$10.00"),
    ],
)
def test_forced_plus_formatting(amount, currency_code, display_country_prefix, expected):
    money = Money(amount, currency_code)
    assert money.format_with_sign(display_country_prefix) == expected


@pytest.mark.parametrize(
    "amount, currency_code, expected",
    [
        (0, "USD", "0.00"),
        (-0.001, "USD", "0.00"),
        (12.345, "GBP", "12.35"),
        (-987.654, "CAD", "(987.65)"),
        (-1.2345, "JPY", "(1)"),
        (1234567.891, "USD", "1,234,567.89"),
        (-9.9995, "BHD", "(10.000)"),
    ],
)
def test_accounting_formatting(amount, currency_code, expected):
    money = Money(amount, currency_code)
    assert money.format_for_accounting() == expected


def test_accounting_formatting_uses_swiss_rounding():
    currencies = create_cash_currencies()
    assert create_money(-10.03, "CHF", currencies).format_for_accounting() == "(10.05)"
    assert create_money(1234.56, "CHF", currencies).format_for_accounting() == "1,234.55"


@pytest.mark.parametrize(
    "amount, currency_code, expected",
    [
        (0.0000, "GBP", "£0"),
        (33.333, "USD", "$33"),
        (999.5, "JPY", "¥1k"),
        (9500, "CAD", "CA$10k"),
        (77777.777, "GBP", "£78k"),
        (111111.111, "USD", "$111k"),
        (999999.5, "JPY", "¥1m"),
        (3333333.33333, "GBP", "£3m"),
        (77777777.333, "USD", "$78m"),
        (77777777777.333, "USD", "$78bn"),
        (333377777777777.333, "USD", "$333tn"),
    ],
)
def test_shorthand_formatting(amount, currency_code, expected):
    money = Money(amount, currency_code)
    assert money.format_shorthand() == expected
    assert money.inv().format_shorthand() == ("-" + expected if amount else expected)


def test_shorthand_formatting_below_one_unit():
    assert Money(0.3, "USD").format_shorthand() == "$0"
    assert Money(-0.3, "USD").format_shorthand() == "$0"
    assert Money(0.5, "USD").format_shorthand() == "$1"


def test_shorthand_formatting_keeps_largest_unit():
    assert Money(5_000_000_000_000_000, "USD").format_shorthand() == "$5000tn"
