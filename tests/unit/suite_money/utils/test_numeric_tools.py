from decimal import Decimal

import pytest

from suite_money.utils.numeric_tools import as_decimal, as_finite_float


def test_as_decimal_avoids_binary_noise():
    assert as_decimal(0.1) == Decimal("0.1")
    assert as_decimal(Decimal("1.50")) == Decimal("1.50")
    assert as_decimal("2.5") == Decimal("2.5")


@pytest.mark.parametrize("value, expected", [(1, 1.0), ("2.5", 2.5), (" 3 ", 3.0), (Decimal("4.25"), 4.25), (-0.0, 0.0)])
def test_as_finite_float(value, expected):
    assert as_finite_float(value) == expected


@pytest.mark.parametrize("value", [True, None, "abc", object()])
def test_as_finite_float_rejects_non_numeric(value):
    with pytest.raises((TypeError, ValueError)):
        as_finite_float(value)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), "-inf", Decimal("NaN"), 10**400])
def test_as_finite_float_rejects_non_finite(value):
    with pytest.raises(ValueError):
        as_finite_float(value)
