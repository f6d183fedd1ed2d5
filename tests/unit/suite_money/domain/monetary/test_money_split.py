import math

import pytest

from suite_money import Money
from suite_money.domain.monetary.errors import AllocationExceeded
from tests.helpers.helper_currency import create_cash_currencies, create_money

# Constants
A_THIRD = 100 / 3
TWO_THIRDS = 200 / 3


def amounts(shares: list[Money]) -> list[float]:
    return [share.amount for share in shares]


def test_split_whole_percentages():
    first, second, third = Money(1200, "USD").split([60, 30, 10])
    assert first.amount == 720
    assert second.amount == 360
    assert third.amount == 120


def test_split_thirds_of_round_amount():
    first, second = Money(1200, "USD").split([TWO_THIRDS, A_THIRD])
    assert first.amount == pytest.approx(800)
    assert second.amount == pytest.approx(400)


def test_split_rounds_non_final_shares():
    first, second = Money(100, "USD").split([TWO_THIRDS, A_THIRD])
    assert first.amount == 66.67
    assert second.amount == pytest.approx(33.33)


def test_split_gives_rounding_leftover_to_last_share():
    shares = Money(100, "USD").split([A_THIRD, A_THIRD, A_THIRD])
    assert amounts(shares) == pytest.approx([33.33, 33.33, 33.34])


def test_split_without_rounding():
    first, second = Money(100, "USD").split([TWO_THIRDS, A_THIRD], round=False)
    assert first.amount == pytest.approx(66.666666666666666)
    assert second.amount == pytest.approx(33.333333333333333)


def test_split_in_currency_without_minor_unit():
    money = Money(100, "JPY")
    assert amounts(money.split([TWO_THIRDS, A_THIRD])) == [67, 33]
    assert amounts(money.split([A_THIRD, A_THIRD])) == [33, 33, 34]


def test_split_adds_extra_share_for_unallocated_rest():
    money = Money(100, "USD")
    assert amounts(money.split([A_THIRD, A_THIRD])) == pytest.approx([33.33, 33.33, 33.34])
    assert amounts(money.split([A_THIRD, A_THIRD], False)) == pytest.approx([33.333333333333333, 33.333333333333333, 33.333333333333334])
    assert amounts(money.split([10, 20])) == pytest.approx([10, 20, 70])


def test_split_exceeding_100_percent_raises():
    with pytest.raises(AllocationExceeded):
        Money(100, "USD").split([60, 30, 20])
    with pytest.raises(ValueError):
        Money(100, "USD").split([101])


def test_split_preserves_input_order():
    assert amounts(Money(1000, "USD").split([10, 90])) == [100, 900]
    assert amounts(Money(1000, "USD").split([90, 10])) == [900, 100]


def test_split_single_full_share_returns_whole_amount():
    (share,) = Money(123.456, "USD").split([100])
    assert share.amount == 123.456


def test_split_single_partial_share_gets_extra_share():
    # The lone entry is not the last one once the filler entry is appended
    assert amounts(Money(10, "USD").split([50])) == [5, 5]


def test_split_with_no_percentages_returns_whole_amount():
    (share,) = Money(10, "USD").split([])
    assert share.amount == 10


def test_split_last_stated_percentage_is_ignored():
    # Percentages total 100, so the last entry receives the remainder whatever it states
    assert amounts(Money(99.99, "USD").split([50, 50])) == pytest.approx([50.0, 49.99])


@pytest.mark.parametrize(
    "percentages",
    [
        [60, 30, 10],
        [A_THIRD, A_THIRD, A_THIRD],
        [A_THIRD, A_THIRD],
        [12.5, 12.5, 0.1, 7.77],
        [99.9],
        [],
    ],
)
@pytest.mark.parametrize("amount", [100, 1234.5678, -987.654, 0.01])
def test_unrounded_shares_add_up_to_amount(amount, percentages):
    money = Money(amount, "USD")
    shares = money.split(percentages, round=False)
    assert math.fsum(amounts(shares)) == pytest.approx(amount)


@pytest.mark.parametrize("percentages", [[60, 30, 10], [A_THIRD, A_THIRD], [12.5, 12.5, 0.1, 7.77]])
def test_rounded_shares_follow_allocation_rule(percentages):
    money = Money(1234.5678, "USD")
    shares = money.split(percentages)

    allocated = 0.0
    for share, percentage in zip(shares[:-1], percentages):
        assert share == money.percentage(percentage).round()
        allocated += share.amount
    assert shares[-1].amount == money.amount - allocated


def test_split_shares_snap_to_cash_increment():
    money = create_money(17.25, "CHF", create_cash_currencies())
    shares = money.split([A_THIRD, A_THIRD])
    assert amounts(shares) == pytest.approx([5.75, 5.75, 5.75])
    assert [share.format() for share in shares] == ["CHF5.75", "CHF5.75", "CHF5.75"]
