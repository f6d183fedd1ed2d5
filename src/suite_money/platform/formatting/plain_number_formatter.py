from __future__ import annotations

from suite_money.platform.providers.currency_metadata_provider import CurrencyMetadataProvider
from suite_money.utils.math import round_half_away_from_zero

from .number_formatter import NumberFormatter


class PlainNumberFormatter(NumberFormatter):
    """Formats amounts as sign, provider symbol and comma-grouped digits.

    Needs no locale data, which makes it the natural partner of
    `InMemoryCurrencyMetadataProvider`. Output looks like "-CA$1,234.50".

    Args:
        currencies: Source of symbols and fraction digits.
    """

    __slots__ = ("_currencies",)

    def __init__(self, currencies: CurrencyMetadataProvider) -> None:
        self._currencies = currencies

    def format_currency(self, amount: float, code: str) -> str:
        """Implements: NumberFormatter.format_currency"""
        fraction_digits = self._currencies.fraction_digits(code)
        rounded = round_half_away_from_zero(amount, fraction_digits)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{self._currencies.symbol(code)}{abs(rounded):,.{fraction_digits}f}"
