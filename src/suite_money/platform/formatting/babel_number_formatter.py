from __future__ import annotations

from decimal import Decimal

from babel.numbers import format_currency

from suite_money.platform.providers.currency_metadata_provider import CurrencyMetadataProvider
from suite_money.utils.math import round_half_away_from_zero
from suite_money.utils.numeric_tools import as_decimal

from .number_formatter import NumberFormatter


class BabelNumberFormatter(NumberFormatter):
    """Formats currency amounts with CLDR patterns through Babel.

    Babel rounds half to even, so the amount is first rounded half away from zero to the
    currency's fraction digits and handed over as an exact `Decimal`.

    Args:
        currencies: Source of fraction digits for pre-rounding.
        locale: Locale identifier for patterns and symbols (e.g. "en").
    """

    __slots__ = ("_currencies", "_locale")

    def __init__(self, currencies: CurrencyMetadataProvider, locale: str = "en") -> None:
        self._currencies = currencies
        self._locale = locale

    @property
    def locale(self) -> str:
        """Get the locale identifier."""
        return self._locale

    def format_currency(self, amount: float, code: str) -> str:
        """Implements: NumberFormatter.format_currency"""
        fraction_digits = self._currencies.fraction_digits(code)
        rounded = as_decimal(round_half_away_from_zero(amount, fraction_digits))

        # "-0.00" would otherwise render with a minus sign
        if rounded.is_zero():
            rounded = Decimal(0)

        return format_currency(rounded, code, locale=self._locale)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(locale='{self._locale}')"
