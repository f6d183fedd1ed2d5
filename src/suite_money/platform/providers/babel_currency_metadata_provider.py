from __future__ import annotations

import logging

from babel import Locale, UnknownLocaleError
from babel.core import get_global
from babel.numbers import get_currency_precision, get_currency_symbol

from suite_money.domain.monetary.errors import UnsupportedCurrency

from .currency_metadata_provider import CurrencyMetadataProvider

logger = logging.getLogger(__name__)

# Index of the non-cash rounding increment in CLDR (digits, rounding, cash_digits, cash_rounding)
_ROUNDING_INDEX = 1


class BabelCurrencyMetadataProvider(CurrencyMetadataProvider):
    """Currency metadata from Unicode CLDR, read through Babel.

    A currency is known when the provider's locale has a display name for it. Fraction
    digits and rounding increments are the CLDR non-cash values.

    Args:
        locale: Locale identifier used for currency names and default symbols (e.g. "en").

    Raises:
        ValueError: If $locale cannot be parsed or is unknown to CLDR.
    """

    __slots__ = ("_locale", "_currency_names", "_currency_fractions")

    def __init__(self, locale: str = "en") -> None:
        try:
            self._locale = Locale.parse(locale)
        except (ValueError, UnknownLocaleError) as e:
            raise ValueError(f"Cannot init `BabelCurrencyMetadataProvider` because $locale ('{locale}') is not a known locale") from e

        self._currency_names: dict[str, str] = dict(self._locale.currencies)
        self._currency_fractions = get_global("currency_fractions")
        logger.debug(f"Loaded {len(self._currency_names)} currency name(s) for locale '{self._locale}'")

    @property
    def locale(self) -> str:
        """Get the locale identifier, e.g. "en" or "de_CH"."""
        return str(self._locale)

    def _require_known(self, code: str) -> None:
        # Raise: lookups for unknown codes would silently fall back to CLDR defaults
        if code not in self._currency_names:
            raise UnsupportedCurrency(f"Currency with code '{code}' is not known for locale '{self._locale}'")

    def is_known_currency(self, code: str) -> bool:
        """Implements: CurrencyMetadataProvider.is_known_currency"""
        return code in self._currency_names

    def fraction_digits(self, code: str) -> int:
        """Implements: CurrencyMetadataProvider.fraction_digits"""
        self._require_known(code)
        return get_currency_precision(code)

    def rounding_increment(self, code: str) -> int:
        """Implements: CurrencyMetadataProvider.rounding_increment"""
        self._require_known(code)
        fractions = self._currency_fractions.get(code, self._currency_fractions["DEFAULT"])
        return fractions[_ROUNDING_INDEX]

    def symbol(self, code: str, locale: str | None = None) -> str:
        """Implements: CurrencyMetadataProvider.symbol"""
        self._require_known(code)
        return get_currency_symbol(code, locale=locale or self._locale)

    def name(self, code: str) -> str:
        """Get the display name of $code in the provider's locale."""
        self._require_known(code)
        return self._currency_names[code]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(locale='{self._locale}')"
