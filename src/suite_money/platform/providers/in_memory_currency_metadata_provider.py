from __future__ import annotations

import logging
from typing import Iterable

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import DEFAULT_CURRENCIES
from suite_money.domain.monetary.errors import UnsupportedCurrency

from .currency_metadata_provider import CurrencyMetadataProvider

logger = logging.getLogger(__name__)


class InMemoryCurrencyMetadataProvider(CurrencyMetadataProvider):
    """Currency metadata backed by a table of `Currency` records.

    Symbols are the same for every locale; $locale arguments are accepted and ignored.

    Args:
        currencies: Records to seed the table with. Defaults to `DEFAULT_CURRENCIES`.
    """

    __slots__ = ("_currencies",)

    def __init__(self, currencies: Iterable[Currency] = DEFAULT_CURRENCIES) -> None:
        self._currencies: dict[str, Currency] = {}
        for currency in currencies:
            self.register(currency)

    def register(self, currency: Currency, overwrite: bool = False) -> None:
        """Add a currency to the table.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite an existing entry with the same code.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in self._currencies and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in table. Use overwrite=True to replace it.")

        self._currencies[currency.code] = currency
        logger.debug(f"Registered {currency!r} in {self.__class__.__name__}")

    def get(self, code: str) -> Currency:
        """Get the record for $code.

        Raises:
            UnsupportedCurrency: If $code is not in the table.
        """
        try:
            return self._currencies[code]
        except KeyError as e:
            raise UnsupportedCurrency(f"Currency with code '{code}' not found. Available currencies: {list(self._currencies.keys())}") from e

    def is_known_currency(self, code: str) -> bool:
        """Implements: CurrencyMetadataProvider.is_known_currency"""
        return code in self._currencies

    def fraction_digits(self, code: str) -> int:
        """Implements: CurrencyMetadataProvider.fraction_digits"""
        return self.get(code).fraction_digits

    def rounding_increment(self, code: str) -> int:
        """Implements: CurrencyMetadataProvider.rounding_increment"""
        return self.get(code).rounding_increment

    def symbol(self, code: str, locale: str | None = None) -> str:
        """Implements: CurrencyMetadataProvider.symbol"""
        return self.get(code).symbol

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._currencies.keys())})"
