from __future__ import annotations

from typing import Protocol


# region Interface


class CurrencyMetadataProvider(Protocol):
    """Read-only source of per-currency metadata used by `Money`.

    Implementations are pure lookup services and must be safe for concurrent reads.
    """

    def is_known_currency(self, code: str) -> bool:
        """Returns True if $code is a recognized currency code (case-sensitive)."""
        ...

    def fraction_digits(self, code: str) -> int:
        """Returns the number of decimal places of the minor unit of $code."""
        ...

    def rounding_increment(self, code: str) -> int | float:
        """Returns the rounding increment of $code in minor units, 0 when there is none."""
        ...

    def symbol(self, code: str, locale: str | None = None) -> str:
        """Returns the display symbol of $code for $locale.

        Args:
            code: Currency code.
            locale: Locale identifier such as "en" or "de_CH". When None, the provider's
                own locale is used.
        """
        ...


# endregion
