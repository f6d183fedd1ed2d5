from __future__ import annotations

from typing import Protocol


# region Interface


class NumberFormatter(Protocol):
    """Locale-aware rendering of currency amounts."""

    def format_currency(self, amount: float, code: str) -> str:
        """Format $amount as a currency string for $code.

        The result carries the currency symbol, grouping and decimal separators, and
        exactly the currency's fraction digits. Rounding is half away from zero.

        Args:
            amount: Amount in major units.
            code: Currency code.

        Returns:
            Formatted string, e.g. "-$1,234.50".
        """
        ...


# endregion
