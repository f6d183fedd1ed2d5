from __future__ import annotations

import logging
from typing import Sequence

from suite_money.config import default_currencies, default_formatter, get_settings
from suite_money.domain.monetary.errors import AllocationExceeded, CurrencyMismatch, DivisionByZero, InvalidAmount, UnsupportedCurrency
from suite_money.platform.formatting.babel_number_formatter import BabelNumberFormatter
from suite_money.platform.formatting.number_formatter import NumberFormatter
from suite_money.platform.providers.currency_metadata_provider import CurrencyMetadataProvider
from suite_money.utils.math import round_half_away_from_zero, round_to_increment
from suite_money.utils.numeric_tools import FloatLike, as_finite_float

logger = logging.getLogger(__name__)


class Money:
    """Represents an immutable monetary amount in one currency.

    The amount is a binary float in major units (10.5 USD is ten dollars fifty cents).
    Every operation returns a new instance. Rounding, symbols and formatting are
    delegated to a `CurrencyMetadataProvider` and a `NumberFormatter`; when they are not
    given, the CLDR-backed defaults from `suite_money.config` are used. Derived
    instances share the collaborators of the instance they were computed from.
    """

    __slots__ = ("_amount", "_currency", "_currencies", "_formatter")

    # Suffixes for `format_shorthand`, one per power of 1000
    SHORTHAND_UNITS: tuple[str, ...] = ("", "k", "m", "bn", "tn")

    # The dollar sign is shared by many currencies; `format` can prefix it with the country
    US_DOLLAR_CODE = "USD"
    US_COUNTRY_PREFIX = "US"

    def __init__(
        self,
        amount: FloatLike,
        currency: str,
        currencies: CurrencyMetadataProvider | None = None,
        formatter: NumberFormatter | None = None,
    ):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric value or numeric string, in major units.
            currency (str): Currency code, case-sensitive (e.g. "USD").
            currencies: Currency metadata source. Defaults to the configured CLDR provider.
            formatter: Number formatter. Defaults to a CLDR formatter for the configured
                locale, using $currencies.

        Raises:
            InvalidAmount: If $amount is not a finite numeric value.
            UnsupportedCurrency: If $currency is not known to $currencies.
        """
        if currencies is None:
            currencies = default_currencies()
            if formatter is None:
                formatter = default_formatter()
        elif formatter is None:
            formatter = BabelNumberFormatter(currencies, get_settings().locale)

        # Raise: $amount must be convertible to a finite float
        try:
            amount_value = as_finite_float(amount)
        except (ValueError, TypeError) as e:
            raise InvalidAmount(f"Cannot init `Money` because $amount ({amount!r}) is not a finite numeric value") from e

        # Raise: $currency must be known to the metadata provider
        if not isinstance(currency, str) or not currencies.is_known_currency(currency):
            raise UnsupportedCurrency(f"Cannot init `Money` because $currency ({currency!r}) is not a supported currency")

        self._amount = amount_value
        self._currency = currency
        self._currencies = currencies
        self._formatter = formatter

    def _new(self, amount: float) -> Money:
        """Create a sibling instance with $amount, same currency and collaborators."""
        return self.__class__(amount, self._currency, self._currencies, self._formatter)

    @property
    def amount(self) -> float:
        """Get the amount in major units."""
        return self._amount

    @property
    def currency(self) -> str:
        """Get the currency code."""
        return self._currency

    # region Arithmetic

    def abs(self) -> Money:
        """Returns a positive copy of this Money."""
        return self._new(abs(self._amount))

    def inv(self) -> Money:
        """Returns a copy with the sign of the amount inverted."""
        return self._new(-self._amount)

    def add(self, other: Money) -> Money:
        self._check_same_currency(other, "add")
        return self._new(self._amount + other.amount)

    def sub(self, other: Money) -> Money:
        self._check_same_currency(other, "sub")
        return self._new(self._amount - other.amount)

    def multiply(self, factor: FloatLike) -> Money:
        return self._new(self._amount * float(factor))

    def divide(self, divisor: FloatLike) -> Money:
        """Divide the amount by a scalar.

        Raises:
            DivisionByZero: If $divisor equals zero.
        """
        divisor_value = float(divisor)
        if divisor_value == 0:
            raise DivisionByZero(f"Cannot call `divide` because $divisor ({divisor}) is zero")
        return self._new(self._amount / divisor_value)

    def percentage(self, percentage: FloatLike) -> Money:
        """Returns $percentage percent of this Money.

        Expected to be between 0 and 100, but not enforced; other values scale accordingly.
        """
        return self._new((self._amount * float(percentage)) / 100)

    # endregion

    # region Rounding

    def get_rounded_amount(self) -> float:
        """Returns the amount rounded to the precision of the currency.

        The amount is first rounded half away from zero to the currency's fraction digits.
        Currencies with a rounding increment (e.g. 5 for the nearest 0.05) are then
        snapped to a multiple of that increment ("Swiss rounding").

        Returns:
            float: The rounded amount.
        """
        fraction_digits = self._currencies.fraction_digits(self._currency)
        rounding_increment = self._currencies.rounding_increment(self._currency)

        value = round_half_away_from_zero(self._amount, fraction_digits)

        # Swiss rounding
        if 0 < rounding_increment and 0 < fraction_digits:
            rounding_factor = rounding_increment / 10**fraction_digits
            # Multiplying back by the factor can leave binary noise past the fraction digits
            value = round_half_away_from_zero(round_to_increment(value, rounding_factor), fraction_digits)

        return value

    def round(self) -> Money:
        """Returns a copy rounded to the precision of the currency (see `get_rounded_amount`)."""
        return self._new(self.get_rounded_amount())

    # endregion

    # region Allocation

    def split(self, percentages: Sequence[FloatLike], round: bool = True) -> list[Money]:
        """Allocate this Money into shares of the given $percentages.

        Every share except the last is `percentage(p)`, rounded to the currency when
        $round is True. The last share is whatever is left, so the shares always add up
        to the original amount. If $percentages total less than 100, an extra final share
        receives the unallocated rest.

        The stated percentage of the final entry is never used: `split([100])` yields one
        share equal to this Money, `split([50])` yields two halves (the second one being
        the extra share).

        Args:
            percentages: Percentages that must total 100 or less.
            round: Round every non-final share to the currency's precision.

        Returns:
            list[Money]: Shares in the order of $percentages, plus the extra share if any.

        Raises:
            AllocationExceeded: If $percentages total more than 100.
        """
        entries = [float(p) for p in percentages]
        total_percentage = sum(entries)

        # Raise: cannot allocate more than the whole amount
        if total_percentage > 100:
            raise AllocationExceeded(f"Cannot call `split` because $percentages total {total_percentage}, but only 100% can be allocated")

        # Dummy entry so the unallocated rest is assigned to a final share
        if total_percentage < 100:
            entries.append(0.0)

        logger.debug(f"Splitting {self!r} into {len(entries)} share(s) with $round={round}")

        shares: list[Money] = []
        allocated = 0.0
        for percentage in entries[:-1]:
            share = self.percentage(percentage)
            if round:
                share = share.round()
            allocated += share.amount
            shares.append(share)

        shares.append(self._new(self._amount - allocated))
        return shares

    # endregion

    # region Formatting

    def format(self, display_country_prefix: bool = False) -> str:
        """Returns the amount rounded and formatted with the currency symbol.

        Args:
            display_country_prefix: Set to True for "US$" instead of just "$" with US dollars.
                Other currencies are not affected.

        Returns:
            str: E.g. "-$10.00", or "-US$10.00" with $display_country_prefix.
        """
        if display_country_prefix and self._currency == self.US_DOLLAR_CODE:
            if self._amount >= 0:
                return self.US_COUNTRY_PREFIX + self._formatter.format_currency(self._amount, self._currency)
            return "-" + self.US_COUNTRY_PREFIX + self._formatter.format_currency(-self._amount, self._currency)
        return self._formatter.format_currency(self._amount, self._currency)

    def format_with_sign(self, display_country_prefix: bool = False) -> str:
        """Same as `format`, except that positive amounts always start with "+"."""
        text = self.format(display_country_prefix)
        if self._amount <= 0:
            return text
        return "+" + text

    def format_for_accounting(self) -> str:
        """Returns the rounded amount without currency symbol.

        Digits are grouped with "," and negative amounts are wrapped in parentheses
        instead of carrying a sign, e.g. "(1,234.50)".
        """
        amount = self.get_rounded_amount()
        negative = amount < 0
        fraction_digits = self._currencies.fraction_digits(self._currency)
        text = f"{abs(amount):,.{fraction_digits}f}"
        return f"({text})" if negative else text

    def format_shorthand(self) -> str:
        """Returns the currency symbol, a rounded integer and a magnitude suffix.

        E.g. "$33k" instead of "$33,321.12". Magnitudes above the last suffix ("tn") keep
        the "tn" suffix with a larger number in front.
        """
        amount = abs(self._amount)
        rounded = round_half_away_from_zero(amount)

        power = 0
        while power < len(self.SHORTHAND_UNITS) - 1 and rounded >= 1000 ** (power + 1):
            power += 1

        magnitude = int(round_half_away_from_zero(amount / 1000**power))
        text = f"{self._currencies.symbol(self._currency)}{magnitude}{self.SHORTHAND_UNITS[power]}"
        return "-" + text if self._amount < 0 and magnitude != 0 else text

    # endregion

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatch: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other must be Money, but provided value is: {other!r}")
        if self._currency != other.currency:
            raise CurrencyMismatch(f"Cannot call `{operation}` on different currencies: {self._currency} and {other.currency}")

    # Comparison operators (same currency required for ordering)
    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        return self._currency == other.currency and self._amount == other.amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__lt__")
        return self._amount < other.amount

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__le__")
        return self._amount <= other.amount

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__gt__")
        return self._amount > other.amount

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__ge__")
        return self._amount >= other.amount

    # Arithmetic operators
    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        """Multiply Money by a scalar (Money * Money is not supported)."""
        if isinstance(other, (Money, bool)):
            return NotImplemented
        try:
            factor = float(other)
        except (ValueError, TypeError):
            return NotImplemented
        return self.multiply(factor)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by a scalar."""
        if isinstance(other, (Money, bool)):
            return NotImplemented
        try:
            divisor = float(other)
        except (ValueError, TypeError):
            return NotImplemented
        return self.divide(divisor)

    def __neg__(self):
        return self.inv()

    def __abs__(self):
        return self.abs()

    # String representations
    def __str__(self) -> str:
        """Return the formatted amount, like '$1,000.50'."""
        return self.format()

    def __repr__(self) -> str:
        """Return string like 'Money(1000.5, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency})"

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency))
