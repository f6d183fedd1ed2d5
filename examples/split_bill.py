from __future__ import annotations

import logging

from suite_money import Money
from suite_money.config import configure_logging
from suite_money.domain.monetary.currency_registry import CHF_CASH, DEFAULT_CURRENCIES
from suite_money.platform.formatting.plain_number_formatter import PlainNumberFormatter
from suite_money.platform.providers.in_memory_currency_metadata_provider import InMemoryCurrencyMetadataProvider


logger = logging.getLogger(__name__)


def split_restaurant_bill() -> None:
    # Bill of 100 USD shared by three friends, one of them pays half
    bill = Money(100, "USD")
    shares = bill.split([50, 25, 25])
    for share in shares:
        logger.info(f"Share: {share.format()}")

    # Nothing is lost: shares add up to the bill exactly
    total = shares[0]
    for share in shares[1:]:
        total = total + share
    logger.info(f"Total of shares: {total.format(display_country_prefix=True)}")


def split_cash_in_swiss_francs() -> None:
    # Cash payments in CHF round to the nearest 0.05
    currencies = InMemoryCurrencyMetadataProvider([c for c in DEFAULT_CURRENCIES if c.code != "CHF"] + [CHF_CASH])
    formatter = PlainNumberFormatter(currencies)

    tip = Money(17.23, "CHF", currencies, formatter).round()
    for share in tip.split([100 / 3, 100 / 3]):
        logger.info(f"Cash share: {share.format()} (accounting: {share.format_for_accounting()})")


if __name__ == "__main__":
    configure_logging("INFO")
    split_restaurant_bill()
    split_cash_in_swiss_francs()
