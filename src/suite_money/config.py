"""Process-wide settings and default collaborators.

Settings come from environment variables, optionally loaded from a `.env` file:

    SUITE_MONEY_LOCALE='en'           # locale for symbols, names and formatting patterns
    SUITE_MONEY_LOG_LEVEL='WARNING'   # level applied by `configure_logging`
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from suite_money.platform.formatting.babel_number_formatter import BabelNumberFormatter
from suite_money.platform.formatting.number_formatter import NumberFormatter
from suite_money.platform.providers.babel_currency_metadata_provider import BabelCurrencyMetadataProvider
from suite_money.platform.providers.currency_metadata_provider import CurrencyMetadataProvider

logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "SUITE_MONEY_LOCALE"
LOG_LEVEL_ENV_VAR = "SUITE_MONEY_LOG_LEVEL"

DEFAULT_LOCALE = "en"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values.

    Attributes:
        locale (str): Locale identifier used by the default collaborators.
        log_level (str): Logging level name, e.g. "DEBUG".
    """

    locale: str = DEFAULT_LOCALE
    log_level: str = DEFAULT_LOG_LEVEL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process.

    Values already present in the environment win over values from `.env`.

    Returns:
        Settings: The resolved settings.
    """
    load_dotenv()
    settings = Settings(
        locale=os.environ.get(LOCALE_ENV_VAR, DEFAULT_LOCALE),
        log_level=os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper(),
    )
    logger.info(f"Loaded settings: $locale '{settings.locale}', $log_level '{settings.log_level}'")
    return settings


@lru_cache(maxsize=1)
def default_currencies() -> CurrencyMetadataProvider:
    """Get the CLDR-backed currency metadata provider for the configured locale."""
    return BabelCurrencyMetadataProvider(get_settings().locale)


@lru_cache(maxsize=1)
def default_formatter() -> NumberFormatter:
    """Get the CLDR-backed number formatter for the configured locale."""
    return BabelNumberFormatter(default_currencies(), get_settings().locale)


def reset_settings() -> None:
    """Forget cached settings and default collaborators.

    Intended for tests that change the environment between runs.
    """
    default_formatter.cache_clear()
    default_currencies.cache_clear()
    get_settings.cache_clear()


def configure_logging(level: str | None = None) -> None:
    """Attach a basic stderr handler and set the root level to $level, or the configured level when None.

    Raises:
        ValueError: If the level name is unknown to `logging`.
    """
    level_name = (level or get_settings().log_level).upper()
    numeric_level = logging.getLevelName(level_name)

    # Raise: getLevelName returns a string for unknown names
    if not isinstance(numeric_level, int):
        raise ValueError(f"$level must be a logging level name, but provided value is: '{level_name}'")

    # basicConfig is a no-op when the root logger already has handlers, so the level is set separately
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(numeric_level)
