__version__ = "0.1.0"

from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.errors import AllocationExceeded, CurrencyMismatch, DivisionByZero, InvalidAmount, MoneyError, UnsupportedCurrency

__all__ = [
    "Money",
    "MoneyError",
    "InvalidAmount",
    "UnsupportedCurrency",
    "CurrencyMismatch",
    "DivisionByZero",
    "AllocationExceeded",
]
