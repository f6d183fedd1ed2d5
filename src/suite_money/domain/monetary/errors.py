"""Errors raised by `Money` operations.

Each error also derives from the builtin exception a caller would expect for the
same misuse (`ValueError`, `ZeroDivisionError`), so generic handlers keep working.
"""


class MoneyError(Exception):
    """Base class for all monetary validation errors."""


class InvalidAmount(MoneyError, ValueError):
    """Amount is not a finite numeric value."""


class UnsupportedCurrency(MoneyError, ValueError):
    """Currency code is not known to the currency metadata provider."""


class CurrencyMismatch(MoneyError, ValueError):
    """Operands of a binary operation have different currencies."""


class DivisionByZero(MoneyError, ZeroDivisionError):
    """Divisor is zero."""


class AllocationExceeded(MoneyError, ValueError):
    """Split percentages add up to more than 100."""
