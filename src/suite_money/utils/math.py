from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext

from suite_money.utils.numeric_tools import DecimalLike, as_decimal

_MAX_FLOAT_DIGITS = 330


def round_half_away_from_zero(value: DecimalLike, digits: int = 0) -> float:
    """
    Round $value to $digits decimal places, ties going away from zero.

    The float is rounded through its shortest decimal representation, so a value
    written as 9.995 rounds to 10.0 at two digits even though its binary form is
    slightly below the tie.

    Args:
        value: The value to round (Decimal-like scalar).
        digits: Number of decimal places to keep. Must be >= 0.

    Returns:
        The rounded value as float.

    Raises:
        ValueError: If $digits is negative.

    Examples:
        >>> round_half_away_from_zero(2.5)
        3.0
        >>> round_half_away_from_zero(-2.5)
        -3.0
        >>> round_half_away_from_zero(9.995, 2)
        10.0
    """
    if digits < 0:
        raise ValueError(f"$digits must be >= 0, but provided value is: {digits}")

    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # Wide enough for any finite float written out in full plus the requested digits
        ctx.prec = _MAX_FLOAT_DIGITS + digits
        return float(as_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_increment(value: DecimalLike, increment: DecimalLike) -> float:
    """
    Round a value to the nearest multiple of $increment.

    Args:
        value: The value to round (Decimal-like scalar).
        increment: The step to round to (Decimal-like scalar), e.g. 0.05.

    Returns:
        The value rounded to the nearest increment, as float.

    Raises:
        ValueError: If $increment <= 0.
    """
    increment_float = float(increment)
    if increment_float <= 0:
        raise ValueError(f"$increment must be positive, but provided value is: {increment}")

    # Calculate how many increments fit into the value and round to the nearest whole number
    increments = round_half_away_from_zero(float(value) / increment_float)

    # Convert back by multiplying by increment
    return increments * increment_float
