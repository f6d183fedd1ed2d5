from __future__ import annotations

import math
from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | str | Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def as_finite_float(value: FloatLike) -> float:
    """Converts a numeric scalar or numeric string to a finite `float`.

    Args:
        value: Input value as `FloatLike`.

    Returns:
        Value converted to `float`.

    Raises:
        TypeError: If $value is a `bool` or not a numeric type.
        ValueError: If $value is a non-numeric string, is not finite or is outside the float range.
    """
    # Raise: bool is an int subclass, but never a monetary quantity
    if isinstance(value, bool):
        raise TypeError(f"$value must be numeric, but provided value is a bool: {value}")

    # Raise: ints beyond the float range overflow instead of becoming infinite
    try:
        result = float(value)
    except OverflowError as e:
        raise ValueError(f"$value must be finite, but provided value is: {value}") from e

    # Raise: NaN and infinities cannot be rounded or formatted
    if not math.isfinite(result):
        raise ValueError(f"$value must be finite, but provided value is: {value}")

    return result
