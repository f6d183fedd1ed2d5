from __future__ import annotations


class Currency:
    """Represents the metadata of one currency.

    Attributes:
        code (str): Currency code (e.g., "USD", "JPY").
        fraction_digits (int): Number of decimal places of the minor unit (0-6).
        rounding_increment (int): Smallest step in minor units beyond decimal
            truncation (e.g. 5 for rounding to the nearest 0.05). 0 means none.
        name (str): Full currency name.
        symbol (str): Display symbol. Defaults to $code.
    """

    __slots__ = ("_code", "_fraction_digits", "_rounding_increment", "_name", "_symbol")

    def __init__(self, code: str, fraction_digits: int, name: str, rounding_increment: int = 0, symbol: str | None = None):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "CHF"). Stored as given.
            fraction_digits (int): Number of decimal places (0-6).
            name (str): Full currency name.
            rounding_increment (int): Rounding step in minor units, 0 for none.
            symbol (str | None): Display symbol, $code when omitted.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if isinstance(fraction_digits, bool) or not isinstance(fraction_digits, int) or fraction_digits < 0 or fraction_digits > 6:
            raise ValueError(f"$fraction_digits must be an integer between 0 and 6, but provided value is: {fraction_digits}")

        if isinstance(rounding_increment, bool) or not isinstance(rounding_increment, int) or rounding_increment < 0:
            raise ValueError(f"$rounding_increment must be a non-negative integer, but provided value is: {rounding_increment}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if symbol is not None and (not isinstance(symbol, str) or not symbol):
            raise ValueError(f"$symbol must be a non-empty string or None, but provided value is: '{symbol}'")

        self._code = code
        self._fraction_digits = fraction_digits
        self._rounding_increment = rounding_increment
        self._name = name.strip()
        self._symbol = symbol if symbol is not None else code

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def fraction_digits(self) -> int:
        """Get the number of fraction digits."""
        return self._fraction_digits

    @property
    def rounding_increment(self) -> int:
        """Get the rounding increment in minor units."""
        return self._rounding_increment

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def symbol(self) -> str:
        """Get the display symbol."""
        return self._symbol

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.fraction_digits}, '{self.name}', rounding_increment={self.rounding_increment}, symbol='{self.symbol}')"
