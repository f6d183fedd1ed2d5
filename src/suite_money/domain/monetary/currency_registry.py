from suite_money.domain.monetary.currency import Currency


# Fiat currencies (CLDR data for the "en" locale)
USD = Currency("USD", 2, "US Dollar", symbol="$")
EUR = Currency("EUR", 2, "Euro", symbol="€")
GBP = Currency("GBP", 2, "British Pound", symbol="£")
JPY = Currency("JPY", 0, "Japanese Yen", symbol="¥")
CAD = Currency("CAD", 2, "Canadian Dollar", symbol="CA$")
CHF = Currency("CHF", 2, "Swiss Franc")
BHD = Currency("BHD", 3, "Bahraini Dinar")

# Cash variant of the Swiss franc: coins go down to 0.05, so amounts snap to 5 minor units
CHF_CASH = Currency("CHF", 2, "Swiss Franc", rounding_increment=5)

DEFAULT_CURRENCIES: tuple[Currency, ...] = (USD, EUR, GBP, JPY, CAD, CHF, BHD)
