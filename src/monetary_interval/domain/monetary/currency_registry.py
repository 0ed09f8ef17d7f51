from monetary_interval.domain.monetary.currency import Currency, CurrencyType


# Fiat currencies
GBP = Currency("GBP", 2, "British Pound", CurrencyType.FIAT)
USD = Currency("USD", 2, "US Dollar", CurrencyType.FIAT)
EUR = Currency("EUR", 2, "Euro", CurrencyType.FIAT)
INR = Currency("INR", 2, "Indian Rupee", CurrencyType.FIAT)
CHF = Currency("CHF", 2, "Swiss Franc", CurrencyType.FIAT)
CAD = Currency("CAD", 2, "Canadian Dollar", CurrencyType.FIAT)
AUD = Currency("AUD", 2, "Australian Dollar", CurrencyType.FIAT)
NZD = Currency("NZD", 2, "New Zealand Dollar", CurrencyType.FIAT)
SEK = Currency("SEK", 2, "Swedish Krona", CurrencyType.FIAT)
NOK = Currency("NOK", 2, "Norwegian Krone", CurrencyType.FIAT)
DKK = Currency("DKK", 2, "Danish Krone", CurrencyType.FIAT)
PLN = Currency("PLN", 2, "Polish Zloty", CurrencyType.FIAT)
CZK = Currency("CZK", 2, "Czech Koruna", CurrencyType.FIAT)
CNY = Currency("CNY", 2, "Chinese Yuan", CurrencyType.FIAT)
HKD = Currency("HKD", 2, "Hong Kong Dollar", CurrencyType.FIAT)
SGD = Currency("SGD", 2, "Singapore Dollar", CurrencyType.FIAT)
ZAR = Currency("ZAR", 2, "South African Rand", CurrencyType.FIAT)
JPY = Currency("JPY", 0, "Japanese Yen", CurrencyType.FIAT)
KRW = Currency("KRW", 0, "South Korean Won", CurrencyType.FIAT)

# Crypto currencies
BTC = Currency("BTC", 8, "Bitcoin", CurrencyType.CRYPTO)
ETH = Currency("ETH", 18, "Ethereum", CurrencyType.CRYPTO)

# Commodities
XAU = Currency("XAU", 4, "Gold", CurrencyType.COMMODITY)
XAG = Currency("XAG", 4, "Silver", CurrencyType.COMMODITY)

PREDEFINED_CURRENCIES = (GBP, USD, EUR, INR, CHF, CAD, AUD, NZD, SEK, NOK, DKK, PLN, CZK, CNY, HKD, SGD, ZAR, JPY, KRW, BTC, ETH, XAU, XAG)

# Register all predefined currencies
for _currency in PREDEFINED_CURRENCIES:
    Currency.register(_currency, overwrite=True)
