from .currencies import AllowedCurrencies, normalize_allowed_currencies, snapshot_allowed_currencies
from .errors import FormError, ValidationError
from .money import AMOUNT_KEY, CURRENCY_KEY, AcceptsStructuredMoney, Money, MoneyLike

__all__ = [
    "AMOUNT_KEY",
    "CURRENCY_KEY",
    "AcceptsStructuredMoney",
    "AllowedCurrencies",
    "FormError",
    "Money",
    "MoneyLike",
    "ValidationError",
    "normalize_allowed_currencies",
    "snapshot_allowed_currencies",
]
