"""Top-level package for py_moneyfield.

Exposes the composite money form field and the value object it maps to so
applications can import them from one place.

Example:
    >>> from py_moneyfield import MoneyField
    >>> field = MoneyField("Price").set_allowed_currencies(["USD", "EUR"])
    >>> field.set_value({"Amount": "9.99", "Currency": "EUR"}).data_value()
    Money(amount=Decimal('9.99'), currency='EUR')
"""

from __future__ import annotations

__version__ = "0.3.0"

from .domain.money import AcceptsStructuredMoney, Money, MoneyLike  # noqa: E402
from .forms.money_field import MoneyField, build_currency_field  # noqa: E402

__all__ = [
    "__version__",
    "AcceptsStructuredMoney",
    "Money",
    "MoneyField",
    "MoneyLike",
    "build_currency_field",
]
