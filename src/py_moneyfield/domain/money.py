"""Money value object and the optional interfaces around it.

Public API:
- Money: amount + currency pair as edited in a form; either part may be missing.
- MoneyLike: any object exposing ``amount`` and ``currency`` attributes.
- AcceptsStructuredMoney: persistence targets that take one Money value instead
  of two flat ``<Name>Amount`` / ``<Name>Currency`` attributes.

No arithmetic, rounding or conversion is performed here. Amounts are kept
exactly as given so precision stored elsewhere is never truncated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "AMOUNT_KEY",
    "CURRENCY_KEY",
    "AcceptsStructuredMoney",
    "Money",
    "MoneyLike",
]

AMOUNT_KEY = "Amount"
CURRENCY_KEY = "Currency"


@dataclass(frozen=True, slots=True)
class Money:
    """Immutable amount/currency pair.

    Notes:
    - Both parts are optional while a value is being edited.
    - A value is complete (``exists()``) only when both parts are present.
    """

    amount: Decimal | int | float | None = None
    currency: str | None = None

    def exists(self) -> bool:
        """Return True when both amount and currency are set."""
        return self.amount is not None and self.currency not in (None, "")

    def to_mapping(self) -> dict[str, Any]:
        """Return the ``{"Currency": ..., "Amount": ...}`` form representation."""
        return {CURRENCY_KEY: self.currency, AMOUNT_KEY: self.amount}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Money:
        """Build Money from a mapping with ``Amount``/``Currency`` keys (missing -> None)."""
        return cls(amount=data.get(AMOUNT_KEY), currency=data.get(CURRENCY_KEY))


@runtime_checkable
class MoneyLike(Protocol):
    """Structural type for money values coming from other layers (ORM, DTOs)."""

    @property
    def amount(self) -> Any: ...

    @property
    def currency(self) -> Any: ...


@runtime_checkable
class AcceptsStructuredMoney(Protocol):
    """Persistence target that stores a money value as one structured attribute."""

    def set_money(self, field_name: str, money: Money) -> None: ...
