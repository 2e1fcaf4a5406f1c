"""Persistence targets used by the CLI to show what a field writes."""

from __future__ import annotations

from py_moneyfield.domain.money import Money

__all__ = ["FlatRecord", "StructuredRecord"]


class FlatRecord:
    """Attribute bag; receives ``<Name>Currency`` and ``<Name>Amount``."""


class StructuredRecord:
    """Target accepting one Money per field (implements AcceptsStructuredMoney)."""

    def __init__(self) -> None:
        self.values: dict[str, Money] = {}

    def set_money(self, field_name: str, money: Money) -> None:
        self.values[field_name] = money
