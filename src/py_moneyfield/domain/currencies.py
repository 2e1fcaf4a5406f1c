"""Allowed-currency restriction helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

__all__ = ["AllowedCurrencies", "normalize_allowed_currencies", "snapshot_allowed_currencies"]

AllowedCurrencies = Mapping[str, str] | Iterable[str]


def normalize_allowed_currencies(value: AllowedCurrencies | None) -> dict[str, str]:
    """Return an ordered ``code -> label`` mapping for a currency selector.

    A mapping keeps its labels; a plain sequence of codes uses every code as
    its own label. ``None`` or an empty collection yields ``{}`` which means
    the currency input is not restricted.
    """
    if not value:
        return {}
    if isinstance(value, Mapping):
        return {str(code): str(label) for code, label in value.items()}
    if isinstance(value, str):
        # a single code, not an iterable of characters
        return {value: value}
    return {str(code): str(code) for code in value}


def snapshot_allowed_currencies(value: AllowedCurrencies | None) -> AllowedCurrencies | None:
    """Return a reusable copy of an allowed-currency argument.

    Mappings become a dict and other iterables a tuple, so one-shot iterators
    survive repeated reads. A single code string and None are kept as they are.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return dict(value)
    return tuple(value)
