"""Composite form field for an amount + currency pair.

The field owns two sub-fields named with the bracket convention used by form
posts, ``<Name>[Amount]`` (NumericField) and ``<Name>[Currency]`` (TextField,
or DropdownField when allowed currencies are configured). Values are split
into the sub-fields on ``set_value`` and reassembled into a Money on save.

Saving supports two target shapes:
- targets implementing AcceptsStructuredMoney receive one Money through
  ``set_money(name, money)``;
- any other target gets two flat attributes ``<Name>Currency`` and ``<Name>Amount``.

Locale is stored but not used for number formatting yet.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from py_moneyfield.domain.currencies import (
    AllowedCurrencies,
    normalize_allowed_currencies,
    snapshot_allowed_currencies,
)
from py_moneyfield.domain.money import (
    AMOUNT_KEY,
    CURRENCY_KEY,
    AcceptsStructuredMoney,
    Money,
    MoneyLike,
)

from .base import FormField, TextField
from .dropdown import DropdownField
from .numeric import NumericField

if TYPE_CHECKING:
    from .form import Form, Validator

__all__ = ["MoneyField", "build_currency_field"]

logger = logging.getLogger(__name__)

DEFAULT_AMOUNT_TITLE = "Amount"
DEFAULT_CURRENCY_TITLE = "Currency"


def _sub_name(name: str, key: str) -> str:
    return f"{name}[{key}]"


def build_currency_field(
    name: str,
    allowed_currencies: AllowedCurrencies | None = None,
    value: Any = None,
    *,
    title: str = DEFAULT_CURRENCY_TITLE,
    readonly: bool = False,
    disabled: bool = False,
) -> FormField:
    """Build the currency sub-field for a money field called ``name``.

    A non-empty ``allowed_currencies`` gives a DropdownField over those codes,
    otherwise a free-text TextField. ``value`` is applied as-is, even when it
    is not one of the allowed codes.
    """
    options = normalize_allowed_currencies(allowed_currencies)
    field: FormField
    if options:
        field = DropdownField(_sub_name(name, CURRENCY_KEY), title, options)
    else:
        field = TextField(_sub_name(name, CURRENCY_KEY), title)
    field.set_value(value)
    field.set_readonly(readonly)
    field.set_disabled(disabled)
    return field


class MoneyField(FormField):
    """Form field that edits a Money as an amount input plus a currency input."""

    # TODO: switch to a structured schema type once renderers support composite fields
    schema_data_type = "MoneyField"

    def __init__(
        self,
        name: str,
        title: str | None = None,
        value: Any = "",
        *,
        amount_title: str = DEFAULT_AMOUNT_TITLE,
        currency_title: str = DEFAULT_CURRENCY_TITLE,
    ) -> None:
        self._allowed_currencies: AllowedCurrencies | None = None
        self._locale: str | None = None
        self._amount_field: FormField = NumericField(_sub_name(name, AMOUNT_KEY), amount_title)
        self._currency_field: FormField = build_currency_field(name, title=currency_title)
        super().__init__(name, title, value)

    @property
    def amount_field(self) -> FormField:
        """Sub-field for the amount input."""
        return self._amount_field

    @property
    def currency_field(self) -> FormField:
        """Sub-field for the currency input (selector or free text)."""
        return self._currency_field

    @property
    def allowed_currencies(self) -> AllowedCurrencies | None:
        return self._allowed_currencies

    @property
    def locale(self) -> str | None:
        return self._locale

    def set_locale(self, locale: str | None) -> MoneyField:
        self._locale = locale
        return self

    def set_value(self, value: Any) -> MoneyField:
        """Store ``value`` and split it into the sub-fields.

        Accepts a mapping with ``Amount``/``Currency`` keys or any MoneyLike
        object. Other values are stored without touching the sub-fields.
        """
        self.value = value
        if isinstance(value, Mapping):
            self._currency_field.set_value(value.get(CURRENCY_KEY))
            self._amount_field.set_value(value.get(AMOUNT_KEY))
        elif isinstance(value, MoneyLike):
            self._currency_field.set_value(value.currency)
            self._amount_field.set_value(value.amount)
        elif value not in (None, ""):
            logger.debug("MoneyField %s: value of type %s not decomposed", self.name, type(value).__name__)
        return self

    def data_value(self) -> Money:
        """Return the Money assembled from the sub-fields' data values."""
        return Money(
            amount=self._amount_field.data_value(),
            currency=self._currency_field.data_value(),
        )

    def set_allowed_currencies(self, allowed_currencies: AllowedCurrencies | None) -> MoneyField:
        """Restrict the currency input, rebuilding the currency sub-field.

        The value entered so far is carried over to the new sub-field. The
        restriction is kept as a reusable snapshot of ``allowed_currencies``.
        """
        self._allowed_currencies = snapshot_allowed_currencies(allowed_currencies)
        current = self._currency_field.data_value()
        self._currency_field = build_currency_field(
            self.name,
            self._allowed_currencies,
            current,
            title=self._currency_field.title,
            readonly=self.is_readonly(),
            disabled=self.is_disabled(),
        )
        if self.form is not None:
            self._currency_field.set_form(self.form)
        logger.debug(
            "MoneyField %s: currency field rebuilt as %s",
            self.name,
            type(self._currency_field).__name__,
        )
        return self

    def save_into(self, target: Any) -> None:
        money = self.data_value()
        if isinstance(target, AcceptsStructuredMoney):
            logger.debug("MoneyField %s: saving structured value", self.name)
            target.set_money(self.name, money)
            return
        logger.debug("MoneyField %s: saving flat %sCurrency/%sAmount", self.name, self.name, self.name)
        setattr(target, f"{self.name}{CURRENCY_KEY}", money.currency)
        setattr(target, f"{self.name}{AMOUNT_KEY}", money.amount)

    def validate(self, validator: Validator) -> bool:
        return not (self._amount_field is None or self._currency_field is None)

    def set_readonly(self, readonly: bool) -> MoneyField:
        super().set_readonly(readonly)
        self._amount_field.set_readonly(readonly)
        self._currency_field.set_readonly(readonly)
        return self

    def set_disabled(self, disabled: bool) -> MoneyField:
        super().set_disabled(disabled)
        self._amount_field.set_disabled(disabled)
        self._currency_field.set_disabled(disabled)
        return self

    def set_form(self, form: Form | None) -> MoneyField:
        self._currency_field.set_form(form)
        self._amount_field.set_form(form)
        super().set_form(form)
        return self

    def clone(self) -> MoneyField:
        duplicate: MoneyField = super().clone()  # type: ignore[assignment]
        duplicate._amount_field = self._amount_field.clone()
        duplicate._currency_field = self._currency_field.clone()
        duplicate._allowed_currencies = copy.copy(self._allowed_currencies)
        return duplicate

    def perform_readonly_transformation(self) -> MoneyField:
        """Return a readonly clone whose sub-fields are their own readonly variants."""
        duplicate = self.clone()
        duplicate._amount_field = duplicate._amount_field.perform_readonly_transformation()
        duplicate._currency_field = duplicate._currency_field.perform_readonly_transformation()
        duplicate.set_form(self.form)
        duplicate.set_readonly(True)
        return duplicate

    def schema_data(self) -> dict[str, Any]:
        data = super().schema_data()
        data["value"] = self.data_value().to_mapping()
        data["allowed_currencies"] = normalize_allowed_currencies(self._allowed_currencies) or None
        data["locale"] = self._locale
        data["children"] = [self._amount_field.schema_data(), self._currency_field.schema_data()]
        return data
