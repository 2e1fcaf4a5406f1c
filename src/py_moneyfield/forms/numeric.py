"""Numeric input and its readonly rendition."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from .base import FormField, ReadonlyField

if TYPE_CHECKING:
    from .form import Validator

__all__ = ["NumericField", "NumericReadonlyField", "to_number"]


def to_number(value: Any) -> int | float | Decimal | None:
    """Cast a submitted value to a number.

    Finite numbers pass through unchanged, strings are parsed into Decimal.
    Empty, unparsable or non-finite input (NaN, infinity) yields None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class NumericField(FormField):
    """Text input accepting numbers only."""

    schema_data_type = "Decimal"

    def data_value(self) -> int | float | Decimal | None:
        return to_number(self.value)

    def validate(self, validator: Validator) -> bool:
        if _is_blank(self.value) or self.data_value() is not None:
            return True
        validator.validation_error(
            self.name,
            f"'{self.value}' is not a number, only numbers can be accepted for this field",
            "numeric",
        )
        return False

    def perform_readonly_transformation(self) -> NumericReadonlyField:
        field = NumericReadonlyField(self.name, self.title, self.value)
        field.set_disabled(self.is_disabled())
        return field


class NumericReadonlyField(ReadonlyField):
    """Readonly number; keeps the numeric data value of the field it replaced."""

    def data_value(self) -> int | float | Decimal | None:
        return to_number(self.value)
