"""Form fields: the base hierarchy and the composite MoneyField."""

from .base import FormField, ReadonlyField, TextField
from .dropdown import DropdownField, LookupField
from .form import Form, Validator, parse_form_post
from .money_field import MoneyField, build_currency_field
from .numeric import NumericField, NumericReadonlyField, to_number

__all__ = [
    "DropdownField",
    "Form",
    "FormField",
    "LookupField",
    "MoneyField",
    "NumericField",
    "NumericReadonlyField",
    "ReadonlyField",
    "TextField",
    "Validator",
    "build_currency_field",
    "parse_form_post",
    "to_number",
]
