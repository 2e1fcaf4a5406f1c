"""Minimal form-field hierarchy used by the composite money field.

Public API:
- FormField: named value holder with readonly/disabled state, form ownership,
  validation hook, persistence (``save_into``) and schema description.
- TextField: free-text input.
- ReadonlyField: display-only rendition produced by ``perform_readonly_transformation``.

Setters return the field itself so configuration can be chained. Rendering is
not part of this package; ``schema_data`` describes a field for whatever
renders it.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .form import Form, Validator

__all__ = ["FormField", "ReadonlyField", "TextField"]


class FormField:
    """Base class for every form field.

    Attributes:
        name: Field name as used in form posts.
        title: Human-readable label; defaults to the name.
        value: Raw value as last set (display value, not yet cast).
    """

    schema_data_type = "Text"

    def __init__(self, name: str, title: str | None = None, value: Any = None) -> None:
        self.name = name
        self.title = title if title is not None else name
        self.value: Any = None
        self._readonly = False
        self._disabled = False
        self._form: Form | None = None
        self.set_value(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self.value!r})"

    def set_value(self, value: Any) -> FormField:
        self.value = value
        return self

    def data_value(self) -> Any:
        """Return the value suitable for persistence."""
        return self.value

    def set_readonly(self, readonly: bool) -> FormField:
        self._readonly = bool(readonly)
        return self

    def is_readonly(self) -> bool:
        return self._readonly

    def set_disabled(self, disabled: bool) -> FormField:
        self._disabled = bool(disabled)
        return self

    def is_disabled(self) -> bool:
        return self._disabled

    def set_form(self, form: Form | None) -> FormField:
        self._form = form
        return self

    @property
    def form(self) -> Form | None:
        return self._form

    def validate(self, validator: Validator) -> bool:
        """Check the current value, reporting problems to ``validator``."""
        return True

    def save_into(self, target: Any) -> None:
        """Write the data value into ``target`` as an attribute named after the field."""
        setattr(target, self.name, self.data_value())

    def perform_readonly_transformation(self) -> FormField:
        """Return a display-only copy of this field."""
        return ReadonlyField(self.name, self.title, self.value).set_disabled(self._disabled)

    def clone(self) -> FormField:
        """Return a copy that shares no mutable state with this field except the form."""
        return copy.copy(self)

    def schema_data(self) -> dict[str, Any]:
        """Describe the field for a schema/introspection consumer."""
        return {
            "name": self.name,
            "title": self.title,
            "type": self.schema_data_type,
            "value": self.data_value(),
            "readonly": self.is_readonly(),
            "disabled": self.is_disabled(),
        }


class TextField(FormField):
    """Single-line free-text input."""


class ReadonlyField(FormField):
    """Field that only displays its value; it can never be switched back to editable."""

    schema_data_type = "Readonly"

    def __init__(self, name: str, title: str | None = None, value: Any = None) -> None:
        super().__init__(name, title, value)
        self._readonly = True

    def set_readonly(self, readonly: bool) -> ReadonlyField:
        return self

    def perform_readonly_transformation(self) -> ReadonlyField:
        return self.clone()  # type: ignore[return-value]
