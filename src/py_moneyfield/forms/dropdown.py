"""Closed-choice selector and its readonly lookup rendition."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .base import FormField, ReadonlyField

if TYPE_CHECKING:
    from .form import Validator

__all__ = ["DropdownField", "LookupField"]


class DropdownField(FormField):
    """Single selection from an ordered ``code -> label`` source."""

    schema_data_type = "SingleSelect"

    def __init__(
        self,
        name: str,
        title: str | None = None,
        source: Mapping[str, str] | None = None,
        value: Any = None,
    ) -> None:
        self._source: dict[str, str] = dict(source or {})
        super().__init__(name, title, value)

    @property
    def source(self) -> dict[str, str]:
        """Return a copy of the option mapping."""
        return dict(self._source)

    def set_source(self, source: Mapping[str, str]) -> DropdownField:
        self._source = dict(source)
        return self

    def validate(self, validator: Validator) -> bool:
        if self.value in (None, "") or str(self.value) in self._source:
            return True
        validator.validation_error(
            self.name,
            f"Please select a value within the list provided. {self.value} is not a valid option",
            "validation",
        )
        return False

    def perform_readonly_transformation(self) -> LookupField:
        field = LookupField(self.name, self.title, self._source, self.value)
        field.set_disabled(self.is_disabled())
        return field

    def clone(self) -> DropdownField:
        duplicate: DropdownField = super().clone()  # type: ignore[assignment]
        duplicate._source = dict(self._source)
        return duplicate

    def schema_data(self) -> dict[str, Any]:
        data = super().schema_data()
        data["source"] = [{"value": code, "title": label} for code, label in self._source.items()]
        return data


class LookupField(ReadonlyField):
    """Readonly selector showing the label of the selected code."""

    def __init__(
        self,
        name: str,
        title: str | None = None,
        source: Mapping[str, str] | None = None,
        value: Any = None,
    ) -> None:
        self._source: dict[str, str] = dict(source or {})
        super().__init__(name, title, value)

    @property
    def source(self) -> dict[str, str]:
        return dict(self._source)

    def display_value(self) -> str:
        """Label of the current value; the raw value when it is not an option."""
        if self.value in (None, ""):
            return ""
        return self._source.get(str(self.value), str(self.value))

    def clone(self) -> LookupField:
        duplicate: LookupField = super().clone()  # type: ignore[assignment]
        duplicate._source = dict(self._source)
        return duplicate
