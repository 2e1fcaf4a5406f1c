"""Form container, validator and form-post parsing.

Public API:
- Form: owns a list of fields, loads submitted data into them and saves them
  into a target object.
- Validator: collects validation errors reported by fields.
- parse_form_post: turns flat HTML form-post pairs using the bracket-suffix
  convention (``Price[Amount]``) into nested mappings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from py_moneyfield.domain.errors import ValidationError

from .base import FormField

__all__ = ["Form", "Validator", "parse_form_post"]

_KEY_RE = re.compile(r"^(?P<root>[^\[\]]+)(?P<rest>(?:\[[^\[\]]*\])*)$")
_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")


class Validator:
    """Collects ``{field, message, type}`` errors during one validation run."""

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def validation_error(self, field_name: str, message: str, message_type: str = "validation") -> None:
        self.errors.append({"field": field_name, "message": message, "type": message_type})

    def validate(self, form: Form) -> bool:
        """Run every field's ``validate``; True when all of them pass."""
        self.errors = []
        results = [field.validate(self) for field in form.fields]
        return all(results) and not self.errors

    def is_valid(self) -> bool:
        return not self.errors


class Form:
    """A named group of fields submitted together."""

    def __init__(self, name: str, fields: Iterable[FormField] = ()) -> None:
        self.name = name
        self.fields: list[FormField] = []
        for field in fields:
            self.add_field(field)

    def __repr__(self) -> str:
        return f"Form(name={self.name!r}, fields={[f.name for f in self.fields]!r})"

    def add_field(self, field: FormField) -> Form:
        field.set_form(self)
        self.fields.append(field)
        return self

    def field(self, name: str) -> FormField | None:
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None

    def load_data_from(self, data: Mapping[str, Any]) -> Form:
        """Set values of fields whose names are present in ``data``; others are left untouched."""
        for field in self.fields:
            if field.name in data:
                field.set_value(data[field.name])
        return self

    def validate(self, validator: Validator | None = None) -> bool:
        return (validator or Validator()).validate(self)

    def save_into(self, target: Any) -> None:
        for field in self.fields:
            field.save_into(target)


def parse_form_post(pairs: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Nest bracket-suffixed keys: ``{"Price[Amount]": "5"}`` -> ``{"Price": {"Amount": "5"}}``.

    Keys without brackets are kept flat. Later pairs overwrite earlier ones.

    Raises:
        ValidationError: for a malformed key or a key that is used both as a
            scalar and as a nested group.
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    result: dict[str, Any] = {}
    for key, value in items:
        match = _KEY_RE.match(key)
        if match is None:
            raise ValidationError(f"Invalid form field key: {key!r}")
        path = [match.group("root"), *_SEGMENT_RE.findall(match.group("rest"))]
        node = result
        for segment in path[:-1]:
            child = node.setdefault(segment, {})
            if not isinstance(child, dict):
                raise ValidationError(f"Form field key {key!r} conflicts with a scalar value")
            node = child
        if isinstance(node.get(path[-1]), dict):
            raise ValidationError(f"Form field key {key!r} conflicts with a nested group")
        node[path[-1]] = value
    return result
