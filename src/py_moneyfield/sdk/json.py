"""JSON presenter for py_moneyfield.

Deterministic, JSON-safe serialization helpers:
- to_dict(obj): convert nested structures to JSON-safe forms.
  Decimal -> str (keeps the entered precision), dataclasses (Money) -> dict,
  other objects -> their public attributes.
- to_json(data): json.dumps with ensure_ascii=False, compact separators and
  sorted keys.
"""
from __future__ import annotations

import json as _json
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from typing import Any

__all__ = ["to_dict", "to_json"]


def _is_primitive(x: Any) -> bool:
    return isinstance(x, (str, int, float, bool)) or x is None


def _to_mapping(obj: Any) -> dict[str, Any]:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    return {"value": str(obj)}


def to_dict(obj: Any) -> Any:
    """Convert input to a JSON-safe structure.

    - Decimal -> str
    - dict/list/tuple -> recurse
    - dataclasses/objects -> mapping via asdict/vars
    """
    if _is_primitive(obj):
        return obj
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, (list, tuple)):
        return [to_dict(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): to_dict(v) for k, v in obj.items()}
    mapping = _to_mapping(obj)
    return {str(k): to_dict(v) for k, v in mapping.items()}


def to_json(data: Any) -> str:
    """Dump input as a deterministic JSON string using to_dict normalization."""
    return _json.dumps(to_dict(data), ensure_ascii=False, separators=(",", ":"), sort_keys=True)
