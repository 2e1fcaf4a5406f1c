"""Public SDK helpers for py_moneyfield.

Exports:
- json: JSON presenter helpers (to_dict, to_json)
- errors: public exceptions and map_exception()
"""

__all__ = [
    "errors",
    "json",
]
