"""Error types raised at the edges of the form layer.

Field operations themselves accept malformed input silently; these errors are
used where input is parsed before it reaches a field (CLI pairs, post data).
"""

from __future__ import annotations

__all__ = ["FormError", "ValidationError"]


class FormError(Exception):
    """Base error for py_moneyfield."""


class ValidationError(FormError):
    """Raised when raw input cannot be turned into form data."""
