"""SDK public error classes and exception mapping.

map_exception(exc) converts internal exceptions into the public ones below,
keeping the original message:
- UserInputError: malformed input (form post pairs, currency options)
- UnexpectedError: anything else
"""
from __future__ import annotations

from py_moneyfield.domain.errors import FormError

__all__ = [
    "UnexpectedError",
    "UserInputError",
    "map_exception",
]


class UserInputError(Exception):
    """Raised when user input is invalid or cannot be parsed.

    Messages are short; callers may show them to users directly.
    """


class UnexpectedError(Exception):
    """Raised when an unexpected error occurs while binding or saving a form."""


def map_exception(exc: Exception) -> Exception:
    """Map internal exceptions to public SDK exceptions.

    Rules:
    - FormError (incl. ValidationError) -> UserInputError
    - ValueError -> UserInputError
    - any other -> UnexpectedError
    """
    msg = str(exc)
    if isinstance(exc, (FormError, ValueError)):
        return UserInputError(msg)
    return UnexpectedError(msg)
