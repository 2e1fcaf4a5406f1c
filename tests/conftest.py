from __future__ import annotations

from collections.abc import Iterator

import pytest

from py_moneyfield.infrastructure.config.settings import get_settings

_ENV_KEYS = (
    "ENV",
    "LOG_LEVEL",
    "JSON_LOGS",
    "LOGGING_ENABLED",
    "LOG_FILE",
    "LOG_ROTATION",
    "AMOUNT_LABEL",
    "CURRENCY_LABEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop settings-related environment variables and the cached settings around every test."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
        monkeypatch.delenv(f"PYMF__{key}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
