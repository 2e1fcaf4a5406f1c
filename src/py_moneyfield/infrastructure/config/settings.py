from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["test", "production"]


def _prefixed(name: str) -> AliasChoices:
    return AliasChoices(f"PYMF__{name}", name)


class BaseAppSettings(BaseSettings):
    """
    Common application settings.

    Loaded from ENV/.env with pydantic-settings. Every key is also accepted
    with the ``PYMF__`` prefix, which wins over the bare name.

    Groups:
    - Logging: level, JSON rendering, optional rotating file
    - Form labels: titles given to the amount/currency sub-fields
    """

    model_config = SettingsConfigDict(env_file=(".env",), env_file_encoding="utf-8", extra="ignore")

    # env is selected by get_settings(), not read from ENV directly
    env: EnvName = Field(default="test")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=False, validation_alias=_prefixed("JSON_LOGS"))
    logging_enabled: bool = Field(alias="LOGGING_ENABLED", default=True, validation_alias=_prefixed("LOGGING_ENABLED"))

    # Rotation options (used only when json_logs is true and log_file is set)
    log_file: str | None = Field(alias="LOG_FILE", default=None, validation_alias=_prefixed("LOG_FILE"))
    log_rotation: Literal["time", "size"] = Field(alias="LOG_ROTATION", default="time", validation_alias=_prefixed("LOG_ROTATION"))
    log_max_bytes: int = Field(alias="LOG_MAX_BYTES", default=10_485_760, validation_alias=_prefixed("LOG_MAX_BYTES"))  # 10 MiB
    log_backup_count: int = Field(alias="LOG_BACKUP_COUNT", default=7, validation_alias=_prefixed("LOG_BACKUP_COUNT"))
    log_rotate_when: str = Field(alias="LOG_ROTATE_WHEN", default="midnight", validation_alias=_prefixed("LOG_ROTATE_WHEN"))
    log_rotate_utc: bool = Field(alias="LOG_ROTATE_UTC", default=True, validation_alias=_prefixed("LOG_ROTATE_UTC"))

    # Sub-field titles of the composite money field
    amount_label: str = Field(alias="AMOUNT_LABEL", default="Amount", validation_alias=_prefixed("AMOUNT_LABEL"))
    currency_label: str = Field(alias="CURRENCY_LABEL", default="Currency", validation_alias=_prefixed("CURRENCY_LABEL"))


class TestSettings(BaseAppSettings):
    """
    Test profile.

    Verbose console logging so failures show the field's decisions.
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    env: EnvName = Field(default="test")
    log_level: str = Field(alias="LOG_LEVEL", default="DEBUG", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=False, validation_alias=_prefixed("JSON_LOGS"))


class ProdSettings(BaseAppSettings):
    """
    Production profile.

    JSON logs at INFO by default.
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    env: EnvName = Field(default="production")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=True, validation_alias=_prefixed("JSON_LOGS"))


# Profiles that never read .env, for isolated tests
class TestSettingsNoFile(TestSettings):
    model_config = SettingsConfigDict(env_file=(), extra="ignore")


class ProdSettingsNoFile(ProdSettings):
    model_config = SettingsConfigDict(env_file=(), extra="ignore")


@lru_cache(maxsize=8)
def get_settings(forced_env: EnvName | None = None, *, ignore_env_file: bool = False) -> BaseAppSettings:
    """
    Cached settings factory driven by ENV.

    Parameters:
    - forced_env: Pick the profile explicitly ("test" or "production"), overrides ENV.
    - ignore_env_file: Do not read .env (uses the *NoFile classes).

    Returns:
    - Settings instance of the selected profile.
    """
    import os

    selector: EnvName = forced_env or os.getenv("ENV", "test")  # type: ignore[assignment]
    if selector == "production":
        cls = ProdSettingsNoFile if ignore_env_file else ProdSettings
    else:
        cls = TestSettingsNoFile if ignore_env_file else TestSettings

    instance = cls()
    instance.env = selector  # keep env consistent with the chosen profile
    return instance
