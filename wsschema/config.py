# wsschema/config.py

"""
Config module.

Settings are read once at import time into `wsschema_config`.
Precedence: init kwargs > environment > dotenv file > TOML file > defaults.
"""

import os
from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from wsschema.constants import (
    WSSCHEMA_CONFIG_ENV_FILE,
    WSSCHEMA_CONFIG_TOML_FILE,
    WSSCHEMA_DEV_MODE,
    WSSCHEMA_LOG_LEVEL,
    WSSCHEMA_VALIDATION_STRICT,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_env_file_path() -> Path:
    """Get the dotenv file path from the environment or the default path."""
    return Path(
        os.environ.get("WSSCHEMA_CONFIG_ENV_FILE", WSSCHEMA_CONFIG_ENV_FILE)
    ).resolve()


def _get_toml_file_path() -> Path:
    """Get the TOML file path from the environment or the default path."""
    return Path(
        os.environ.get("WSSCHEMA_CONFIG_TOML_FILE", WSSCHEMA_CONFIG_TOML_FILE)
    ).resolve()


class WsValidationConfigModel(BaseModel):
    """Payload validation settings."""

    strict: bool = WSSCHEMA_VALIDATION_STRICT


class WsSchemaConfig(BaseSettings):
    """wsschema configuration settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=_get_env_file_path(),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        env_nested_delimiter="__",
        env_prefix="wsschema_",
        extra="ignore",
        toml_file=_get_toml_file_path(),
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # INIT > ENV > DOTENV > TOML > DEFAULTS
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    dev_mode: bool = WSSCHEMA_DEV_MODE
    log_level: str = WSSCHEMA_LOG_LEVEL
    validation: WsValidationConfigModel = WsValidationConfigModel()

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


wsschema_config = WsSchemaConfig()
