# kotowaza/config.py
"""
kotowaza/config.py
------------------

Configuration for the catalog, read from the environment (prefix
`KOTOWAZA_`) and an optional `.env` file.

Environment variables
=====================

- KOTOWAZA_DATA_PATH
    Alternate dataset file. Default: the bundled `kotowaza/data/kotowaza.json`.

- KOTOWAZA_REFERENCE_BASE_URL
    Prefix used by `build_reference_url`. Always normalized to end with
    exactly one "/".
    Default: "https://jepang.org/peribahasa/"

- KOTOWAZA_LOG_LEVEL
    Standard library logging level applied by `configure_logging()`.
    Default: "WARNING"

- KOTOWAZA_LOG_FORMAT
    "json" or "console". Default: "console"

Typical usage
=============

    from kotowaza.config import get_settings, set_settings, Settings

    cfg = get_settings()
    print(cfg.REFERENCE_BASE_URL)

    # Override in tests
    set_settings(Settings(DATA_PATH="tests/data/kotowaza.json"))
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REFERENCE_BASE_URL = "https://jepang.org/peribahasa/"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Central configuration registry for the catalog.
    Strictly typed and validated via Pydantic.
    """

    # --- Dataset ---
    DATA_PATH: Optional[str] = None

    # --- Reference links ---
    REFERENCE_BASE_URL: str = DEFAULT_REFERENCE_BASE_URL

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    model_config = SettingsConfigDict(
        env_prefix="KOTOWAZA_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("REFERENCE_BASE_URL")
    @classmethod
    def _single_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            return DEFAULT_REFERENCE_BASE_URL
        return value.rstrip("/") + "/"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = (value or "").strip().upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        return level if level in allowed else "WARNING"


# Singleton settings instance
_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Return the global Settings instance, reading the environment on first
    use.
    """
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def set_settings(settings: Optional[Settings]) -> None:
    """
    Replace the global Settings instance.

    Passing None drops the current instance so the next `get_settings()`
    re-reads the environment.
    """
    global _SETTINGS
    if settings is not None and not isinstance(settings, Settings):
        raise TypeError("settings must be a Settings instance")
    _SETTINGS = settings


__all__ = [
    "DEFAULT_REFERENCE_BASE_URL",
    "LogFormat",
    "Settings",
    "get_settings",
    "set_settings",
]
