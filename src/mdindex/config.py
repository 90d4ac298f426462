"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LEVEL_NAMES = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class IndexConfig(BaseModel):
    """What gets indexed and how each document block is shaped."""

    index_name: str = "index.md"
    extension: str = ".md"
    summary_lines: int = Field(default=5, ge=0)
    summary_separator: str = "<br>"
    demote_headings: bool = False

    @field_validator("index_name")
    @classmethod
    def index_name_is_bare_filename(cls, value: str) -> str:
        if not value or Path(value).name != value:
            msg = f"index_name must be a plain filename, got {value!r}"
            raise ValueError(msg)
        return value


class LogConfig(BaseModel):
    """Console and file logging."""

    level: str = "WARNING"
    log_dir: Path | None = None

    @field_validator("level")
    @classmethod
    def level_is_known(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            expected = ", ".join(sorted(_LEVEL_NAMES))
            msg = f"Unknown log level {value!r}; expected one of {expected}"
            raise ValueError(msg)
        return level


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables use the ``MDINDEX_`` prefix and a double-underscore
    delimiter for nesting: ``MDINDEX_INDEX__SUMMARY_LINES``,
    ``MDINDEX_INDEX__DEMOTE_HEADINGS``, ``MDINDEX_LOG__LEVEL``, etc.
    """

    model_config = SettingsConfigDict(
        env_prefix="MDINDEX_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    index: IndexConfig = IndexConfig()
    log: LogConfig = LogConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()
    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    return settings
