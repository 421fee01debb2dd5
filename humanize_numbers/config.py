"""
Runtime settings for the CLI and HTTP API, read from the environment.

The formatters themselves take explicit arguments and never look at the
environment; only the entry points build a ``Settings``. Values come from
``HUMANIZE_*`` variables or a ``.env`` file in the working directory.

Variables:
    HUMANIZE_ENGLISH_TEENS   "1" to render 11th/12th/13th (default "0")
    HUMANIZE_DEFAULT_WIDTH   integer width applied when none is requested
    HUMANIZE_LOG_LEVEL       logging level name (default "WARNING")
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import IntegerWidth


class Settings(BaseSettings):
    english_teens: bool = False
    default_width: Optional[IntegerWidth] = None
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="HUMANIZE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("default_width", mode="before")
    @classmethod
    def _normalise_width(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"not a logging level: {v!r}")
        return level
