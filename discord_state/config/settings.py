"""Configuration management using pydantic-settings.

Provides validated configuration with support for:
- JSON config file (config.json)
- DISCORD_STATE_* environment variables
- Type coercion and validation
"""

from __future__ import annotations

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CachePolicy(str, Enum):
    """How eagerly user records seen in messages are cached.

    aggressive: message authors go into the shared user cache and the
        message borrows them by id.
    lazy: each message keeps its own private copy of the author.
    none: same as lazy; nothing is cached from messages.
    """

    AGGRESSIVE = "aggressive"
    LAZY = "lazy"
    NONE = "none"


class AppSettings(BaseSettings):
    """Application settings with validation.

    Settings are loaded from a JSON config file (config.json); environment
    variables with the DISCORD_STATE_ prefix override the defaults.
    """

    cache_policy: CachePolicy = CachePolicy.AGGRESSIVE
    shard_files: list[str] = []

    model_config = SettingsConfigDict(
        env_prefix="DISCORD_STATE_",
        extra="ignore",
    )

    @field_validator("cache_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v: Any) -> Any:
        """Accept policy names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_json(cls, path: str | Path = "config.json") -> "AppSettings":
        """Load settings from a JSON config file.

        Keys present in the file win over DISCORD_STATE_* variables; a
        missing file is not an error and leaves defaults and environment.
        """
        config_path = Path(path)
        if not config_path.is_file():
            return cls()
        data = json.loads(config_path.read_text(encoding="utf-8"))
        return cls(**data)


@lru_cache
def get_settings(config_path: str = "config.json") -> AppSettings:
    """Settings for the process, loaded once per config path."""
    return AppSettings.from_json(config_path)


def load_config(path: str | Path = "config.json") -> AppSettings:
    """Load configuration from file, bypassing the get_settings() cache."""
    get_settings.cache_clear()
    return AppSettings.from_json(path)
