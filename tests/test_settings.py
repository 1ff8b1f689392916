"""Tests for discord_state.config.settings."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from discord_state.config.settings import (
    AppSettings,
    CachePolicy,
    get_settings,
    load_config,
)


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self) -> None:
        settings = AppSettings()

        assert settings.cache_policy is CachePolicy.AGGRESSIVE
        assert settings.shard_files == []

    def test_policy_is_case_insensitive(self) -> None:
        assert AppSettings(cache_policy="Lazy").cache_policy is CachePolicy.LAZY

    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(cache_policy="sometimes")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISCORD_STATE_CACHE_POLICY", "none")

        assert AppSettings().cache_policy is CachePolicy.NONE

    def test_ignores_unknown_keys(self) -> None:
        settings = AppSettings(cache_policy="lazy", token="unused")

        assert not hasattr(settings, "token")


class TestLoadConfig:
    """Tests for from_json / load_config / get_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        settings = load_config(tmp_path / "missing.json")

        assert settings.cache_policy is CachePolicy.AGGRESSIVE

    def test_loads_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"cache_policy": "none", "shard_files": ["a.jsonl"]}),
            encoding="utf-8",
        )

        settings = load_config(path)

        assert settings.cache_policy is CachePolicy.NONE
        assert settings.shard_files == ["a.jsonl"]

    def test_get_settings_is_cached(self, tmp_path: Path) -> None:
        path = str(tmp_path / "config.json")
        get_settings.cache_clear()

        assert get_settings(path) is get_settings(path)
