"""Tests for the replay CLI and logging setup."""

from __future__ import annotations

import logging
import sys
from unittest.mock import AsyncMock, patch

import pytest

from discord_state.cache import store as cache_store
from discord_state.ingest.__main__ import main
from discord_state.utils.logging import NOISY_LOGGERS, setup_logging


class TestMain:
    """Tests for the discord-state-replay entry point."""

    @patch("discord_state.ingest.__main__.logger")
    @patch("discord_state.ingest.__main__.setup_logging")
    @patch("discord_state.ingest.__main__.run_replay", new_callable=AsyncMock)
    def test_passes_files_and_config(self, mock_run, mock_setup, mock_logger) -> None:
        argv = ["discord-state-replay", "--config", "c.json", "a.jsonl", "b.jsonl"]
        with patch.object(sys, "argv", argv):
            main()

        mock_run.assert_awaited_once_with(
            config_path="c.json", paths=["a.jsonl", "b.jsonl"]
        )
        assert mock_setup.call_args.kwargs["level"] == logging.INFO
        mock_logger.success.assert_called_once()

    @patch("discord_state.ingest.__main__.logger")
    @patch("discord_state.ingest.__main__.setup_logging")
    @patch("discord_state.ingest.__main__.run_replay", new_callable=AsyncMock)
    def test_no_files_uses_config_shards(self, mock_run, mock_setup, _logger) -> None:
        with patch.object(sys, "argv", ["discord-state-replay", "--debug"]):
            main()

        mock_run.assert_awaited_once_with(config_path="config.json", paths=None)
        assert mock_setup.call_args.kwargs["debug_internals"] is True

    @patch("discord_state.ingest.__main__.logger")
    @patch("discord_state.ingest.__main__.setup_logging")
    @patch("discord_state.ingest.__main__.run_replay", new_callable=AsyncMock)
    def test_fatal_error_is_logged_and_raised(
        self, mock_run, _setup, mock_logger
    ) -> None:
        mock_run.side_effect = FileNotFoundError("shard-9.jsonl")

        with patch.object(sys, "argv", ["discord-state-replay", "shard-9.jsonl"]):
            with pytest.raises(FileNotFoundError):
                main()

        assert "Fatal error" in mock_logger.error.call_args[0][0]


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_internal_loggers_quiet_by_default(self) -> None:
        setup_logging(level=logging.DEBUG)

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.INFO

    def test_debug_internals(self, tmp_path) -> None:
        setup_logging(
            level=logging.DEBUG,
            log_file=tmp_path / "replay.log",
            debug_internals=True,
        )

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG
        assert any(
            isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers
        )

    def test_every_gated_logger_exists(self) -> None:
        """Should only gate package loggers that modules actually create."""
        for name in NOISY_LOGGERS:
            assert cache_store.logger.name.startswith(f"{name}.")
        assert len(NOISY_LOGGERS) == 1
