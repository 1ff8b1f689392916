"""Tests for discord_state.utils.pipeline_logger."""

from __future__ import annotations

from io import StringIO
from typing import Any
from unittest.mock import MagicMock

from rich.console import Console

from discord_state.ingest.logger import IngestLogger
from discord_state.utils.pipeline_logger import BasePipelineLogger


class ConcreteLogger(BasePipelineLogger):
    """Concrete implementation for testing the abstract base class."""

    def __init__(self) -> None:
        super().__init__("test_logger")
        # Replace console with a string-capturing one for assertions
        self.console = Console(file=StringIO(), force_terminal=True, width=120)

    def summary(self, **kwargs: Any) -> None:
        self.print_summary("Test", elapsed=0.0, stats={})

    def get_output(self) -> str:
        self.console.file.seek(0)
        return self.console.file.read()


# ---------------------------------------------------------------------------
# TestStructuredBlock
# ---------------------------------------------------------------------------


class TestStructuredBlock:
    """Tests for StructuredBlock context manager."""

    def test_prints_title(self) -> None:
        logger = ConcreteLogger()

        with logger.block("shard-0.jsonl"):
            pass

        assert "shard-0.jsonl" in logger.get_output()

    def test_field_prints_key_value(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.field("events", 12345)

        output = logger.get_output()
        assert "events:" in output
        assert "12345" in output

    def test_field_with_color(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.field("policy", "aggressive", color="magenta")

        output = logger.get_output()
        assert "policy:" in output
        assert "aggressive" in output

    def test_result(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.result("ingested 3 guilds")

        assert "ingested 3 guilds" in logger.get_output()

    def test_skip(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.skip("empty dump")

        assert "Skipped: empty dump" in logger.get_output()


# ---------------------------------------------------------------------------
# TestBasePipelineLogger
# ---------------------------------------------------------------------------


class TestBasePipelineLogger:
    """Tests for BasePipelineLogger base class."""

    def test_info_delegates_to_python_logger(self) -> None:
        logger = ConcreteLogger()
        logger._logger = MagicMock()

        logger.info("test message")

        logger._logger.info.assert_called_once_with("test message")

    def test_warning_delegates_to_python_logger(self) -> None:
        logger = ConcreteLogger()
        logger._logger = MagicMock()

        logger.warning("warn message")

        logger._logger.warning.assert_called_once_with("warn message")

    def test_success_prints_to_console(self) -> None:
        logger = ConcreteLogger()

        logger.success("Replay complete!")

        assert "Replay complete!" in logger.get_output()

    def test_print_summary_includes_stats_and_elapsed(self) -> None:
        logger = ConcreteLogger()

        logger.print_summary(
            "Replay",
            elapsed=2.5,
            stats={"Shards": 2, "Events dispatched": 1500},
            extra_sections={"Cached": {"Users": 10}},
        )

        output = logger.get_output()
        assert "Replay Complete" in output
        assert "Shards" in output
        assert "1,500" in output
        assert "Cached" in output
        assert "Users" in output
        assert "2.5s" in output


# ---------------------------------------------------------------------------
# TestIngestLogger
# ---------------------------------------------------------------------------


class TestIngestLogger:
    """Tests for the replay pipeline's logger."""

    def test_malformed_event_warns(self) -> None:
        logger = IngestLogger()
        logger._logger = MagicMock()

        logger.malformed_event("shard-0.jsonl", 7, "not an object")

        message = logger._logger.warning.call_args[0][0]
        assert "shard-0.jsonl:7" in message
        assert "not an object" in message

    def test_guild_ingested_is_debug(self) -> None:
        logger = IngestLogger()
        logger._logger = MagicMock()

        logger.guild_ingested(1, "Test Guild", 2, 3, 4)

        logger._logger.debug.assert_called_once()
        logger._logger.info.assert_not_called()

    def test_summary_prints_panel(self) -> None:
        logger = IngestLogger()
        logger.console = Console(file=StringIO(), force_terminal=True, width=120)

        logger.summary(
            shards=1,
            events=5,
            skipped=1,
            elapsed=0.1,
            cache_counts={"Users": 2, "Guilds": 1},
        )

        logger.console.file.seek(0)
        output = logger.console.file.read()
        assert "Replay Complete" in output
        assert "Events skipped" in output
        assert "Guilds" in output
