"""Rich-based logging utilities for the snapshot ingest pipeline.

Per-guild messages go through Python logging at DEBUG so that ingestion
stays quiet inside a long-running client; shard blocks and the final
summary print to the shared console during replays.
"""

from __future__ import annotations

from typing import Any

from discord_state.utils.pipeline_logger import BasePipelineLogger


class IngestLogger(BasePipelineLogger):
    """Logger for guild snapshot ingestion and event replay."""

    def __init__(self) -> None:
        super().__init__(__name__)

    # -------------------------------------------------------------------------
    # Guild snapshots
    # -------------------------------------------------------------------------

    def guild_ingested(
        self,
        guild_id: int,
        guild_name: str,
        roles: int,
        channels: int,
        members: int,
    ) -> None:
        self._logger.debug(
            f"Guild {guild_name} ({guild_id}): "
            f"{roles:,} roles, {channels:,} channels, {members:,} members"
        )

    def guild_unavailable(self, guild_id: int) -> None:
        self._logger.debug(f"Guild {guild_id} is unavailable, storing placeholder")

    # -------------------------------------------------------------------------
    # Event replay
    # -------------------------------------------------------------------------

    def malformed_event(self, source: str, line_number: int, reason: str) -> None:
        self._logger.warning(f"{source}:{line_number}: skipping malformed event ({reason})")

    def summary(
        self,
        shards: int = 0,
        events: int = 0,
        skipped: int = 0,
        elapsed: float = 0.0,
        cache_counts: dict[str, int] | None = None,
        **kwargs: Any,
    ) -> None:
        """Print final replay summary."""
        self.print_summary(
            "Replay",
            elapsed=elapsed,
            stats={
                "Shards": shards,
                "Events dispatched": events,
                "Events skipped": skipped,
            },
            extra_sections={"Cached": cache_counts} if cache_counts else None,
            style="cyan",
        )


# Global logger instance
logger = IngestLogger()
