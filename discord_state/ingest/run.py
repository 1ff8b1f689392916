"""Replay of recorded gateway traffic into the caches.

Each shard dump is a JSON-lines file with one gateway frame per line.
Shards are replayed concurrently on worker threads, all feeding the same
CacheRegistry, the way live shards feed one client.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path

from discord_state.cache import CacheRegistry
from discord_state.config.settings import AppSettings, load_config
from discord_state.core import BaseOrchestrator
from discord_state.ingest.dispatcher import EventDispatcher
from discord_state.ingest.logger import logger


@dataclass
class ShardReplayResult:
    """Result of replaying one shard dump."""

    path: Path
    dispatched: int
    skipped: int
    guilds: int


def replay_shard(path: Path, dispatcher: EventDispatcher) -> ShardReplayResult:
    """Feed every frame in ``path`` to ``dispatcher``.

    Blank lines are ignored. Lines that are not a JSON object are logged and
    counted as skipped.
    """
    malformed = 0

    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                event = json.loads(line)
            except json.JSONDecodeError as e:
                logger.malformed_event(str(path), line_number, e.msg)
                malformed += 1
                continue
            if not isinstance(event, dict):
                logger.malformed_event(str(path), line_number, "not an object")
                malformed += 1
                continue
            dispatcher.dispatch(event)

    return ShardReplayResult(
        path=path,
        dispatched=dispatcher.dispatched,
        skipped=dispatcher.skipped + malformed,
        guilds=dispatcher.counts["GUILD_CREATE"],
    )


class ReplayOrchestrator(BaseOrchestrator):
    """Replays shard dumps concurrently into one CacheRegistry."""

    def __init__(
        self, settings: AppSettings, caches: CacheRegistry | None = None
    ) -> None:
        super().__init__(settings, caches)
        self.results: list[ShardReplayResult] = []

    def _replay_one(self, path: Path) -> ShardReplayResult:
        return replay_shard(path, EventDispatcher(self.caches, self.settings))

    async def _run_pipeline(self, paths: list[Path]) -> None:
        """Replay every shard on its own thread, then report per shard."""
        if not paths:
            logger.warning("No shard files to replay")
            return

        self.results = list(
            await asyncio.gather(
                *(asyncio.to_thread(self._replay_one, path) for path in paths)
            )
        )

        for result in self.results:
            with logger.block(result.path.name) as block:
                if not result.dispatched and not result.skipped:
                    block.skip("no events")
                    continue
                block.field("policy", self.settings.cache_policy.value, color="magenta")
                block.field("events", f"{result.dispatched:,}")
                if result.skipped:
                    block.field("skipped", f"{result.skipped:,}")
                block.result(f"ingested {result.guilds:,} guilds")

    def _log_summary(self, elapsed: float) -> None:
        logger.summary(
            shards=len(self.results),
            events=sum(r.dispatched for r in self.results),
            skipped=sum(r.skipped for r in self.results),
            elapsed=elapsed,
            cache_counts=self.caches.counts(),
        )


async def run_replay(
    config_path: str = "config.json",
    paths: list[str] | None = None,
) -> CacheRegistry:
    """Entry point for replaying shard dumps."""
    settings = load_config(config_path)
    orchestrator = ReplayOrchestrator(settings)
    return await orchestrator.run(paths)
