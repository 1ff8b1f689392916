"""Routes gateway dispatch frames to their ingestion handlers.

A dispatch frame looks like ``{"op": 0, "t": "GUILD_CREATE", "d": {...}}``.
Frames with another opcode, an unknown event name or no payload are
counted as skipped rather than raised; the transport owns everything that
is not a dispatch.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable

from discord_state.cache import CacheRegistry
from discord_state.config.settings import AppSettings, CachePolicy
from discord_state.ingest.guild_create import ingest_guild_create
from discord_state.mappers import map_message

OP_DISPATCH = 0


class EventDispatcher:
    """Dispatches events for one shard into a shared CacheRegistry."""

    def __init__(
        self, caches: CacheRegistry, settings: AppSettings | None = None
    ) -> None:
        self.caches = caches
        self.cache_policy = (
            settings.cache_policy if settings is not None else CachePolicy.AGGRESSIVE
        )
        self.counts: Counter[str] = Counter()
        self.skipped = 0
        self._handlers: dict[str, Callable[[dict[str, Any]], None]] = {
            "GUILD_CREATE": self._on_guild_create,
            "MESSAGE_CREATE": self._on_message_create,
        }

    @property
    def dispatched(self) -> int:
        return sum(self.counts.values())

    def dispatch(self, event: dict[str, Any]) -> bool:
        """Handle one frame; returns False when it was skipped."""
        name = event.get("t")
        payload = event.get("d")
        handler = self._handlers.get(name) if isinstance(name, str) else None

        if (
            event.get("op", OP_DISPATCH) != OP_DISPATCH
            or handler is None
            or not isinstance(payload, dict)
        ):
            self.skipped += 1
            return False

        handler(payload)
        self.counts[name] += 1
        return True

    def _on_guild_create(self, payload: dict[str, Any]) -> None:
        ingest_guild_create(payload, self.caches)

    def _on_message_create(self, payload: dict[str, Any]) -> None:
        # Messages themselves are not cached; under the aggressive policy
        # mapping one caches its author.
        map_message(payload, users=self.caches.users, cache_policy=self.cache_policy)
