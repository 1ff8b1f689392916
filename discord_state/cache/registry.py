"""The set of caches one client instance works against.

Passed explicitly to the ingestor and dispatcher, so independent clients
(or tests) never share state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from discord_state.cache.store import EntityCache
from discord_state.models import Channel, Guild, Role, User


@dataclass
class CacheRegistry:
    users: EntityCache[User] = field(default_factory=lambda: EntityCache("user"))
    roles: EntityCache[Role] = field(default_factory=lambda: EntityCache("role"))
    channels: EntityCache[Channel] = field(
        default_factory=lambda: EntityCache("channel")
    )
    guilds: EntityCache[Guild] = field(default_factory=lambda: EntityCache("guild"))

    def counts(self) -> dict[str, int]:
        return {
            "Users": len(self.users),
            "Roles": len(self.roles),
            "Channels": len(self.channels),
            "Guilds": len(self.guilds),
        }

    def clear(self) -> None:
        for cache in (self.users, self.roles, self.channels, self.guilds):
            cache.clear()
