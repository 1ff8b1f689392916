"""Discord Guild and GuildMember entities.

A guild only holds references: ``roles`` and ``channels`` are lists of ids
whose records live in the role and channel caches, and ``members`` maps a
user id to the guild-scoped member record (the user itself lives in the
user cache).

A guild received with ``unavailable`` set is known to exist but has no data
yet (an outage on Discord's side); its reference lists stay empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from discord_state.utils.snowflake import Snowflake


@dataclass
class GuildMember:
    """A user's membership of one guild.

    User existence is global; membership is scoped to ``guild_id``.
    """

    guild_id: Snowflake = field(default_factory=Snowflake)
    user_id: Snowflake = field(default_factory=Snowflake)
    nickname: str = ""
    roles: list[Snowflake] = field(default_factory=list)
    joined_at: int = 0  # epoch seconds
    premium_since: int = 0  # epoch seconds, 0 = not boosting
    deaf: bool = False
    mute: bool = False
    pending: bool = False


@dataclass
class Guild:
    id: Snowflake = field(default_factory=Snowflake)
    name: str = ""
    icon: str | None = None
    description: str | None = None
    owner_id: Snowflake = field(default_factory=Snowflake)
    preferred_locale: str = "en-US"
    features: list[str] = field(default_factory=list)
    member_count: int = 0
    large: bool = False
    unavailable: bool = False

    # References into the role, channel and user caches
    roles: list[Snowflake] = field(default_factory=list)
    channels: list[Snowflake] = field(default_factory=list)
    members: dict[Snowflake, GuildMember] = field(default_factory=dict)

    def is_unavailable(self) -> bool:
        return self.unavailable
