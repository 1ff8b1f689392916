"""Discord Channel entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from discord_state.utils.snowflake import Snowflake

# Channel type constants for reference
CHANNEL_TYPE_TEXT = 0
CHANNEL_TYPE_DM = 1
CHANNEL_TYPE_VOICE = 2
CHANNEL_TYPE_GROUP_DM = 3
CHANNEL_TYPE_CATEGORY = 4
CHANNEL_TYPE_ANNOUNCEMENT = 5
CHANNEL_TYPE_STAGE = 13
CHANNEL_TYPE_FORUM = 15


@dataclass
class Channel:
    id: Snowflake = field(default_factory=Snowflake)
    guild_id: Snowflake = field(default_factory=Snowflake)
    type: int = CHANNEL_TYPE_TEXT
    name: str = ""
    topic: str = ""
    position: int = 0
    parent_id: Snowflake = field(default_factory=Snowflake)
    nsfw: bool = False
    last_message_id: Snowflake = field(default_factory=Snowflake)
    rate_limit_per_user: int = 0
    # Voice settings
    bitrate: int = 0
    user_limit: int = 0

    @property
    def is_category(self) -> bool:
        return self.type == CHANNEL_TYPE_CATEGORY

    @property
    def is_voice(self) -> bool:
        return self.type in (CHANNEL_TYPE_VOICE, CHANNEL_TYPE_STAGE)
