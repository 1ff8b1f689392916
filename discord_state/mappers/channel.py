"""Channel API JSON to Channel mapper."""

from __future__ import annotations

from typing import Any

from discord_state.models import Channel
from discord_state.utils.ids import parse_snowflake


def map_channel(data: dict[str, Any], guild_id: int | None = None) -> Channel:
    """Convert Discord API channel JSON to a Channel.

    Args:
        data: Raw channel object from Discord API
        guild_id: Used when the payload has no guild_id of its own, as is
            the case for channels nested in a guild payload

    Returns:
        Channel instance, not yet stored in any cache
    """
    return Channel(
        id=parse_snowflake(data.get("id")),
        guild_id=parse_snowflake(data.get("guild_id") or guild_id),
        type=data.get("type", 0),
        name=data.get("name") or "",
        topic=data.get("topic") or "",
        position=data.get("position", 0),
        parent_id=parse_snowflake(data.get("parent_id")),
        nsfw=data.get("nsfw", False),
        last_message_id=parse_snowflake(data.get("last_message_id")),
        rate_limit_per_user=data.get("rate_limit_per_user", 0),
        bitrate=data.get("bitrate", 0),
        user_limit=data.get("user_limit", 0),
    )
