"""Guild and guild member API JSON mappers."""

from __future__ import annotations

from typing import Any

from discord_state.models import Guild, GuildMember
from discord_state.utils.ids import parse_snowflake, parse_snowflake_list
from discord_state.utils.time import iso8601_to_epoch


def map_guild(data: dict[str, Any]) -> Guild:
    """Convert the scalar part of a Discord guild object to a Guild.

    Roles, channels and members are left empty; filling them in (and
    caching the records they point to) is the ingestor's job.

    Args:
        data: Raw guild object from Discord API or a GUILD_CREATE payload

    Returns:
        Guild instance, not yet stored in any cache
    """
    return Guild(
        id=parse_snowflake(data.get("id")),
        name=data.get("name", ""),
        icon=data.get("icon"),
        description=data.get("description"),
        owner_id=parse_snowflake(data.get("owner_id")),
        preferred_locale=data.get("preferred_locale", "en-US"),
        features=list(data.get("features", [])),
        member_count=data.get("member_count", 0),
        large=data.get("large", False),
        unavailable=data.get("unavailable", False),
    )


def map_guild_member(
    data: dict[str, Any], guild_id: int, user_id: int | None = None
) -> GuildMember:
    """Convert Discord API guild member JSON to a GuildMember.

    Args:
        data: Raw member object
        guild_id: The guild the membership belongs to
        user_id: The member's user ID; taken from the nested ``user`` object
            when not given (message payloads carry the member without it)

    Returns:
        GuildMember instance
    """
    if user_id is None:
        user_id = parse_snowflake((data.get("user") or {}).get("id"))

    return GuildMember(
        guild_id=parse_snowflake(guild_id),
        user_id=parse_snowflake(user_id),
        nickname=data.get("nick") or "",
        roles=parse_snowflake_list(data.get("roles")),
        joined_at=iso8601_to_epoch(data.get("joined_at")),
        premium_since=iso8601_to_epoch(data.get("premium_since")),
        deaf=data.get("deaf", False),
        mute=data.get("mute", False),
        pending=data.get("pending", False),
    )
