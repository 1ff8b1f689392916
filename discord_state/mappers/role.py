"""Role API JSON to Role mapper."""

from __future__ import annotations

from typing import Any

from discord_state.models import Role
from discord_state.utils.ids import parse_snowflake


def map_role(data: dict[str, Any], guild_id: int) -> Role:
    """Convert Discord API role JSON to a Role.

    Args:
        data: Raw role object from Discord API
        guild_id: Parent guild ID (roles in a guild payload don't carry it)

    Returns:
        Role instance, not yet stored in any cache
    """
    return Role(
        id=parse_snowflake(data.get("id")),
        guild_id=parse_snowflake(guild_id),
        name=data.get("name", ""),
        color=data.get("color", 0),
        hoist=data.get("hoist", False),
        position=data.get("position", 0),
        permissions=int(data.get("permissions", "0") or 0),
        managed=data.get("managed", False),
        mentionable=data.get("mentionable", False),
    )
