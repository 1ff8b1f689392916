"""User API JSON to User mapper."""

from __future__ import annotations

from typing import Any

from discord_state.models import User
from discord_state.utils.ids import parse_snowflake


def map_user(data: dict[str, Any]) -> User:
    """Convert Discord API user JSON to a User.

    Args:
        data: Raw user object from Discord API (may be partial)

    Returns:
        User instance, not yet stored in any cache
    """
    return User(
        id=parse_snowflake(data.get("id")),
        username=data.get("username", ""),
        discriminator=data.get("discriminator", ""),
        global_name=data.get("global_name"),
        avatar=data.get("avatar"),
        bot=data.get("bot", False),
        system=data.get("system", False),
        public_flags=data.get("public_flags", 0),
    )
