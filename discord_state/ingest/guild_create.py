"""GUILD_CREATE snapshot ingestion.

Decomposes the nested guild payload into normalized entities:

1. the guild's scalar fields become a new Guild
2. unless the guild is unavailable:
   - every role is cached and its id appended to ``guild.roles``
   - every channel is cached and its id appended to ``guild.channels``
   - every member's user is cached and the member record is put in
     ``guild.members`` under the user id
3. the guild is cached last

Storing the guild last means anyone who finds it in the guild cache also
finds every role, channel and user it refers to. A re-sent snapshot builds
a fresh Guild, so the previous reference lists are replaced, not merged.
"""

from __future__ import annotations

from typing import Any

from discord_state.cache import CacheRegistry
from discord_state.ingest.logger import logger
from discord_state.mappers import (
    map_channel,
    map_guild,
    map_guild_member,
    map_role,
    map_user,
)
from discord_state.models import Guild


def ingest_roles(
    caches: CacheRegistry, guild: Guild, roles_data: list[dict[str, Any]]
) -> int:
    """Cache each role and record its id on the guild.

    Returns:
        Number of roles ingested
    """
    for role_data in roles_data:
        role = map_role(role_data, guild.id)
        guild.roles.append(caches.roles.store(role))
    return len(roles_data)


def ingest_channels(
    caches: CacheRegistry, guild: Guild, channels_data: list[dict[str, Any]]
) -> int:
    """Cache each channel and record its id on the guild.

    Returns:
        Number of channels ingested
    """
    for channel_data in channels_data:
        channel = map_channel(channel_data, guild_id=guild.id)
        guild.channels.append(caches.channels.store(channel))
    return len(channels_data)


def ingest_members(
    caches: CacheRegistry, guild: Guild, members_data: list[dict[str, Any]]
) -> int:
    """Cache each member's user and attach the membership to the guild.

    Members without a user id are skipped; nothing is cached under id 0.

    Returns:
        Number of members ingested
    """
    ingested = 0
    for member_data in members_data:
        user = map_user(member_data.get("user") or {})
        if not user.id.is_valid():
            continue
        user_id = caches.users.store(user)
        guild.members[user_id] = map_guild_member(member_data, guild.id, user_id)
        ingested += 1
    return ingested


def ingest_guild_create(data: dict[str, Any], caches: CacheRegistry) -> Guild:
    """Ingest the ``d`` payload of a GUILD_CREATE event.

    Args:
        data: The event payload (guild scalars plus roles, channels, members)
        caches: The caches to populate

    Returns:
        The stored Guild
    """
    guild = map_guild(data)

    if guild.is_unavailable():
        logger.guild_unavailable(guild.id)
    else:
        roles = ingest_roles(caches, guild, data.get("roles", []))
        channels = ingest_channels(caches, guild, data.get("channels", []))
        members = ingest_members(caches, guild, data.get("members", []))
        logger.guild_ingested(guild.id, guild.name, roles, channels, members)

    caches.guilds.store(guild)
    return guild
