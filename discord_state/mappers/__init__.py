"""Mappers between Discord API JSON and entity models.

``map_*`` functions read decoded JSON into entities (fill from JSON);
``build_*_json`` functions turn outbound entities back into JSON-ready
dicts. Only components, embeds and messages are ever sent.
"""

from discord_state.mappers.channel import map_channel
from discord_state.mappers.component import build_component_json, map_component
from discord_state.mappers.embed import build_embed_json, map_embed
from discord_state.mappers.guild import map_guild, map_guild_member
from discord_state.mappers.message import (
    build_message_json,
    map_attachment,
    map_message,
    map_reaction,
)
from discord_state.mappers.role import map_role
from discord_state.mappers.user import map_user

__all__ = [
    "build_component_json",
    "build_embed_json",
    "build_message_json",
    "map_attachment",
    "map_channel",
    "map_component",
    "map_embed",
    "map_guild",
    "map_guild_member",
    "map_message",
    "map_reaction",
    "map_role",
    "map_user",
]
