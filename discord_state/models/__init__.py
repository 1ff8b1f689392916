"""Discord State entity models.

Plain dataclasses with fluent builders for the outbound entities
(Component, Embed, Message). Ids are Snowflake values; cross-entity
references are always ids, never object references.
"""

from discord_state.models.channel import Channel
from discord_state.models.component import (
    Component,
    ComponentEmoji,
    ComponentError,
    ComponentStyle,
    ComponentType,
    InvalidEmojiError,
)
from discord_state.models.embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedProvider,
)
from discord_state.models.guild import Guild, GuildMember
from discord_state.models.message import (
    Attachment,
    BorrowedAuthor,
    Message,
    MessageAuthor,
    MessageFlags,
    MessageReference,
    MessageType,
    OwnedAuthor,
    Reaction,
)
from discord_state.models.role import Role
from discord_state.models.user import User

__all__ = [
    "Attachment",
    "BorrowedAuthor",
    "Channel",
    "Component",
    "ComponentEmoji",
    "ComponentError",
    "ComponentStyle",
    "ComponentType",
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedImage",
    "EmbedProvider",
    "Guild",
    "GuildMember",
    "InvalidEmojiError",
    "Message",
    "MessageAuthor",
    "MessageFlags",
    "MessageReference",
    "MessageType",
    "OwnedAuthor",
    "Reaction",
    "Role",
    "User",
]
