"""Message API JSON <-> Message mapper."""

from __future__ import annotations

from typing import Any

from discord_state.cache.store import EntityCache
from discord_state.config.settings import CachePolicy
from discord_state.mappers.component import build_component_json, map_component
from discord_state.mappers.embed import build_embed_json, map_embed
from discord_state.mappers.guild import map_guild_member
from discord_state.mappers.user import map_user
from discord_state.models import (
    Attachment,
    BorrowedAuthor,
    Message,
    MessageAuthor,
    MessageFlags,
    MessageReference,
    OwnedAuthor,
    Reaction,
    User,
)
from discord_state.utils.ids import (
    parse_optional_int,
    parse_snowflake,
    parse_snowflake_list,
    snowflake_to_json,
)
from discord_state.utils.time import iso8601_to_epoch

# Interaction callback types
CHANNEL_MESSAGE_WITH_SOURCE = 4
DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5


def map_attachment(data: dict[str, Any]) -> Attachment:
    """Convert Discord API attachment JSON to an Attachment."""
    return Attachment(
        id=parse_snowflake(data.get("id")),
        size=data.get("size", 0),
        filename=data.get("filename", ""),
        url=data.get("url", ""),
        proxy_url=data.get("proxy_url", ""),
        width=parse_optional_int(data.get("width")),
        height=parse_optional_int(data.get("height")),
        content_type=data.get("content_type", ""),
    )


def map_reaction(data: dict[str, Any]) -> Reaction:
    """Convert Discord API reaction JSON to a Reaction."""
    emoji = data.get("emoji") or {}
    return Reaction(
        count=data.get("count", 0),
        me=data.get("me", False),
        emoji_id=parse_snowflake(emoji.get("id")),
        emoji_name=emoji.get("name") or "",
    )


def _map_author(
    data: dict[str, Any],
    users: EntityCache[User] | None,
    cache_policy: CachePolicy,
) -> MessageAuthor | None:
    """Borrow the author from the user cache, or keep a private copy.

    Under the aggressive policy an author missing from the cache is stored
    there first; one already cached is borrowed as-is. An author without an
    id is never cached, so the message keeps its own copy.
    """
    if not data:
        return None

    user = map_user(data)
    if (
        cache_policy is CachePolicy.AGGRESSIVE
        and users is not None
        and user.id.is_valid()
    ):
        if not users.exists(user.id):
            users.store(user)
        return BorrowedAuthor(user.id)

    return OwnedAuthor(user)


def map_message(
    data: dict[str, Any],
    users: EntityCache[User] | None = None,
    cache_policy: CachePolicy = CachePolicy.AGGRESSIVE,
) -> Message:
    """Convert Discord API message JSON to a Message.

    Absent fields take their zero value; a message without an ``id`` gets
    ``Snowflake(0)``, which callers treat as invalid.

    Args:
        data: Raw message object from Discord API
        users: User cache that authors are borrowed from (aggressive policy)
        cache_policy: Whether the author is cached or owned by the message

    Returns:
        Message instance
    """
    message = Message(
        id=parse_snowflake(data.get("id")),
        channel_id=parse_snowflake(data.get("channel_id")),
        guild_id=parse_snowflake(data.get("guild_id")),
        author=_map_author(data.get("author") or {}, users, cache_policy),
        webhook_id=parse_snowflake(data.get("webhook_id")),
        content=data.get("content", ""),
        sent=iso8601_to_epoch(data.get("timestamp")),
        edited=iso8601_to_epoch(data.get("edited_timestamp")),
        tts=data.get("tts", False),
        mention_everyone=data.get("mention_everyone", False),
        pinned=data.get("pinned", False),
        # Users and channels come as objects, roles as bare ids
        mentions=parse_snowflake_list(data.get("mentions")),
        mention_roles=parse_snowflake_list(data.get("mention_roles")),
        mention_channels=parse_snowflake_list(data.get("mention_channels")),
        nonce=str(data.get("nonce") or ""),
        flags=data.get("flags", 0),
        type=data.get("type", 0),
        components=[map_component(c) for c in data.get("components", [])],
        embeds=[map_embed(e) for e in data.get("embeds", [])],
        attachments=[map_attachment(a) for a in data.get("attachments", [])],
        reactions=[map_reaction(r) for r in data.get("reactions", [])],
    )

    if member := data.get("member"):
        message.member = map_guild_member(
            member, message.guild_id, message.author_id
        )

    if reference := data.get("message_reference"):
        message.message_reference = MessageReference(
            message_id=parse_snowflake(reference.get("message_id")),
            channel_id=parse_snowflake(reference.get("channel_id")),
            guild_id=parse_snowflake(reference.get("guild_id")),
            fail_if_not_exists=reference.get("fail_if_not_exists", False),
        )

    return message


def build_message_json(
    message: Message,
    with_id: bool = False,
    is_interaction_response: bool = False,
) -> dict[str, Any]:
    """Convert a Message to the JSON body sent to Discord.

    Args:
        message: The message to send
        with_id: Include the message ``id`` (editing an existing message);
            left out when composing a new one
        is_interaction_response: Wrap the body as an interaction callback
            (``{"type": 4, "data": ...}``, or type 5 while loading) instead
            of a channel message body

    Returns:
        JSON-ready dict. The file upload (filename/filecontent) is never part
        of it; the transport sends that as a separate multipart field.
    """
    body: dict[str, Any] = {}
    if with_id:
        body["id"] = str(int(message.id))
    if not is_interaction_response:
        body["channel_id"] = str(int(message.channel_id))

    body["content"] = message.content
    body["tts"] = message.tts
    body["flags"] = int(message.flags)
    body["type"] = int(message.type)
    if message.nonce:
        body["nonce"] = message.nonce
    body["components"] = [build_component_json(c) for c in message.components]
    body["embeds"] = [build_embed_json(e) for e in message.embeds]

    reference = message.message_reference
    if reference.message_id:
        body["message_reference"] = {
            "message_id": snowflake_to_json(reference.message_id),
            "fail_if_not_exists": reference.fail_if_not_exists,
        }
        if reference.channel_id:
            body["message_reference"]["channel_id"] = snowflake_to_json(
                reference.channel_id
            )
        if reference.guild_id:
            body["message_reference"]["guild_id"] = snowflake_to_json(
                reference.guild_id
            )

    if not is_interaction_response:
        return body

    callback_type = (
        DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE
        if message.flags & MessageFlags.LOADING
        else CHANNEL_MESSAGE_WITH_SOURCE
    )
    return {"type": callback_type, "data": body}
