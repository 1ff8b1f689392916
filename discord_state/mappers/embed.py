"""Embed JSON <-> Embed mapper.

Parsing reads every sub-object Discord sends. Building only writes what a
client may send: no video, no provider, no proxy URLs and no image sizes.
"""

from __future__ import annotations

from typing import Any

from discord_state.models import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedProvider,
)
from discord_state.utils.ids import parse_optional_int
from discord_state.utils.json import drop_empty
from discord_state.utils.time import epoch_to_iso8601, iso8601_to_epoch


def _map_image(data: dict[str, Any]) -> EmbedImage:
    return EmbedImage(
        url=data.get("url", ""),
        proxy_url=data.get("proxy_url", ""),
        height=parse_optional_int(data.get("height")),
        width=parse_optional_int(data.get("width")),
    )


def map_embed(data: dict[str, Any]) -> Embed:
    """Convert a Discord embed object to an Embed."""
    embed = Embed(
        title=data.get("title", ""),
        type=data.get("type", "rich"),
        description=data.get("description", ""),
        url=data.get("url", ""),
        timestamp=iso8601_to_epoch(data.get("timestamp")),
        color=data.get("color", 0) or 0,
    )

    if footer := data.get("footer"):
        embed.footer = EmbedFooter(
            text=footer.get("text", ""),
            icon_url=footer.get("icon_url", ""),
            proxy_url=footer.get("proxy_icon_url", ""),
        )
    if image := data.get("image"):
        embed.image = _map_image(image)
    if thumbnail := data.get("thumbnail"):
        embed.thumbnail = _map_image(thumbnail)
    if video := data.get("video"):
        embed.video = _map_image(video)
    if provider := data.get("provider"):
        embed.provider = EmbedProvider(
            name=provider.get("name", ""),
            url=provider.get("url", ""),
        )
    if author := data.get("author"):
        embed.author = EmbedAuthor(
            name=author.get("name", ""),
            url=author.get("url", ""),
            icon_url=author.get("icon_url", ""),
            proxy_icon_url=author.get("proxy_icon_url", ""),
        )

    embed.fields = [
        EmbedField(
            name=f.get("name", ""),
            value=f.get("value", ""),
            is_inline=f.get("inline", False),
        )
        for f in data.get("fields", [])
    ]
    return embed


def build_embed_json(embed: Embed) -> dict[str, Any]:
    """Convert an Embed to the JSON object sent to Discord."""
    payload = drop_empty(
        {
            "title": embed.title,
            "type": embed.type,
            "description": embed.description,
            "url": embed.url,
            "timestamp": epoch_to_iso8601(embed.timestamp),
        }
    )
    if embed.color:
        payload["color"] = embed.color

    if embed.footer is not None:
        payload["footer"] = drop_empty(
            {"text": embed.footer.text, "icon_url": embed.footer.icon_url}
        )
    if embed.image is not None:
        payload["image"] = {"url": embed.image.url}
    if embed.thumbnail is not None:
        payload["thumbnail"] = {"url": embed.thumbnail.url}
    if embed.author is not None:
        payload["author"] = drop_empty(
            {
                "name": embed.author.name,
                "url": embed.author.url,
                "icon_url": embed.author.icon_url,
            }
        )
    if embed.fields:
        payload["fields"] = [
            {"name": f.name, "value": f.value, "inline": f.is_inline}
            for f in embed.fields
        ]

    return payload
