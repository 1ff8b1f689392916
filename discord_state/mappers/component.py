"""Component JSON <-> Component mapper.

Both directions recurse through ``components``. Discord defines one level
of nesting (an action row holding buttons); anything deeper is carried
through structurally without interpretation.
"""

from __future__ import annotations

from typing import Any

from discord_state.models import (
    Component,
    ComponentEmoji,
    ComponentStyle,
    ComponentType,
)
from discord_state.utils.ids import parse_snowflake, snowflake_to_json


def _parse_enum(enum_cls: Any, value: Any) -> Any:
    """Known values become enum members; unknown ones stay plain ints."""
    number = int(value)
    try:
        return enum_cls(number)
    except ValueError:
        return number


def map_component(data: dict[str, Any]) -> Component:
    """Convert a Discord component object (and its children) to a Component."""
    component = Component(
        label=data.get("label", "") or "",
        custom_id=data.get("custom_id", "") or "",
        url=data.get("url", "") or "",
        disabled=data.get("disabled", False),
        components=[map_component(c) for c in data.get("components", [])],
    )
    if "style" in data:
        component.explicit_style = _parse_enum(ComponentStyle, data["style"])

    emoji = data.get("emoji")
    if emoji:
        component.emoji = ComponentEmoji(
            name=emoji.get("name") or "",
            id=parse_snowflake(emoji.get("id")),
            animated=emoji.get("animated", False),
        )

    # Only pin the wire type when derivation would get it wrong (unknown
    # types, bare buttons), so later builder calls still apply.
    if "type" in data:
        wire_type = _parse_enum(ComponentType, data["type"])
        if component.type != wire_type:
            component.explicit_type = wire_type

    return component


def build_emoji_json(emoji: ComponentEmoji) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    if emoji.name:
        payload["name"] = emoji.name
    if emoji.id:
        payload["id"] = snowflake_to_json(emoji.id)
        payload["animated"] = emoji.animated
    return payload


def build_component_json(component: Component) -> dict[str, Any]:
    """Convert a Component to the JSON object Discord expects."""
    payload: dict[str, Any] = {"type": int(component.type)}

    if component.type == ComponentType.ACTION_ROW:
        payload["components"] = [build_component_json(c) for c in component.components]
        return payload

    if component.type == ComponentType.BUTTON:
        payload["style"] = int(component.style)
        payload["disabled"] = component.disabled
    if component.label:
        payload["label"] = component.label
    # Link buttons carry a url instead of a custom_id.
    if component.style == ComponentStyle.LINK:
        payload["url"] = component.url
    elif component.custom_id:
        payload["custom_id"] = component.custom_id
    if component.emoji is not None:
        payload["emoji"] = build_emoji_json(component.emoji)
    if component.components:
        payload["components"] = [build_component_json(c) for c in component.components]

    return payload
