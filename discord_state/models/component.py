"""Interactive message components (action rows and buttons).

A component is either an action row, a container holding sibling buttons,
or a button. Build one action row and add buttons to it:

    row = Component().add_component(
        Component().set_label("Yes").set_id("confirm").set_style(ComponentStyle.SUCCESS)
    )

Type and style are derived from what has been set rather than mutated by
each setter, so the order of the builder calls does not matter:

- anything with children is an action row
- anything with a button field (label, style, custom_id, url, emoji,
  disabled) is a button
- a button with a url is a link button
- set_type() is an explicit override; any later builder call clears it
  so the component is derived again
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from discord_state.utils.snowflake import Snowflake

# Limits documented by the Discord API; values are clamped to these.
LABEL_MAX_LENGTH = 80
CUSTOM_ID_MAX_LENGTH = 100
URL_MAX_LENGTH = 512


class ComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2


class ComponentStyle(IntEnum):
    PRIMARY = 1  # blurple
    SECONDARY = 2  # grey
    SUCCESS = 3  # green
    DANGER = 4  # red
    LINK = 5  # external hyperlink


class ComponentError(ValueError):
    """Raised for a component tree that cannot be sent as-is."""


class InvalidEmojiError(ValueError):
    """Raised when a button emoji has neither a name nor an id."""


@dataclass
class ComponentEmoji:
    """Emoji shown on a button.

    Unicode emoji set only ``name`` (the character itself, not ``:smile:``);
    custom guild emoji set ``id`` and usually ``name``.
    """

    name: str = ""
    id: Snowflake = field(default_factory=Snowflake)
    animated: bool = False

    @property
    def is_custom(self) -> bool:
        return self.id != 0


@dataclass
class Component:
    components: list[Component] = field(default_factory=list)
    label: str = ""
    custom_id: str = ""
    url: str = ""
    disabled: bool = False
    emoji: ComponentEmoji | None = None

    # Explicit overrides; None means derive. Builder calls clear explicit_type.
    explicit_type: ComponentType | int | None = None
    explicit_style: ComponentStyle | int | None = None

    # Set by any button-only setter, even one that stores a default value.
    button_intent: bool = field(default=False, compare=False, repr=False)

    # Names of fields whose value was shortened to the API limit.
    clamped: set[str] = field(default_factory=set, compare=False, repr=False)

    # -------------------------------------------------------------------------
    # Derived type and style
    # -------------------------------------------------------------------------

    def has_button_fields(self) -> bool:
        return bool(
            self.button_intent
            or self.label
            or self.custom_id
            or self.url
            or self.disabled
            or self.emoji is not None
            or self.explicit_style is not None
        )

    @property
    def type(self) -> ComponentType | int:
        if self.explicit_type is not None:
            return self.explicit_type
        if self.components:
            return ComponentType.ACTION_ROW
        if self.has_button_fields():
            return ComponentType.BUTTON
        return ComponentType.ACTION_ROW

    @property
    def style(self) -> ComponentStyle | int:
        if self.url:
            return ComponentStyle.LINK
        if self.explicit_style is not None:
            return self.explicit_style
        return ComponentStyle.PRIMARY

    def validate(self) -> "Component":
        """Check the tree is consistent; returns self so it can end a chain."""
        if self.components and self.has_button_fields():
            raise ComponentError(
                "component has both children and button fields; "
                "an action row cannot also be a button"
            )
        is_button = self.type == ComponentType.BUTTON
        if is_button and self.style == ComponentStyle.LINK and not self.url:
            raise ComponentError("link buttons need a url")
        for child in self.components:
            child.validate()
        return self

    # -------------------------------------------------------------------------
    # Builder
    # -------------------------------------------------------------------------

    def _clamp(self, name: str, value: str, limit: int) -> str:
        if len(value) > limit:
            self.clamped.add(name)
            return value[:limit]
        return value

    def _mark_button(self) -> None:
        self.button_intent = True
        self.explicit_type = None

    def set_type(self, component_type: ComponentType | int) -> "Component":
        self.explicit_type = component_type
        return self

    def set_label(self, label: str) -> "Component":
        self._mark_button()
        self.label = self._clamp("label", label, LABEL_MAX_LENGTH)
        return self

    def set_url(self, url: str) -> "Component":
        self._mark_button()
        self.url = self._clamp("url", url, URL_MAX_LENGTH)
        return self

    def set_style(self, style: ComponentStyle | int) -> "Component":
        self._mark_button()
        self.explicit_style = style
        return self

    def set_id(self, custom_id: str) -> "Component":
        self._mark_button()
        self.custom_id = self._clamp("custom_id", custom_id, CUSTOM_ID_MAX_LENGTH)
        return self

    def set_disabled(self, disabled: bool = True) -> "Component":
        self._mark_button()
        self.disabled = disabled
        return self

    def add_component(self, component: "Component") -> "Component":
        self.explicit_type = None
        self.components.append(component)
        return self

    def set_emoji(
        self, name: str = "", id: int = 0, animated: bool = False
    ) -> "Component":
        """Attach an emoji; at least one of ``name`` or ``id`` is required.

        ``animated`` only applies to custom emoji and is dropped without an id.
        """
        if not name and not id:
            raise InvalidEmojiError("emoji needs a name or an id")
        self._mark_button()
        self.emoji = ComponentEmoji(
            name=name,
            id=Snowflake(id),
            animated=bool(animated and id),
        )
        return self
