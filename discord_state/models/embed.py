"""Rich embeds attached to messages.

Every sub-object is optional and present independently. ``video`` and
``provider`` are only ever received from Discord and are never sent; the
proxy URLs are computed by Discord and are likewise receive-only.
"""

from __future__ import annotations

from dataclasses import dataclass, field

FIELD_VALUE_MAX_LENGTH = 1000


@dataclass
class EmbedFooter:
    text: str = ""
    icon_url: str = ""
    proxy_url: str = ""


@dataclass
class EmbedImage:
    """An image, thumbnail or video. Height and width are set by Discord."""

    url: str = ""
    proxy_url: str = ""
    height: int | None = None
    width: int | None = None


@dataclass
class EmbedProvider:
    name: str = ""
    url: str = ""


@dataclass
class EmbedAuthor:
    name: str = ""
    url: str = ""
    icon_url: str = ""
    proxy_icon_url: str = ""


@dataclass
class EmbedField:
    name: str = ""
    value: str = ""
    is_inline: bool = False


@dataclass
class Embed:
    title: str = ""
    type: str = "rich"
    description: str = ""
    url: str = ""
    timestamp: int = 0  # epoch seconds, 0 = not set
    color: int = 0
    footer: EmbedFooter | None = None
    image: EmbedImage | None = None
    thumbnail: EmbedImage | None = None
    video: EmbedImage | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] = field(default_factory=list)

    clamped: set[str] = field(default_factory=set, compare=False, repr=False)

    def set_title(self, text: str) -> "Embed":
        self.title = text
        return self

    def set_description(self, text: str) -> "Embed":
        self.description = text
        return self

    def set_color(self, color: int) -> "Embed":
        self.color = color
        return self

    def set_url(self, url: str) -> "Embed":
        self.url = url
        return self

    def set_timestamp(self, seconds: int) -> "Embed":
        self.timestamp = seconds
        return self

    def add_field(self, name: str, value: str, is_inline: bool = False) -> "Embed":
        if len(value) > FIELD_VALUE_MAX_LENGTH:
            self.clamped.add("fields.value")
            value = value[:FIELD_VALUE_MAX_LENGTH]
        self.fields.append(EmbedField(name=name, value=value, is_inline=is_inline))
        return self

    def set_author(self, name: str, url: str = "", icon_url: str = "") -> "Embed":
        self.author = EmbedAuthor(name=name, url=url, icon_url=icon_url)
        return self

    def set_footer(self, text: str, icon_url: str = "") -> "Embed":
        self.footer = EmbedFooter(text=text, icon_url=icon_url)
        return self

    def set_provider(self, name: str, url: str = "") -> "Embed":
        self.provider = EmbedProvider(name=name, url=url)
        return self

    def set_image(self, url: str) -> "Embed":
        self.image = EmbedImage(url=url)
        return self

    def set_video(self, url: str) -> "Embed":
        self.video = EmbedImage(url=url)
        return self

    def set_thumbnail(self, url: str) -> "Embed":
        self.thumbnail = EmbedImage(url=url)
        return self
