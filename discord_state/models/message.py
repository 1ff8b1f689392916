"""Discord Message entity and its receive-only parts.

The message is the aggregate root: it owns its attachments, embeds,
reactions and components by value, and refers to users, roles and channels
by id only.

The author is the one place where ownership varies. Depending on the cache
policy a message either borrows a user held in the shared user cache
(``BorrowedAuthor``, just the id) or owns a private copy of the user record
(``OwnedAuthor``). The tag is explicit so nothing has to guess which it is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import TYPE_CHECKING, Union

from discord_state.models.component import Component, ComponentError, ComponentType
from discord_state.models.embed import Embed
from discord_state.models.guild import GuildMember
from discord_state.models.user import User
from discord_state.utils.snowflake import Snowflake

if TYPE_CHECKING:
    from discord_state.cache.store import EntityCache


class MessageFlags(IntFlag):
    """Message flag bits. Bit 5 is reserved by Discord and deliberately absent."""

    CROSSPOSTED = 1 << 0  # published to following channels
    IS_CROSSPOST = 1 << 1  # originated in another channel via following
    SUPPRESS_EMBEDS = 1 << 2
    SOURCE_MESSAGE_DELETED = 1 << 3  # source of this crosspost was deleted
    URGENT = 1 << 4  # from the urgent message system
    EPHEMERAL = 1 << 6  # only visible to the interaction's invoker
    LOADING = 1 << 7  # interaction response, bot is "thinking"


class MessageType(IntEnum):
    DEFAULT = 0
    RECIPIENT_ADD = 1
    RECIPIENT_REMOVE = 2
    CALL = 3
    CHANNEL_NAME_CHANGE = 4
    CHANNEL_ICON_CHANGE = 5
    CHANNEL_PINNED_MESSAGE = 6
    GUILD_MEMBER_JOIN = 7
    USER_PREMIUM_GUILD_SUBSCRIPTION = 8
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_1 = 9
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_2 = 10
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_3 = 11
    CHANNEL_FOLLOW_ADD = 12
    GUILD_DISCOVERY_DISQUALIFIED = 14
    GUILD_DISCOVERY_REQUALIFIED = 15
    GUILD_DISCOVERY_GRACE_PERIOD_INITIAL_WARNING = 16
    GUILD_DISCOVERY_GRACE_PERIOD_FINAL_WARNING = 17
    REPLY = 19
    APPLICATION_COMMAND = 20
    GUILD_INVITE_REMINDER = 22


@dataclass
class Attachment:
    id: Snowflake = field(default_factory=Snowflake)
    size: int = 0
    filename: str = ""
    url: str = ""
    proxy_url: str = ""
    width: int | None = None
    height: int | None = None
    content_type: str = ""


@dataclass
class Reaction:
    count: int = 0
    me: bool = False
    # Unicode emoji have a name and no id; custom emoji have both.
    emoji_id: Snowflake = field(default_factory=Snowflake)
    emoji_name: str = ""


@dataclass
class MessageReference:
    message_id: Snowflake = field(default_factory=Snowflake)
    channel_id: Snowflake = field(default_factory=Snowflake)
    guild_id: Snowflake = field(default_factory=Snowflake)
    fail_if_not_exists: bool = False


@dataclass(frozen=True)
class BorrowedAuthor:
    """Author held by the user cache; the message only knows the id."""

    user_id: Snowflake

    def resolve(self, users: "EntityCache[User]") -> User | None:
        return users.find(self.user_id)


@dataclass(frozen=True)
class OwnedAuthor:
    """Author copy owned by the message itself."""

    user: User

    @property
    def user_id(self) -> Snowflake:
        return self.user.id

    def resolve(self, users: "EntityCache[User]") -> User | None:
        return self.user


MessageAuthor = Union[BorrowedAuthor, OwnedAuthor]


@dataclass
class Message:
    # -------------------------------------------------------------------------
    # Identity and references
    # -------------------------------------------------------------------------

    id: Snowflake = field(default_factory=Snowflake)
    channel_id: Snowflake = field(default_factory=Snowflake)
    guild_id: Snowflake = field(default_factory=Snowflake)
    author: MessageAuthor | None = None
    member: GuildMember = field(default_factory=GuildMember)
    webhook_id: Snowflake = field(default_factory=Snowflake)

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    content: str = ""
    components: list[Component] = field(default_factory=list)
    embeds: list[Embed] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)
    reactions: list[Reaction] = field(default_factory=list)

    # Epoch seconds; edited is 0 when the message was never edited.
    sent: int = 0
    edited: int = 0

    tts: bool = False
    mention_everyone: bool = False
    pinned: bool = False
    mentions: list[Snowflake] = field(default_factory=list)
    mention_roles: list[Snowflake] = field(default_factory=list)
    mention_channels: list[Snowflake] = field(default_factory=list)

    nonce: str = ""
    flags: int = 0
    type: int = MessageType.DEFAULT
    message_reference: MessageReference = field(default_factory=MessageReference)

    # Outbound file upload; sent as multipart, never part of the JSON body.
    filename: str = ""
    filecontent: bytes = b""

    # -------------------------------------------------------------------------
    # Flag predicates
    # -------------------------------------------------------------------------

    def _has_flag(self, flag: MessageFlags) -> bool:
        return bool(self.flags & flag)

    def is_crossposted(self) -> bool:
        return self._has_flag(MessageFlags.CROSSPOSTED)

    def is_crosspost(self) -> bool:
        return self._has_flag(MessageFlags.IS_CROSSPOST)

    def suppress_embeds(self) -> bool:
        return self._has_flag(MessageFlags.SUPPRESS_EMBEDS)

    def is_source_message_deleted(self) -> bool:
        return self._has_flag(MessageFlags.SOURCE_MESSAGE_DELETED)

    def is_urgent(self) -> bool:
        return self._has_flag(MessageFlags.URGENT)

    def is_ephemeral(self) -> bool:
        return self._has_flag(MessageFlags.EPHEMERAL)

    def is_loading(self) -> bool:
        return self._has_flag(MessageFlags.LOADING)

    # -------------------------------------------------------------------------
    # Author
    # -------------------------------------------------------------------------

    @property
    def author_id(self) -> Snowflake:
        if self.author is None:
            return Snowflake(0)
        return self.author.user_id

    def owns_author(self) -> bool:
        return isinstance(self.author, OwnedAuthor)

    def resolve_author(self, users: "EntityCache[User]") -> User | None:
        """The author record, from the message itself or from the user cache."""
        if self.author is None:
            return None
        return self.author.resolve(users)

    # -------------------------------------------------------------------------
    # Builder
    # -------------------------------------------------------------------------

    def add_component(self, component: Component) -> "Message":
        """Append a top-level component; only action rows are accepted."""
        if component.type != ComponentType.ACTION_ROW:
            raise ComponentError(
                "top-level message components must be action rows; "
                "add buttons to a Component() row first"
            )
        self.components.append(component)
        return self

    def add_embed(self, embed: Embed) -> "Message":
        self.embeds.append(embed)
        return self

    def set_flags(self, flags: int) -> "Message":
        self.flags = int(flags)
        return self

    def set_type(self, message_type: MessageType | int) -> "Message":
        self.type = message_type
        return self

    def set_filename(self, filename: str) -> "Message":
        self.filename = filename
        return self

    def set_file_content(self, content: bytes | str) -> "Message":
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.filecontent = content
        return self

    def set_content(self, content: str) -> "Message":
        self.content = content
        return self

    def set_reference(
        self,
        message_id: int,
        guild_id: int = 0,
        channel_id: int = 0,
        fail_if_not_exists: bool = False,
    ) -> "Message":
        """Make this message a reply to ``message_id``."""
        self.message_reference = MessageReference(
            message_id=Snowflake(message_id),
            channel_id=Snowflake(channel_id),
            guild_id=Snowflake(guild_id),
            fail_if_not_exists=fail_if_not_exists,
        )
        return self
