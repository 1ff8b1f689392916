"""Discord User entity.

Users are global: the same record is shared by every guild the user is a
member of and every message they author. The user cache is the sole owner.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from discord_state.utils.snowflake import Snowflake


@dataclass
class User:
    id: Snowflake = field(default_factory=Snowflake)
    username: str = ""
    # "0" for accounts migrated to the unique-username system
    discriminator: str = ""
    global_name: str | None = None
    avatar: str | None = None
    bot: bool = False
    system: bool = False
    public_flags: int = 0

    @property
    def display_name(self) -> str:
        return self.global_name or self.username
