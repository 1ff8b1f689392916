"""Discord Role entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from discord_state.utils.snowflake import Snowflake


@dataclass
class Role:
    id: Snowflake = field(default_factory=Snowflake)
    # Not part of the role payload; filled from the enclosing guild.
    guild_id: Snowflake = field(default_factory=Snowflake)
    name: str = ""
    color: int = 0
    hoist: bool = False
    position: int = 0
    # Sent as a decimal string; may exceed 32 bits.
    permissions: int = 0
    managed: bool = False
    mentionable: bool = False

    @property
    def is_everyone(self) -> bool:
        """The @everyone role shares its id with the guild."""
        return self.id == self.guild_id and self.id != 0
