# discord_state/utils/snowflake.py
from __future__ import annotations

from datetime import datetime, timezone

DISCORD_EPOCH = 1420070400000  # 2015-01-01 UTC (ms)

SNOWFLAKE_MAX = (1 << 64) - 1

# The low 22 bits hold worker, process and increment.
TIMESTAMP_SHIFT = 22


class Snowflake(int):
    """Discord's 64-bit unsigned identifier.

    Zero is never issued by Discord and is used throughout as the
    "missing id" value.
    """

    __slots__ = ()

    def __new__(cls, value: int | str = 0) -> "Snowflake":
        number = int(value)
        if number < 0 or number > SNOWFLAKE_MAX:
            raise ValueError(f"snowflake out of range: {number}")
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f"Snowflake({int(self)})"

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Snowflake":
        """Smallest snowflake Discord could have issued at ``moment``."""
        if moment.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        elapsed_ms = int(moment.timestamp() * 1000) - DISCORD_EPOCH
        return cls(elapsed_ms << TIMESTAMP_SHIFT)

    @property
    def created_at(self) -> datetime:
        return snowflake_to_datetime(self)

    def is_valid(self) -> bool:
        return self != 0


def snowflake_to_datetime(snowflake: int) -> datetime:
    unix_ms = (snowflake >> TIMESTAMP_SHIFT) + DISCORD_EPOCH
    return datetime.fromtimestamp(unix_ms / 1000, tz=timezone.utc)
