# discord_state/utils/ids.py
from __future__ import annotations

from typing import Any

from discord_state.utils.snowflake import Snowflake


def parse_snowflake(value: str | int | None) -> Snowflake:
    if value is None or value == "":
        return Snowflake(0)
    return Snowflake(value)


def parse_snowflake_list(values: list[Any] | None) -> list[Snowflake]:
    """Parse a list of ids, or of objects carrying an ``id`` key."""
    result: list[Snowflake] = []
    for value in values or []:
        if isinstance(value, dict):
            value = value.get("id")
        result.append(parse_snowflake(value))
    return result


def parse_optional_int(value: Any) -> int | None:
    if value is None:
        return None
    return int(value)


def snowflake_to_json(value: int) -> str | None:
    """Snowflakes go out as strings; zero means "not set"."""
    if not value:
        return None
    return str(int(value))
