# discord_state/utils/json.py
from __future__ import annotations

from typing import Any


def drop_empty(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove keys whose value is None or an empty string (shallow).
    Outbound payloads leave unset text fields out instead of sending "".
    """
    return {k: v for k, v in data.items() if v is not None and v != ""}
