# discord_state/utils/time.py
"""Timestamp conversion between Discord's ISO8601 strings and epoch seconds.

Entities keep timestamps as whole epoch seconds with 0 meaning "not set",
which keeps them hashable, comparable and cheap to copy.
"""

from __future__ import annotations

from datetime import datetime, timezone


def parse_iso8601(value: str | None) -> datetime | None:
    """Parse a Discord timestamp into an aware UTC datetime.

    Discord sends UTC with either a ``Z`` or a ``+00:00`` suffix; any other
    offset is converted, and a naive value is assumed to already be UTC.
    """
    if not value:
        return None

    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def iso8601_to_epoch(value: str | None) -> int:
    """Parse a Discord timestamp into whole epoch seconds, 0 when absent."""
    parsed = parse_iso8601(value)
    return int(parsed.timestamp()) if parsed is not None else 0


def epoch_to_iso8601(seconds: int) -> str | None:
    """Format epoch seconds the way Discord sends them; 0 means unset.

    Entities only keep whole seconds, so a parsed ``.123000`` fraction is
    gone by the time it is formatted again; compare instants, not strings.
    """
    if not seconds:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc).isoformat()
