"""Tests for discord_state.utils.json."""

from __future__ import annotations

from discord_state.utils.json import drop_empty


class TestDropEmpty:
    """Tests for drop_empty function."""

    def test_removes_none_and_empty_strings(self) -> None:
        data = {"a": "x", "b": "", "c": None, "d": 0, "e": False}

        result = drop_empty(data)

        assert result == {"a": "x", "d": 0, "e": False}

    def test_shallow_only(self) -> None:
        result = drop_empty({"footer": {"text": ""}, "title": ""})

        assert result == {"footer": {"text": ""}}
