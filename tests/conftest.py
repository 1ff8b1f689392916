"""Shared fixtures for discord-state tests."""

from __future__ import annotations

import pytest

from discord_state.cache import CacheRegistry


@pytest.fixture
def caches() -> CacheRegistry:
    """A fresh, empty set of caches."""
    return CacheRegistry()


@pytest.fixture
def guild_id() -> int:
    """Sample guild ID (also @everyone role ID)."""
    return 123456789


@pytest.fixture
def guild_create_payload(guild_id: int) -> dict:
    """The ``d`` payload of a GUILD_CREATE event."""
    return {
        "id": str(guild_id),
        "name": "Test Guild",
        "owner_id": "999999999",
        "icon": "a_abc123",
        "preferred_locale": "en-GB",
        "features": ["COMMUNITY"],
        "member_count": 2,
        "large": False,
        "unavailable": False,
        "roles": [
            {
                "id": str(guild_id),  # @everyone
                "name": "@everyone",
                "permissions": "104324673",
                "position": 0,
            },
            {
                "id": "111111111",
                "name": "Moderator",
                "color": 3447003,
                "hoist": True,
                "position": 1,
                "permissions": "17179869184",
            },
        ],
        "channels": [
            {"id": "222222222", "type": 4, "name": "Text Channels", "position": 0},
            {
                "id": "222222223",
                "type": 0,
                "name": "general",
                "topic": "Say hi",
                "parent_id": "222222222",
                "position": 1,
            },
        ],
        "members": [
            {
                "user": {"id": "999999999", "username": "owner", "discriminator": "0"},
                "nick": "The Owner",
                "roles": ["111111111"],
                "joined_at": "2024-01-15T10:30:00+00:00",
                "deaf": False,
                "mute": False,
            },
            {
                "user": {"id": "333333333", "username": "member", "bot": True},
                "roles": [],
                "joined_at": "2024-02-01T00:00:00+00:00",
            },
        ],
    }


@pytest.fixture
def message_payload() -> dict:
    """A received MESSAGE_CREATE payload with most fields populated."""
    return {
        "id": "1200000000000000000",
        "channel_id": "222222223",
        "guild_id": "123456789",
        "author": {"id": "333333333", "username": "member"},
        "member": {"nick": "Mem", "roles": ["111111111"], "joined_at": None},
        "content": "Hello, world!",
        "timestamp": "2024-01-15T10:30:00.000000+00:00",
        "edited_timestamp": None,
        "tts": False,
        "mention_everyone": False,
        "mentions": [{"id": "999999999", "username": "owner"}],
        "mention_roles": ["111111111"],
        "attachments": [],
        "embeds": [],
        "pinned": False,
        "type": 0,
        "flags": 0,
    }
