"""Tests for discord_state.utils.snowflake module."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from discord_state.utils.snowflake import (
    DISCORD_EPOCH,
    SNOWFLAKE_MAX,
    Snowflake,
    snowflake_to_datetime,
)


def test_snowflake_to_datetime_known_value() -> None:
    """Should convert a known snowflake to the expected datetime."""
    ms = DISCORD_EPOCH + 1_234_567
    snowflake = (ms - DISCORD_EPOCH) << 22

    result = snowflake_to_datetime(snowflake)

    assert result == datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def test_from_datetime_round_trip_ms_precision() -> None:
    """Round-trip should preserve time at millisecond precision."""
    dt = datetime(2024, 1, 15, 10, 30, 0, 123000, tzinfo=timezone.utc)

    snowflake = Snowflake.from_datetime(dt)

    assert snowflake.created_at == dt
    assert isinstance(snowflake, Snowflake)


def test_from_datetime_rejects_naive_datetime() -> None:
    """Should reject naive datetimes."""
    dt = datetime(2024, 1, 15, 10, 30, 0, 123000)

    with pytest.raises(ValueError, match="timezone-aware"):
        Snowflake.from_datetime(dt)


class TestSnowflake:
    """Tests for the Snowflake type."""

    def test_behaves_as_int(self) -> None:
        assert Snowflake("123") == 123
        assert Snowflake(123) + 1 == 124
        assert hash(Snowflake(123)) == hash(123)

    def test_defaults_to_zero(self) -> None:
        assert Snowflake() == 0
        assert not Snowflake().is_valid()

    def test_nonzero_is_valid(self) -> None:
        assert Snowflake(1).is_valid()

    def test_accepts_full_64_bit_range(self) -> None:
        assert Snowflake(SNOWFLAKE_MAX) == 2**64 - 1

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Snowflake(-1)

    def test_rejects_over_64_bits(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Snowflake(2**64)

    def test_repr(self) -> None:
        assert repr(Snowflake(42)) == "Snowflake(42)"
