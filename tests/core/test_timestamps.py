"""Tests for cadence.core.timestamps: UTC helpers and truncation."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from cadence.core.timestamps import (
    EPOCH,
    ensure_utc,
    from_iso8601,
    subsecond,
    to_iso8601,
    truncate_to_second,
    utc_now,
)


class TestUtcNow:
    """Tests for utc_now()."""

    def test_has_utc_timezone(self):
        assert utc_now().tzinfo is UTC

    def test_is_recent(self):
        before = datetime.now(UTC)
        result = utc_now()
        after = datetime.now(UTC)
        assert before <= result <= after


class TestEpoch:
    def test_is_unix_epoch(self):
        assert EPOCH.timestamp() == 0
        assert EPOCH.tzinfo is UTC


class TestEnsureUtc:
    """Tests for ensure_utc()."""

    def test_naive_gets_utc(self):
        result = ensure_utc(datetime(2025, 1, 1, 12, 0))
        assert result == datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def test_aware_unchanged(self):
        tz = timezone(timedelta(hours=-5))
        dt = datetime(2025, 1, 1, 12, 0, tzinfo=tz)
        assert ensure_utc(dt) is dt


class TestTruncation:
    """Tests for truncate_to_second() and subsecond()."""

    def test_truncate_drops_microseconds(self):
        dt = datetime(2025, 1, 1, 12, 0, 3, 420000, tzinfo=UTC)
        assert truncate_to_second(dt) == datetime(2025, 1, 1, 12, 0, 3, tzinfo=UTC)

    def test_truncate_never_rounds_up(self):
        dt = datetime(2025, 1, 1, 12, 0, 3, 999999, tzinfo=UTC)
        assert truncate_to_second(dt).second == 3

    def test_subsecond(self):
        dt = datetime(2025, 1, 1, 12, 0, 3, 420000, tzinfo=UTC)
        assert subsecond(dt) == timedelta(milliseconds=420)
        assert dt - subsecond(dt) == truncate_to_second(dt)


class TestIso8601:
    """Tests for to_iso8601() / from_iso8601()."""

    def test_none_passthrough(self):
        assert to_iso8601(None) is None
        assert from_iso8601(None) is None

    def test_roundtrip(self):
        dt = datetime(2025, 6, 15, 14, 30, 0, tzinfo=UTC)
        assert from_iso8601(to_iso8601(dt)) == dt
