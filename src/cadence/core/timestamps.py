"""
UTC timestamp utilities (stdlib-only).

Shared time primitives for the scheduling core. Every schedule anchors its
activation times to whole seconds in UTC, so the helpers here are the one
place that decides how "now" is read and how sub-second components are
discarded.

Manifesto:
    Schedules are compared against caller-supplied times and against the
    clock read at construction. Without a shared module each caller
    reinvents timezone handling and truncation with subtle differences.
    This module provides:

    - **utc_now():** Timezone-aware UTC datetime (the default clock)
    - **EPOCH:** The "far past" sentinel meaning "no forced first run"
    - **ensure_utc():** Naive datetimes are interpreted as UTC
    - **truncate_to_second():** Strip the sub-second component
    - **to_iso8601() / from_iso8601():** Safe serialization round-trip

Tags:
    timestamps, utc, datetime, truncation, cadence-core, stdlib-only

Doc-Types:
    - API Reference
    - Utility Documentation

STDLIB ONLY - NO PYDANTIC.
"""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_SECOND = timedelta(seconds=1)


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware datetimes are returned unchanged."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def truncate_to_second(dt: datetime) -> datetime:
    """Drop the microsecond component (12:00:03.420 -> 12:00:03)."""
    return dt.replace(microsecond=0)


def subsecond(dt: datetime) -> timedelta:
    """Return the sub-second component of ``dt`` as a timedelta."""
    return timedelta(microseconds=dt.microsecond)


def to_iso8601(dt: datetime | None) -> str | None:
    """Convert datetime to ISO 8601 string."""
    if dt is None:
        return None
    return dt.isoformat()


def from_iso8601(s: str | None) -> datetime | None:
    """Parse ISO 8601 string to datetime."""
    if s is None:
        return None
    return datetime.fromisoformat(s)
