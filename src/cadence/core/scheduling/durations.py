"""Duration parsing and formatting for interval schedules.

Durations are written the way ``@every`` descriptors write them: a signed
sequence of decimal numbers, each with a unit suffix, such as ``"300ms"``,
``"1.5h"`` or ``"2h45m"``. Valid units are ``ns``, ``us`` (or ``µs``),
``ms``, ``s``, ``m`` and ``h``. The bare string ``"0"`` is also accepted.

Python's ``timedelta`` has microsecond resolution, so nanosecond amounts
are truncated toward zero when parsed. Schedules only keep whole seconds
anyway.

Tags:
    cadence-core, scheduling, durations, parsing
"""

from __future__ import annotations

import re
from datetime import timedelta
from fractions import Fraction

from cadence.core.errors import DurationParseError

# Microseconds per unit. Nanoseconds are a fraction of the timedelta resolution.
_UNITS: dict[str, Fraction] = {
    "ns": Fraction(1, 1000),
    "us": Fraction(1),
    "µs": Fraction(1),  # MICRO SIGN
    "μs": Fraction(1),  # GREEK SMALL LETTER MU
    "ms": Fraction(1000),
    "s": Fraction(1_000_000),
    "m": Fraction(60_000_000),
    "h": Fraction(3_600_000_000),
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)([^\d.]+)")

DurationLike = timedelta | int | float | str


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as ``"1h30m"`` into a timedelta.

    Raises:
        DurationParseError: ``text`` is empty, has a number without a unit,
            uses an unknown unit, or is too large for a timedelta
    """
    original = text
    s = text.strip()
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return timedelta(0)
    if not s:
        raise DurationParseError(f"invalid duration {original!r}", value=original)

    total = Fraction(0)
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        if match is None:
            raise DurationParseError(f"invalid duration {original!r}", value=original)
        number, unit = match.groups()
        if unit not in _UNITS:
            raise DurationParseError(
                f"unknown unit {unit!r} in duration {original!r}",
                value=original,
            )
        total += Fraction(number) * _UNITS[unit]
        pos = match.end()

    microseconds = int(total)  # truncates toward zero
    try:
        return timedelta(microseconds=-microseconds if negative else microseconds)
    except OverflowError as exc:
        raise DurationParseError(
            f"invalid duration {original!r}", value=original, cause=exc
        ) from exc


def format_duration(td: timedelta) -> str:
    """Render a timedelta as a duration string (``"1h30m0s"``, ``"5s"``, ``"250ms"``)."""
    total_us = td // timedelta(microseconds=1)
    if total_us == 0:
        return "0s"
    if total_us < 0:
        return "-" + format_duration(-td)

    if total_us < 1000:
        return f"{total_us}µs"
    if total_us < 1_000_000:
        return f"{_decimal(total_us, 1000)}ms"

    hours, rest = divmod(total_us, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    seconds = f"{_decimal(rest, 1_000_000)}s"
    if hours:
        return f"{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{minutes}m{seconds}"
    return seconds


def _decimal(value: int, scale: int) -> str:
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    width = len(str(scale)) - 1
    return f"{whole}.{frac:0{width}d}".rstrip("0")


def coerce_duration(value: DurationLike) -> timedelta:
    """Accept a timedelta, a number of seconds, or a duration string."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise TypeError("duration must be a timedelta, number of seconds, or string, not bool")
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    if isinstance(value, str):
        return parse_duration(value)
    raise TypeError(
        f"duration must be a timedelta, number of seconds, or string, not {type(value).__name__}"
    )


__all__ = ["DurationLike", "parse_duration", "format_duration", "coerce_duration"]
