"""``@every`` descriptors for interval schedules.

Host schedulers usually store schedules as text next to the task
definition. Interval schedules use the ``@every`` descriptor::

    @every 5m           every 5 minutes, normal interval logic from the first query
    @every 5m,0s        run once right away, then every 5 minutes
    @every 5m,30s       first run 30 seconds from now, then every 5 minutes
    @every 5m,@rand     first run at a random point within the next 5 minutes

Durations use :func:`~cadence.core.scheduling.durations.parse_duration`
syntax. Descriptor parsing is the only place an interval schedule can fail
to build; once parsed, the usual silent clamping and truncation apply.
"""

from __future__ import annotations

import random
from datetime import timedelta

from cadence.core.errors import DescriptorParseError, DurationParseError

from .constant_delay import (
    Clock,
    IntervalSchedule,
    every,
    every_with_initial,
    every_with_rand_initial,
)
from .durations import format_duration, parse_duration

EVERY = "@every"
RAND = "@rand"


def parse_every(
    text: str,
    *,
    clock: Clock | None = None,
    rng: random.Random | None = None,
) -> IntervalSchedule:
    """Build an :class:`IntervalSchedule` from an ``@every`` descriptor.

    ``clock`` and ``rng`` are passed through to the constructor the
    descriptor selects.

    Raises:
        DescriptorParseError: not an ``@every`` descriptor, or a duration in
            it does not parse
    """
    stripped = text.strip()
    rest = stripped[len(EVERY):]
    if not stripped.startswith(EVERY) or not rest[:1].isspace():
        raise DescriptorParseError(f"expected '{EVERY} <duration>', got {text!r}", value=text)

    parts = [part.strip() for part in rest.split(",")]
    if len(parts) > 2 or not all(parts):
        raise DescriptorParseError(
            f"expected '{EVERY} <duration>[,<initial>|,{RAND}]', got {text!r}",
            value=text,
        )

    interval = _duration(parts[0], text)
    if len(parts) == 1:
        return every(interval)
    if parts[1] == RAND:
        return every_with_rand_initial(interval, clock=clock, rng=rng)
    return every_with_initial(interval, _duration(parts[1], text), clock=clock)


def _duration(part: str, text: str) -> timedelta:
    try:
        return parse_duration(part)
    except DurationParseError as exc:
        raise DescriptorParseError(
            f"invalid duration {part!r} in {text!r}", value=text, cause=exc
        ) from exc


def describe(schedule: IntervalSchedule) -> str:
    """Render the interval of ``schedule`` as an ``@every`` descriptor.

    Forced start times are absolute instants and are not part of the output.
    """
    return f"{EVERY} {format_duration(schedule.interval)}"


__all__ = ["EVERY", "RAND", "parse_every", "describe"]
