"""Constant-delay interval schedules ("every N seconds").

Manifesto:
    A recurring task that fires every N seconds needs exactly two numbers:
    the interval, and (optionally) the moment of its very first run. An
    :class:`IntervalSchedule` holds those two values and answers one
    question: given the current time, when is the next activation? It does
    not remember when it last fired. The host scheduler feeds its own clock
    into :meth:`IntervalSchedule.next` at every decision point.

┌──────────────────────────────────────────────────────────────────────────────┐
│  INTERVAL SCHEDULE                                                           │
│                                                                              │
│  Constructors:                                                               │
│    every(d)                    start_time = EPOCH (no forced first run)      │
│    every_with_initial(d, o)    start_time = trunc(now) + o                   │
│    every_with_rand_initial(d)  start_time = trunc(now) + interval - r,       │
│                                r drawn from [0, interval_seconds)            │
│                                                                              │
│  Interval normalization:                                                     │
│    d < 1s  → 1s                                                              │
│    d ≥ 1s  → d truncated to whole seconds (5.7s → 5s)                        │
│                                                                              │
│  next(now):                                                                  │
│    start_time more than 0 whole seconds ahead of now → start_time            │
│    otherwise                                  → trunc(now) + interval        │
└──────────────────────────────────────────────────────────────────────────────┘

Examples:
    >>> from datetime import UTC, datetime, timedelta
    >>> schedule = every(timedelta(seconds=5))
    >>> schedule.next(datetime(2025, 1, 1, 12, 0, 3, 420000, tzinfo=UTC))
    datetime.datetime(2025, 1, 1, 12, 0, 8, tzinfo=datetime.timezone.utc)

Guardrails:
    ❌ Mutating a schedule after construction
    ✅ Build a new schedule (``dataclasses.replace``) when the policy changes
    ❌ Reading the clock inside ``next``
    ✅ Pass ``now`` explicitly; only constructors read the clock

Tags:
    cadence-core, scheduling, interval, every, jitter, load-spreading

Doc-Types:
    api-reference, scheduling-policy
"""

from __future__ import annotations

import random
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from cadence.core.errors import InvalidConfigError
from cadence.core.logging import get_logger
from cadence.core.settings import get_settings
from cadence.core.timestamps import (
    EPOCH,
    ONE_SECOND,
    ensure_utc,
    subsecond,
    to_iso8601,
    truncate_to_second,
    utc_now,
)

from .durations import DurationLike, coerce_duration

logger = get_logger(__name__)

Clock = Callable[[], datetime]

# Process-wide generators for configured seeds (see CadenceSettings.rand_seed)
_seeded_sources: dict[int, random.Random] = {}
_seeded_lock = threading.Lock()


def normalize_interval(duration: DurationLike) -> timedelta:
    """Clamp to at least one second and drop any sub-second remainder."""
    d = coerce_duration(duration)
    if d < ONE_SECOND:
        return ONE_SECOND
    return d - d % ONE_SECOND


@dataclass(frozen=True, slots=True)
class IntervalSchedule:
    """A fixed-interval schedule with an optional forced first run.

    ``interval`` is always a whole number of seconds, at least one.
    ``start_time`` is either :data:`~cadence.core.timestamps.EPOCH` (no
    forced first run) or the moment the first activation must happen.

    Instances are immutable and safe to share between threads.
    """

    interval: timedelta
    start_time: datetime = EPOCH

    def __post_init__(self) -> None:
        object.__setattr__(self, "interval", normalize_interval(self.interval))
        object.__setattr__(self, "start_time", ensure_utc(self.start_time))

    def is_pending(self, now: datetime) -> bool:
        """True while the forced first run is still at least a whole second away."""
        return (self.start_time - ensure_utc(now)) // ONE_SECOND > 0

    def next(self, now: datetime) -> datetime:
        """Return the next activation time after ``now``.

        Naive ``now`` values are interpreted as UTC. The result is always on
        a whole-second boundary.
        """
        now = ensure_utc(now)
        if self.is_pending(now):
            return self.start_time
        return truncate_to_second(now) + self.interval


def next_activation(schedule: IntervalSchedule, now: datetime) -> datetime:
    """Functional form of :meth:`IntervalSchedule.next`."""
    return schedule.next(now)


def every(duration: DurationLike) -> IntervalSchedule:
    """Return a schedule that activates once every ``duration``.

    Durations under one second are rounded up to one second. Any fraction
    of a second is truncated.
    """
    requested = coerce_duration(duration)
    schedule = IntervalSchedule(interval=requested, start_time=EPOCH)
    if schedule.interval != requested:
        logger.debug(
            "interval_normalized",
            requested_seconds=requested.total_seconds(),
            interval_seconds=int(schedule.interval.total_seconds()),
        )
    return schedule


def every_with_initial(
    duration: DurationLike,
    initial: DurationLike,
    *,
    clock: Clock | None = None,
) -> IntervalSchedule:
    """Return a schedule that activates every ``duration``, first at ``initial`` from now.

    ``initial=0`` runs the job right away (at the start of the current
    second) before settling into the regular interval.
    """
    t = ensure_utc((clock or utc_now)())
    schedule = every(duration)
    start_time = t + (coerce_duration(initial) - subsecond(t))
    logger.debug(
        "start_time_forced",
        start_time=to_iso8601(start_time),
        interval_seconds=int(schedule.interval.total_seconds()),
    )
    return replace(schedule, start_time=start_time)


def every_with_rand_initial(
    duration: DurationLike,
    *,
    clock: Clock | None = None,
    rng: random.Random | None = None,
) -> IntervalSchedule:
    """Return a schedule that activates every ``duration``, first at a random point
    within the next interval.

    Spreads many jobs with the same interval across the window instead of
    firing them in lockstep. The offset is a whole number of seconds.
    """
    source = rng or default_random_source()
    t = ensure_utc((clock or utc_now)())
    schedule = every(duration)
    offset = source.randrange(schedule.interval // ONE_SECOND)
    start_time = t + schedule.interval - subsecond(t) - timedelta(seconds=offset)
    logger.debug(
        "start_time_randomized",
        start_time=to_iso8601(start_time),
        offset_seconds=offset,
        interval_seconds=int(schedule.interval.total_seconds()),
    )
    return replace(schedule, start_time=start_time)


def default_random_source() -> random.Random:
    """Generator used by :func:`every_with_rand_initial` when no ``rng`` is passed.

    With ``CADENCE_RAND_SEED`` set, one generator per seed is shared by the
    process so runs are reproducible while schedules still get distinct
    offsets. Otherwise a fresh generator is seeded from the clock. Settings
    that fail to load are logged and treated as "no seed" so construction
    itself never raises.
    """
    try:
        seed = get_settings().rand_seed
    except InvalidConfigError as exc:
        logger.warning("rand_seed_unavailable", setting=exc.key, error=exc.message)
        seed = None
    if seed is None:
        return random.Random(time.time_ns())
    with _seeded_lock:
        if seed not in _seeded_sources:
            _seeded_sources[seed] = random.Random(seed)
        return _seeded_sources[seed]


def reset_random_sources() -> None:
    """Forget seeded generators so the next draw restarts each sequence."""
    with _seeded_lock:
        _seeded_sources.clear()


__all__ = [
    "Clock",
    "IntervalSchedule",
    "every",
    "every_with_initial",
    "every_with_rand_initial",
    "next_activation",
    "normalize_interval",
    "default_random_source",
    "reset_random_sources",
]
