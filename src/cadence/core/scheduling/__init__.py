"""Interval scheduling for cadence.

Manifesto:
    A job scheduler asks the same question of every task on every tick:
    when should this run next? For fixed-interval tasks the answer is a
    pure function of the current time and two numbers, so the policy lives
    here as an immutable value the host scheduler can share freely between
    threads. Timing loops, persistence, locking, and execution stay with
    the host.

Quick Start::

    from cadence.core.scheduling import every, every_with_rand_initial, parse_every
    from cadence.core.timestamps import utc_now

    heartbeat = every("30s")
    report = every_with_rand_initial("1h")     # spread hourly jobs across the hour
    backfill = parse_every("@every 10m,0s")    # run now, then every 10 minutes

    next_run = heartbeat.next(utc_now())

Modules:
    constant_delay  IntervalSchedule and its three constructors
    durations       "1h30m"-style duration parsing and formatting
    descriptors     "@every" descriptor parsing
    protocol        Schedule protocol consumed by host schedulers
    preview         upcoming activations for a schedule

Guardrails:
    ❌ Tracking "last fired" state on the schedule
    ✅ The host passes ``now`` on every call to ``next``
    ❌ Rejecting sub-second intervals
    ✅ Clamp to one second and truncate fractions, silently

Tags:
    cadence-core, scheduling, interval, every, descriptors

Doc-Types:
    package-overview, module-index
"""

from __future__ import annotations

from .constant_delay import (
    Clock,
    IntervalSchedule,
    default_random_source,
    every,
    every_with_initial,
    every_with_rand_initial,
    next_activation,
    normalize_interval,
    reset_random_sources,
)
from .descriptors import describe, parse_every
from .durations import coerce_duration, format_duration, parse_duration
from .preview import iter_activations, upcoming
from .protocol import Schedule

__all__ = [
    # Protocol
    "Schedule",
    # Interval schedules
    "Clock",
    "IntervalSchedule",
    "every",
    "every_with_initial",
    "every_with_rand_initial",
    "next_activation",
    "normalize_interval",
    "default_random_source",
    "reset_random_sources",
    # Descriptors
    "parse_every",
    "describe",
    # Durations
    "parse_duration",
    "format_duration",
    "coerce_duration",
    # Preview
    "iter_activations",
    "upcoming",
]
