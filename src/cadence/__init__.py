"""
Cadence - fixed-interval scheduling policy for job schedulers.

Computes the next activation time of a task that runs "every N seconds",
optionally with an immediate, explicit, or randomized first run.

    >>> from cadence import every
    >>> schedule = every("90s")
    >>> schedule.interval
    datetime.timedelta(seconds=90)
"""

from cadence.core.scheduling import (
    IntervalSchedule,
    Schedule,
    describe,
    every,
    every_with_initial,
    every_with_rand_initial,
    next_activation,
    parse_every,
    upcoming,
)

__version__ = "0.1.0"

__all__ = [
    "IntervalSchedule",
    "Schedule",
    "describe",
    "every",
    "every_with_initial",
    "every_with_rand_initial",
    "next_activation",
    "parse_every",
    "upcoming",
    "__version__",
]
