"""Preview upcoming activations of a schedule.

Simulates the host scheduler loop: ask for the next activation, pretend
the task ran exactly then, and ask again with that time as ``now``. Useful
for showing an operator when a task will fire and for checking that an
interval schedule ticks without drift.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from itertools import islice

from cadence.core.errors import ScheduleError

from .protocol import Schedule


def iter_activations(schedule: Schedule, now: datetime) -> Iterator[datetime]:
    """Yield activation times forever, feeding each one back in as ``now``."""
    current = now
    while True:
        current = schedule.next(current)
        yield current


def upcoming(schedule: Schedule, now: datetime, count: int) -> list[datetime]:
    """Return the next ``count`` activation times after ``now``.

    Raises:
        ScheduleError: ``count`` is negative
    """
    if count < 0:
        raise ScheduleError(f"count must be >= 0, got {count}")
    return list(islice(iter_activations(schedule, now), count))


__all__ = ["iter_activations", "upcoming"]
