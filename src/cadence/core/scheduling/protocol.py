"""Schedule protocol consumed by host schedulers.

A host scheduler (a ticker thread, an APScheduler job, a cron-like loop)
only needs one thing from a schedule: given the current time, when should
the task run next? Anything with a ``next(now)`` method returning a
``datetime`` can be plugged in.

Tags:
    cadence-core, scheduling, protocol, duck-typing

Doc-Types:
    api-reference
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Schedule(Protocol):
    """Protocol for schedules that compute their next activation time.

    Implementations:
        - IntervalSchedule (constant delay, optional forced first run)

    ``next`` must be a pure function of ``now``: the same input yields the
    same output, and implementations keep no "last fired" state.
    """

    def next(self, now: datetime) -> datetime:
        """Return the next activation time after ``now``."""
        ...


__all__ = ["Schedule"]
