"""Worked-time durations.

All instants are naive local wall time; convert offset-aware values with
``parse_instant`` before calling in.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...attendance.model import ReportingPeriod
from ...common.time_conversion import ceil_minutes_between, floor_minutes_between, format_minutes


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative whole minutes, rendered as ``HH:mm``."""

    minutes: int = 0

    def __post_init__(self) -> None:
        if self.minutes < 0:
            object.__setattr__(self, "minutes", 0)

    @property
    def formatted(self) -> str:
        return format_minutes(self.minutes)

    def __add__(self, other: "Duration") -> "Duration":
        return Duration(self.minutes + other.minutes)

    def __str__(self) -> str:
        return self.formatted


ZERO = Duration(0)


def work_duration(clock_in: datetime, clock_out: Optional[datetime]) -> Duration:
    """Elapsed time between clock in and out; any partial minute counts."""
    if clock_out is None:
        return ZERO
    minutes = ceil_minutes_between(clock_in, clock_out)
    if minutes < 0:
        return ZERO
    return Duration(minutes)


def work_duration_in_period(
    clock_in: datetime,
    clock_out: Optional[datetime],
    period: ReportingPeriod,
) -> Duration:
    """The part of ``[clock_in, clock_out)`` that falls inside ``period``.

    Partial minutes at the boundary are dropped, so an interval split over
    two adjacent periods sums back to its whole length.
    """
    if clock_out is None:
        return ZERO
    effective_start = max(clock_in, period.start)
    effective_end = min(clock_out, period.end_exclusive)
    if effective_start >= effective_end:
        return ZERO
    return Duration(floor_minutes_between(effective_start, effective_end))
