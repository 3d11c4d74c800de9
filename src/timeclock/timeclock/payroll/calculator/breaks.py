from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...attendance.model import AttendanceInterval, ReportingPeriod
from ...common.time_conversion import ceil_minutes_between, milliseconds_between
from ...common.validators import complete_break
from ...core.constants import MILLISECONDS_IN_MINUTE
from .duration import ZERO, Duration, work_duration, work_duration_in_period


@dataclass(frozen=True)
class WorkTimeSummary:
    total: Duration
    actual: Duration
    break_: Duration


def break_minutes(break_start: Optional[datetime], break_end: Optional[datetime]) -> int:
    """Break length in minutes.

    Unlike worked time, a break shorter than one minute counts as nothing.
    """
    break_start, break_end = complete_break(break_start, break_end)
    if break_start is None:
        return 0
    if milliseconds_between(break_start, break_end) < MILLISECONDS_IN_MINUTE:
        return 0
    return ceil_minutes_between(break_start, break_end)


def actual_work_duration(
    clock_in: datetime,
    clock_out: Optional[datetime],
    break_start: Optional[datetime] = None,
    break_end: Optional[datetime] = None,
) -> Duration:
    if clock_out is None or abs(milliseconds_between(clock_in, clock_out)) < MILLISECONDS_IN_MINUTE:
        return ZERO
    return Duration(work_duration(clock_in, clock_out).minutes - break_minutes(break_start, break_end))


def actual_work_duration_in_period(interval: AttendanceInterval, period: ReportingPeriod) -> Duration:
    gross = work_duration_in_period(interval.clock_in, interval.clock_out, period)
    if not gross.minutes or not interval.has_break:
        return gross
    clipped_start = max(interval.break_start, period.start)
    clipped_end = min(interval.break_end, period.end_exclusive)
    return Duration(gross.minutes - break_minutes(clipped_start, clipped_end))


def daily_work_summary(interval: AttendanceInterval) -> WorkTimeSummary:
    """Total, worked and break time for one record's display row.

    ``break_`` is the same figure ``actual`` deducts, so a break shorter
    than a minute shows as ``00:00`` and ``total - break_ == actual`` holds
    whenever the break lies inside the shift.
    """
    return WorkTimeSummary(
        total=work_duration(interval.clock_in, interval.clock_out),
        actual=actual_work_duration(
            interval.clock_in, interval.clock_out, interval.break_start, interval.break_end
        ),
        break_=Duration(break_minutes(interval.break_start, interval.break_end)),
    )
