from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import (
    first_day_of_month,
    last_day_of_month,
    next_midnight,
    parse_instant,
    parse_optional_instant,
    start_of_day,
)
from ..core.enums import WorkStatus


@dataclass(frozen=True)
class AttendanceInterval:
    """One worked interval, optionally with a single break."""

    clock_in: datetime
    clock_out: Optional[datetime] = None
    break_start: Optional[datetime] = None
    break_end: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    @property
    def has_break(self) -> bool:
        return self.break_start is not None and self.break_end is not None


@dataclass(frozen=True)
class AttendanceRecord:
    """Stored attendance row as supplied by the data store."""

    record_id: str
    staff_id: str
    clock_in: datetime
    clock_out: Optional[datetime] = None
    break_start: Optional[datetime] = None
    break_end: Optional[datetime] = None

    @property
    def interval(self) -> AttendanceInterval:
        return AttendanceInterval(
            clock_in=self.clock_in,
            clock_out=self.clock_out,
            break_start=self.break_start,
            break_end=self.break_end,
        )

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    @property
    def is_cross_day(self) -> bool:
        return self.clock_out is not None and self.clock_out.date() != self.clock_in.date()


@dataclass(frozen=True)
class ReportingPeriod:
    """Half-open window ``[start, end_exclusive)``.

    ``end`` is the last day of the period; the window closes at 24:00 of
    that day.
    """

    start: datetime
    end: date

    @property
    def end_exclusive(self) -> datetime:
        return next_midnight(self.end)

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end_exclusive

    @classmethod
    def for_month(cls, year: int, month: int) -> "ReportingPeriod":
        return cls(
            start=start_of_day(first_day_of_month(year, month)),
            end=last_day_of_month(year, month),
        )


@dataclass(frozen=True)
class AttendanceStatusSummary:
    """Where a staff member currently stands, for the clock screen."""

    is_working: bool
    status: Optional[WorkStatus]
    last_clock_in: Optional[datetime]
    last_clock_out: Optional[datetime]
    is_on_break: bool
    break_start: Optional[datetime]
    is_break_completed: bool


def _pick(row: Mapping[str, Any], snake: str, camel: str) -> Any:
    if snake in row:
        return row[snake]
    return row.get(camel)


def interval_from_mapping(row: Mapping[str, Any], *, tz: Optional[str] = None) -> AttendanceInterval:
    """Build an interval from a store row (``clock_in`` or ``clockIn`` keys)."""
    return AttendanceInterval(
        clock_in=parse_instant(_pick(row, "clock_in", "clockIn"), tz=tz),
        clock_out=parse_optional_instant(_pick(row, "clock_out", "clockOut"), tz=tz),
        break_start=parse_optional_instant(_pick(row, "break_start", "breakStart"), tz=tz),
        break_end=parse_optional_instant(_pick(row, "break_end", "breakEnd"), tz=tz),
    )


def record_from_mapping(row: Mapping[str, Any], *, tz: Optional[str] = None) -> AttendanceRecord:
    interval = interval_from_mapping(row, tz=tz)
    return AttendanceRecord(
        record_id=str(row.get("id", "")),
        staff_id=str(_pick(row, "staff_id", "staffId") or ""),
        clock_in=interval.clock_in,
        clock_out=interval.clock_out,
        break_start=interval.break_start,
        break_end=interval.break_end,
    )
