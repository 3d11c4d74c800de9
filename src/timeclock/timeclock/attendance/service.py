from __future__ import annotations

import logging
from datetime import datetime
from functools import partial
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local, parse_instant
from ..common.validators import require_non_empty
from ..core.constants import AttendanceErrors
from ..core.enums import WorkStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, AttendanceStatusSummary
from .repository import AttendanceRepository
from .validation import validate_records, validate_records_strict

logger = logging.getLogger(__name__)


class AttendanceService:
    """Clock actions and consistency checks for one staff member at a time."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        tz: Optional[str] = None,
    ):
        self._attendance = attendance
        self._tz = tz
        self._clock = clock or partial(now_local, tz)

    @property
    def timezone(self) -> Optional[str]:
        return self._tz

    def clock_in(self, staff_id: str, *, now: datetime | None = None) -> str:
        staff_id = require_non_empty(staff_id, "staff_id")
        now = self._now(now)

        latest = self._attendance.get_latest_for_staff(staff_id)
        if latest and latest.clock_out is None:
            raise ValidationError(AttendanceErrors.ALREADY_WORKING)
        if latest and latest.clock_in.date() == now.date():
            raise ValidationError(AttendanceErrors.ALREADY_COMPLETED)

        record_id = self._attendance.create_clock_in(staff_id=staff_id, clock_in=now)
        logger.info("Clock in", extra={"staff_id": staff_id, "record_id": record_id})
        return record_id

    def clock_out(self, staff_id: str, *, now: datetime | None = None) -> None:
        staff_id = require_non_empty(staff_id, "staff_id")
        now = self._now(now)

        latest = self._attendance.get_latest_for_staff(staff_id)
        if not latest or latest.clock_out is not None:
            raise ValidationError(AttendanceErrors.NOT_WORKING)
        if latest.clock_in > now:
            raise ValidationError(AttendanceErrors.INVALID_CLOCK_OUT)

        self._attendance.set_clock_out(record_id=latest.record_id, clock_out=now)
        logger.info("Clock out", extra={"staff_id": staff_id, "record_id": latest.record_id})

    def start_break(self, staff_id: str, *, now: datetime | None = None) -> None:
        staff_id = require_non_empty(staff_id, "staff_id")
        now = self._now(now)

        record = self._require_open(staff_id)
        if record.break_start and record.break_end:
            raise ValidationError(AttendanceErrors.BREAK_ALREADY_TAKEN)
        if record.break_start:
            raise ValidationError(AttendanceErrors.BREAK_IN_PROGRESS)
        if now < record.clock_in:
            raise ValidationError(AttendanceErrors.BREAK_BEFORE_CLOCK_IN)

        self._attendance.set_break_start(record_id=record.record_id, break_start=now)
        logger.info("Break start", extra={"staff_id": staff_id, "record_id": record.record_id})

    def end_break(self, staff_id: str, *, now: datetime | None = None) -> None:
        staff_id = require_non_empty(staff_id, "staff_id")
        now = self._now(now)

        record = self._require_open(staff_id)
        if not record.break_start or record.break_end:
            raise ValidationError(AttendanceErrors.NO_BREAK_RECORD)
        if now < record.break_start:
            raise ValidationError(AttendanceErrors.INVALID_BREAK_END)

        self._attendance.set_break_end(record_id=record.record_id, break_end=now)
        logger.info("Break end", extra={"staff_id": staff_id, "record_id": record.record_id})

    def get_status(self, records: Sequence[AttendanceRecord]) -> AttendanceStatusSummary:
        """Summarize the latest open and closed records (oldest-first input)."""
        last_open = next((r for r in reversed(records) if r.clock_out is None), None)
        last_closed = next((r for r in reversed(records) if r.clock_out is not None), None)

        if last_open:
            return AttendanceStatusSummary(
                is_working=True,
                status=WorkStatus.WORKING,
                last_clock_in=last_open.clock_in,
                last_clock_out=None,
                is_on_break=bool(last_open.break_start and not last_open.break_end),
                break_start=last_open.break_start,
                is_break_completed=bool(last_open.break_start and last_open.break_end),
            )
        return AttendanceStatusSummary(
            is_working=False,
            status=WorkStatus.COMPLETED if last_closed else None,
            last_clock_in=last_closed.clock_in if last_closed else None,
            last_clock_out=last_closed.clock_out if last_closed else None,
            is_on_break=False,
            break_start=None,
            is_break_completed=False,
        )

    def check_consistency(self, records: Sequence[AttendanceRecord], *, strict: bool = False) -> bool:
        intervals = [r.interval for r in records]
        ok = validate_records_strict(intervals) if strict else validate_records(intervals)
        if not ok:
            staff_ids = sorted({r.staff_id for r in records})
            logger.warning("Inconsistent attendance records", extra={"staff_ids": staff_ids, "strict": strict})
        return ok

    def repair_open_records(self, staff_id: str, *, since: datetime) -> list[str]:
        """Delete every open record touching ``since`` onward except the latest.

        Only runs when called explicitly; calculations never repair data.
        """
        staff_id = require_non_empty(staff_id, "staff_id")
        records = self._attendance.list_touching_since(staff_id, since)
        open_records = sorted((r for r in records if r.clock_out is None), key=lambda r: r.clock_in)
        if len(open_records) <= 1:
            return []

        doomed = [r.record_id for r in open_records[:-1]]
        deleted = self._attendance.delete_records(doomed)
        logger.warning(
            "Deleted duplicate open records",
            extra={"staff_id": staff_id, "record_ids": doomed, "deleted": deleted},
        )
        return doomed

    def _now(self, now: Optional[datetime]) -> datetime:
        if now is None:
            return self._clock()
        return parse_instant(now, tz=self._tz)

    def _require_open(self, staff_id: str) -> AttendanceRecord:
        record = self._attendance.get_open_for_staff(staff_id)
        if not record:
            raise ValidationError(AttendanceErrors.NOT_WORKING)
        return record
