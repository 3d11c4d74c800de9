from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_staff(self, staff_id: str, *, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        """Records clocked in within ``[start, end)``, oldest first."""

        raise NotImplementedError

    def list_touching_since(self, staff_id: str, since: datetime) -> Sequence[AttendanceRecord]:
        """Records clocked in or out at or after ``since``, oldest first."""

        raise NotImplementedError

    def get_latest_for_staff(self, staff_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_open_for_staff(self, staff_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_clock_in(self, *, staff_id: str, clock_in: datetime) -> str:
        raise NotImplementedError

    def set_clock_out(self, *, record_id: str, clock_out: datetime) -> bool:
        raise NotImplementedError

    def set_break_start(self, *, record_id: str, break_start: datetime) -> bool:
        raise NotImplementedError

    def set_break_end(self, *, record_id: str, break_end: datetime) -> bool:
        raise NotImplementedError

    def delete_records(self, record_ids: Sequence[str]) -> int:
        raise NotImplementedError
