from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_placeholders
from .model import AttendanceRecord, record_from_mapping
from .repository import AttendanceRepository

_COLUMNS = "id, staff_id, clock_in, clock_out, break_start, break_end"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tz: Optional[str] = None):
        self._conn_factory = conn_factory
        self._tz = tz

    @property
    def timezone(self) -> Optional[str]:
        return self._tz

    def list_for_staff(self, staff_id: str, *, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE staff_id=%s AND clock_in >= %s AND clock_in < %s
                ORDER BY clock_in ASC
                """,
                (staff_id, start, end),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def list_touching_since(self, staff_id: str, since: datetime) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE staff_id=%s AND (clock_in >= %s OR clock_out >= %s OR clock_out IS NULL)
                ORDER BY clock_in ASC
                """,
                (staff_id, since, since),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def get_latest_for_staff(self, staff_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE staff_id=%s
                ORDER BY clock_in DESC
                LIMIT 1
                """,
                (staff_id,),
            )
            r = fetchone(cur)
            return self._to_record(r) if r else None

    def get_open_for_staff(self, staff_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE staff_id=%s AND clock_out IS NULL
                ORDER BY clock_in DESC
                LIMIT 1
                """,
                (staff_id,),
            )
            r = fetchone(cur)
            return self._to_record(r) if r else None

    def create_clock_in(self, *, staff_id: str, clock_in: datetime) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO attendance(staff_id, clock_in) VALUES(%s,%s)",
                (staff_id, clock_in),
            )
            return str(cur.lastrowid)

    def set_clock_out(self, *, record_id: str, clock_out: datetime) -> bool:
        return self._set_column(record_id, "clock_out", clock_out)

    def set_break_start(self, *, record_id: str, break_start: datetime) -> bool:
        return self._set_column(record_id, "break_start", break_start)

    def set_break_end(self, *, record_id: str, break_end: datetime) -> bool:
        return self._set_column(record_id, "break_end", break_end)

    def delete_records(self, record_ids: Sequence[str]) -> int:
        if not record_ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"DELETE FROM attendance WHERE id IN ({in_placeholders(record_ids)})",
                tuple(record_ids),
            )
            return int(cur.rowcount or 0)

    def _set_column(self, record_id: str, column: str, value: datetime) -> bool:
        # column names come from this class only, never from callers
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE attendance SET {column}=%s WHERE id=%s",
                (value, record_id),
            )
            return cur.rowcount > 0

    def _to_record(self, r: Dict[str, Any]) -> AttendanceRecord:
        # offset-aware values come back as wall time in ``tz``
        return record_from_mapping(r, tz=self._tz)
