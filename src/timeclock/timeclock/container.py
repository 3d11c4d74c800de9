from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .core.constants import DEFAULT_TIMEZONE
from .payroll.calculator.tiered_calculator import TieredWageCalculator
from .payroll.rates import PayrollPolicy
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    attendance_repo: MySQLAttendanceRepository

    policy: PayrollPolicy
    timezone: str
    wage_calculator: TieredWageCalculator

    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService


def build_container(*, settings: Any) -> Container:
    timezone = str(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE))

    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(settings.DB_CONFIG))
    attendance_repo = MySQLAttendanceRepository(conn, tz=timezone)

    policy = PayrollPolicy.from_settings(settings)
    wage_calculator = TieredWageCalculator(policy.rate_table)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        policy=policy,
        timezone=timezone,
        wage_calculator=wage_calculator,
        attendance_service=AttendanceService(attendance_repo, tz=timezone),
        payroll_report_service=PayrollReportService(
            attendance_repo,
            policy=policy,
            calculator=wage_calculator,
        ),
    )
