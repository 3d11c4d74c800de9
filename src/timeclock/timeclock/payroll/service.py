from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord, ReportingPeriod
from ..attendance.repository import AttendanceRepository
from ..attendance.validation import validate_records
from ..common.datetime_utils import first_day_of_month, previous_month, start_of_day
from ..common.validators import require_non_empty
from .aggregator import PeriodTotals, aggregate_period
from .calculator.base import WageCalculator
from .calculator.breaks import daily_work_summary
from .calculator.tiered_calculator import TieredWageCalculator
from .rates import PayrollPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyReport:
    staff_id: str
    year: int
    month: int
    rows: list[dict]
    totals: PeriodTotals
    is_consistent: bool


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        policy: Optional[PayrollPolicy] = None,
        calculator: Optional[WageCalculator] = None,
    ):
        self._attendance = attendance
        self._policy = policy or PayrollPolicy.default()
        self._calculator = calculator or TieredWageCalculator(self._policy.rate_table)

    def build_monthly_report(self, staff_id: str, *, year: int, month: int) -> MonthlyReport:
        staff_id = require_non_empty(staff_id, "staff_id")
        period = ReportingPeriod.for_month(year, month)

        # Start a month early so a shift that began last month and ended in
        # this one is apportioned to both.
        prev_year, prev_month = previous_month(year, month)
        records = self._attendance.list_for_staff(
            staff_id,
            start=start_of_day(first_day_of_month(prev_year, prev_month)),
            end=period.end_exclusive,
        )

        is_consistent = validate_records([r.interval for r in records])
        if not is_consistent:
            logger.warning("Inconsistent records in monthly report", extra={"staff_id": staff_id, "year": year, "month": month})

        totals = aggregate_period(
            [r.interval for r in records],
            period,
            policy=self._policy,
            calculator=self._calculator,
            deduct_breaks=True,
        )

        rows = [self._to_row(r, period) for r in records if self._in_month(r, period)]
        return MonthlyReport(
            staff_id=staff_id,
            year=year,
            month=month,
            rows=rows,
            totals=totals,
            is_consistent=is_consistent,
        )

    @staticmethod
    def _in_month(record: AttendanceRecord, period: ReportingPeriod) -> bool:
        if period.contains(record.clock_in):
            return True
        return record.clock_out is not None and period.contains(record.clock_out)

    def _to_row(self, r: AttendanceRecord, period: ReportingPeriod) -> dict:
        summary = daily_work_summary(r.interval)
        closed = r.clock_out is not None
        # paid in the month it clocked in, so no wage here
        carried_over = r.clock_in < period.start
        return {
            "record_id": r.record_id,
            "date": r.clock_in.strftime("%Y-%m-%d"),
            "clock_in": r.clock_in.strftime("%H:%M"),
            "clock_out": r.clock_out.strftime("%H:%M") if closed else "-",
            "is_cross_day": r.is_cross_day,
            "carried_over": carried_over,
            "break": (
                f"{r.break_start.strftime('%H:%M')} - {r.break_end.strftime('%H:%M')}"
                if r.break_start and r.break_end
                else "-"
            ),
            "total_hours": summary.total.formatted if closed else "-",
            "worked_hours": summary.actual.formatted if closed else "-",
            "wage": self._calculator.price_interval(r.interval) if closed and not carried_over else None,
        }
