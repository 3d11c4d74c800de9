from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..attendance.model import AttendanceInterval, ReportingPeriod
from ..common.time_conversion import format_minutes
from ..core.constants import MINUTES_IN_HOUR
from .calculator.base import WageCalculator
from .calculator.breaks import actual_work_duration_in_period
from .calculator.duration import Duration, work_duration_in_period
from .calculator.tiered_calculator import TieredWageCalculator
from .rates import PayrollPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodTotals:
    minutes: int
    wage: int
    capped: bool = False

    @property
    def duration(self) -> Duration:
        return Duration(self.minutes)

    @property
    def formatted(self) -> str:
        return format_minutes(self.minutes)

    @property
    def hours(self) -> int:
        return self.minutes // MINUTES_IN_HOUR


def aggregate_period(
    intervals: Iterable[AttendanceInterval],
    period: ReportingPeriod,
    *,
    policy: PayrollPolicy,
    calculator: Optional[WageCalculator] = None,
    deduct_breaks: bool = False,
) -> PeriodTotals:
    """Fold closed intervals into period totals.

    Minutes are clamped per interval to the period, then the running sum is
    clamped to ``policy.max_monthly_minutes``; once the cap is reached no
    further minutes are counted. Wages are summed for every closed interval
    clocked in during the period and are not capped.
    """
    calculator = calculator or TieredWageCalculator(policy.rate_table)
    cap = policy.max_monthly_minutes

    total_minutes = 0
    total_wage = 0
    capped = False
    for interval in intervals:
        if interval.clock_out is None:
            continue

        if period.contains(interval.clock_in):
            total_wage += calculator.price_interval(interval)

        if capped:
            continue
        if deduct_breaks:
            minutes = actual_work_duration_in_period(interval, period).minutes
        else:
            minutes = work_duration_in_period(interval.clock_in, interval.clock_out, period).minutes
        if total_minutes + minutes > cap:
            logger.debug("Period total clamped to %s minutes", cap)
            total_minutes = cap
            capped = True
        else:
            total_minutes += minutes

    return PeriodTotals(minutes=total_minutes, wage=total_wage, capped=capped)
