from __future__ import annotations

from datetime import datetime, time, timedelta
from fractions import Fraction
from typing import Optional

from ...common.time_conversion import milliseconds_between
from ...common.validators import complete_break
from ...core.constants import MILLISECONDS_IN_HOUR
from ..rates import WageRateTable, build_rate_table
from .base import WageCalculator

_HALF = Fraction(1, 2)


class TieredWageCalculator(WageCalculator):
    """Prices a shift by walking it slot by slot between rate boundaries.

    A slot ends at the next hour where the rate table may change, or at the
    end of the shift. Break time inside a slot is removed by exact interval
    intersection before the slot is priced, so breaks that start or end
    mid-slot never cause rounding drift. Arithmetic stays exact until the
    final round-half-up to whole currency units.

    Instants must be naive local wall time, as produced by ``parse_instant``.
    """

    def __init__(self, rate_table: Optional[WageRateTable] = None):
        self._rates = rate_table or build_rate_table()

    @property
    def rate_table(self) -> WageRateTable:
        return self._rates

    def wage(
        self,
        clock_in: datetime,
        clock_out: datetime,
        break_start: Optional[datetime] = None,
        break_end: Optional[datetime] = None,
    ) -> int:
        end = clock_out
        if end <= clock_in:
            # Overnight shift recorded with an end on the start's calendar day.
            end = end + timedelta(days=1)
        break_start, break_end = complete_break(break_start, break_end)

        total = Fraction(0)
        current = clock_in
        while current < end:
            slot_end = min(self._next_boundary(current), end)
            slot_ms = milliseconds_between(current, slot_end)
            if break_start is not None:
                slot_ms -= _overlap_ms(current, slot_end, break_start, break_end)
            rate = self._rates.rate_for_hour(current.hour)
            total += Fraction(slot_ms, MILLISECONDS_IN_HOUR) * Fraction(rate)
            current = slot_end

        return max(_round_half_up(total), 0)

    def _next_boundary(self, current: datetime) -> datetime:
        day = current.date()
        candidates = [
            datetime.combine(d, time(hour))
            for d in (day, day + timedelta(days=1))
            for hour in self._rates.boundary_hours()
        ]
        return min(c for c in candidates if c > current)


def _overlap_ms(start: datetime, end: datetime, other_start: datetime, other_end: datetime) -> int:
    lo = max(start, other_start)
    hi = min(end, other_end)
    if lo >= hi:
        return 0
    return milliseconds_between(lo, hi)


def _round_half_up(value: Fraction) -> int:
    return int((value + _HALF) // 1)
