from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...attendance.model import AttendanceInterval


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for wage pricing)."""

    @abstractmethod
    def wage(
        self,
        clock_in: datetime,
        clock_out: datetime,
        break_start: Optional[datetime] = None,
        break_end: Optional[datetime] = None,
    ) -> int:
        """Whole-currency wage for one shift.

        Takes naive local wall-time datetimes; normalise offset-aware input
        with ``parse_instant`` first.
        """
        raise NotImplementedError

    def price_interval(self, interval: AttendanceInterval) -> int:
        if interval.clock_out is None:
            return 0
        return self.wage(interval.clock_in, interval.clock_out, interval.break_start, interval.break_end)
