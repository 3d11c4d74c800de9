from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Sequence, Union

from ..core import constants
from ..core.enums import WageTier
from ..core.exceptions import ValidationError

Money = Union[int, Decimal]

HOURS_IN_DAY = 24


@dataclass(frozen=True)
class RateTier:
    """Hourly rate for ``[start_hour, end_hour)`` of every calendar day."""

    start_hour: int
    end_hour: int
    rate: Money
    tier: WageTier

    def covers(self, hour: int) -> bool:
        return self.start_hour <= hour < self.end_hour


class WageRateTable:
    """Ordered tiers that must cover the whole 24-hour clock exactly once."""

    def __init__(self, tiers: Sequence[RateTier]):
        ordered = tuple(sorted(tiers, key=lambda t: t.start_hour))
        self._check_total(ordered)
        self._tiers = ordered

    @staticmethod
    def _check_total(tiers: Sequence[RateTier]) -> None:
        if not tiers:
            raise ValidationError("Rate table has no tiers")
        expected_start = 0
        for tier in tiers:
            if tier.start_hour != expected_start:
                raise ValidationError(f"Rate table has a gap or overlap at {expected_start:02d}:00")
            if tier.end_hour <= tier.start_hour:
                raise ValidationError(f"Rate tier {tier.tier.value} has an empty or inverted range")
            if tier.rate < 0:
                raise ValidationError(f"Rate tier {tier.tier.value} has a negative rate")
            expected_start = tier.end_hour
        if expected_start != HOURS_IN_DAY:
            raise ValidationError("Rate table must end at 24:00")

    @property
    def tiers(self) -> tuple[RateTier, ...]:
        return self._tiers

    def boundary_hours(self) -> tuple[int, ...]:
        """Hours of the day at which the applicable rate may change."""
        return tuple(t.start_hour for t in self._tiers)

    def tier_for_hour(self, hour: int) -> RateTier:
        for tier in self._tiers:
            if tier.covers(hour):
                return tier
        raise ValidationError(f"Hour out of range: {hour}")

    def rate_for_hour(self, hour: int) -> Money:
        return self.tier_for_hour(hour).rate


def build_rate_table(
    *,
    normal: Money = constants.DEFAULT_NORMAL_RATE,
    evening: Money = constants.DEFAULT_EVENING_RATE,
    late_night: Money = constants.DEFAULT_LATE_NIGHT_RATE,
    evening_start_hour: int = constants.DEFAULT_EVENING_START_HOUR,
    late_night_end_hour: int = constants.DEFAULT_LATE_NIGHT_END_HOUR,
) -> WageRateTable:
    """Late night from midnight, normal through the day, evening until midnight.

    The early-morning hours between the end of late night and the usual
    06:00 day start are paid at the normal rate.
    """
    return WageRateTable(
        [
            RateTier(0, late_night_end_hour, late_night, WageTier.LATE_NIGHT),
            RateTier(late_night_end_hour, evening_start_hour, normal, WageTier.NORMAL),
            RateTier(evening_start_hour, HOURS_IN_DAY, evening, WageTier.EVENING),
        ]
    )


@dataclass(frozen=True)
class PayrollPolicy:
    """Read-only payroll configuration injected into calculators."""

    rate_table: WageRateTable
    max_monthly_minutes: int = constants.MAX_MONTHLY_MINUTES

    @classmethod
    def default(cls) -> "PayrollPolicy":
        return cls(rate_table=build_rate_table())

    @classmethod
    def from_settings(cls, settings: Any) -> "PayrollPolicy":
        rates: Mapping[str, Money] = getattr(settings, "WAGE_RATES", {}) or {}
        table = build_rate_table(
            normal=rates.get("normal", constants.DEFAULT_NORMAL_RATE),
            evening=rates.get("evening", constants.DEFAULT_EVENING_RATE),
            late_night=rates.get("late_night", constants.DEFAULT_LATE_NIGHT_RATE),
            evening_start_hour=int(getattr(settings, "EVENING_START_HOUR", constants.DEFAULT_EVENING_START_HOUR)),
            late_night_end_hour=int(getattr(settings, "LATE_NIGHT_END_HOUR", constants.DEFAULT_LATE_NIGHT_END_HOUR)),
        )
        max_minutes = int(getattr(settings, "MAX_MONTHLY_MINUTES", constants.MAX_MONTHLY_MINUTES))
        if max_minutes < 0:
            raise ValidationError("MAX_MONTHLY_MINUTES must not be negative")
        return cls(rate_table=table, max_monthly_minutes=max_minutes)
