import importlib
from types import SimpleNamespace

import pytest

from src.timeclock.timeclock.core.enums import WageTier
from src.timeclock.timeclock.core.exceptions import ValidationError
from src.timeclock.timeclock.payroll.rates import PayrollPolicy, RateTier, WageRateTable, build_rate_table


def test_default_table_covers_the_whole_day():
    table = build_rate_table()

    assert table.boundary_hours() == (0, 3, 22)
    assert table.tier_for_hour(2).tier == WageTier.LATE_NIGHT
    assert table.rate_for_hour(4) == 1500
    assert table.rate_for_hour(12) == 1500
    assert table.rate_for_hour(23) == 1875


def test_table_with_gap_is_rejected():
    with pytest.raises(ValidationError):
        WageRateTable(
            [
                RateTier(0, 3, 2000, WageTier.LATE_NIGHT),
                RateTier(6, 24, 1500, WageTier.NORMAL),
            ]
        )


def test_table_not_reaching_midnight_is_rejected():
    with pytest.raises(ValidationError):
        WageRateTable([RateTier(0, 22, 1500, WageTier.NORMAL)])


def test_negative_rate_is_rejected():
    with pytest.raises(ValidationError):
        WageRateTable([RateTier(0, 24, -1, WageTier.NORMAL)])


def test_policy_from_settings():
    settings = SimpleNamespace(
        WAGE_RATES={"normal": 1000, "evening": 1250, "late_night": 1500},
        EVENING_START_HOUR=21,
        LATE_NIGHT_END_HOUR=5,
        MAX_MONTHLY_MINUTES=600,
    )

    policy = PayrollPolicy.from_settings(settings)

    assert policy.max_monthly_minutes == 600
    assert policy.rate_table.boundary_hours() == (0, 5, 21)
    assert policy.rate_table.rate_for_hour(21) == 1250


def test_policy_from_testing_settings_module():
    policy = PayrollPolicy.from_settings(importlib.import_module("config.testing"))

    assert policy.max_monthly_minutes == 160 * 60
    assert policy.rate_table.rate_for_hour(0) == 2000
