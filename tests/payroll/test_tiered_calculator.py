from datetime import datetime, timedelta

import pytest

from src.timeclock.timeclock.attendance.model import AttendanceInterval
from src.timeclock.timeclock.common.datetime_utils import parse_instant
from src.timeclock.timeclock.payroll.calculator.tiered_calculator import TieredWageCalculator
from src.timeclock.timeclock.payroll.rates import build_rate_table

NORMAL, EVENING, LATE_NIGHT = 1500, 1875, 2000


def at(hour, minute=0):
    """A time on 2024-01-15; hour 24 means midnight of the next day."""
    if hour == 24:
        return datetime(2024, 1, 16, 0, minute)
    return datetime(2024, 1, 15, hour, minute)


@pytest.fixture
def calc():
    return TieredWageCalculator()


def test_normal_hours(calc):
    assert calc.wage(at(10), at(18)) == 8 * NORMAL


def test_normal_hours_with_fraction(calc):
    assert calc.wage(at(10, 30), at(18, 45)) == round(8.25 * NORMAL)


def test_evening_hours(calc):
    assert calc.wage(at(22), at(24)) == 2 * EVENING


def test_evening_boundary_split(calc):
    # 0.25h normal + 0.25h evening = 843.75
    assert calc.wage(at(21, 45), at(22, 15)) == 844


def test_late_night_hours(calc):
    assert calc.wage(at(0), at(3)) == 3 * LATE_NIGHT


def test_midnight_boundary_split_with_end_on_same_calendar_day(calc):
    # 23:45 -> 00:15 recorded on one date is an overnight shift:
    # 0.25h evening + 0.25h late night = 968.75
    assert calc.wage(at(23, 45), at(0, 15)) == 969


def test_early_morning_is_paid_at_normal_rate(calc):
    assert calc.wage(at(3), at(6)) == 3 * NORMAL


def test_overnight_shift_crosses_every_tier(calc):
    clock_out = at(22) + timedelta(hours=6)
    assert calc.wage(at(22), clock_out) == 2 * EVENING + 3 * LATE_NIGHT + 1 * NORMAL


def test_equal_clock_in_and_out_is_a_full_day(calc):
    assert calc.wage(at(9), at(9)) == 3 * LATE_NIGHT + 19 * NORMAL + 2 * EVENING


def test_break_inside_one_tier(calc):
    assert calc.wage(at(10), at(18), at(12), at(13)) == 7 * NORMAL


def test_break_across_rate_boundary(calc):
    # 21:00-21:30 normal, 22:30-23:00 evening: 750 + 937.5, rounded half up
    assert calc.wage(at(21), at(23), at(21, 30), at(22, 30)) == 1688


def test_break_outside_shift_is_ignored(calc):
    assert calc.wage(at(10), at(12), at(13), at(14)) == 2 * NORMAL


def test_half_open_break_is_ignored(calc):
    assert calc.wage(at(10), at(12), at(11), None) == 2 * NORMAL


def test_break_covering_whole_shift_pays_nothing(calc):
    assert calc.wage(at(10), at(12), at(9), at(13)) == 0


def test_custom_rates():
    calc = TieredWageCalculator(build_rate_table(normal=1000, evening=1200, late_night=1400))
    assert calc.wage(at(21), at(23)) == 1000 + 1200


def test_price_interval(calc):
    assert calc.price_interval(AttendanceInterval(at(10), at(18), at(12), at(13))) == 7 * NORMAL
    assert calc.price_interval(AttendanceInterval(at(10))) == 0


def test_pricing_is_repeatable(calc):
    first = calc.wage(at(21, 7), at(2, 41), at(23, 13), at(23, 58))
    assert calc.wage(at(21, 7), at(2, 41), at(23, 13), at(23, 58)) == first


def test_offset_input_is_priced_on_local_wall_time_once_parsed(calc):
    # 12:00-16:00 UTC is 21:00-01:00 in Tokyo
    clock_in = parse_instant("2024-01-15T12:00:00+00:00", tz="Asia/Tokyo")
    clock_out = parse_instant("2024-01-15T16:00:00+00:00", tz="Asia/Tokyo")

    assert calc.wage(clock_in, clock_out) == NORMAL + 2 * EVENING + LATE_NIGHT
