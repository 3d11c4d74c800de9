from datetime import date, datetime, timedelta

import pytest

from src.timeclock.timeclock.attendance.model import ReportingPeriod
from src.timeclock.timeclock.payroll.calculator.duration import Duration, work_duration, work_duration_in_period


@pytest.mark.parametrize(
    "clock_in, clock_out, expected",
    [
        ("2023-01-01T09:00:00", "2023-01-01T18:00:00", "09:00"),
        ("2023-01-01T09:00:00", "2023-01-01T10:30:00", "01:30"),
        ("2023-01-01T22:00:00", "2023-01-02T05:00:00", "07:00"),
        ("2023-01-01T09:00:00", "2023-01-01T09:00:30", "00:01"),
        ("2023-01-01T09:00:00", "2023-01-01T09:59:59", "01:00"),
        ("2023-01-01T18:00:00", "2023-01-01T09:00:00", "00:00"),
        ("2023-01-01T09:00:00", "2023-01-01T09:00:00", "00:00"),
    ],
)
def test_work_duration(clock_in, clock_out, expected):
    result = work_duration(datetime.fromisoformat(clock_in), datetime.fromisoformat(clock_out))
    assert str(result) == expected


def test_work_duration_inversion_of_any_size_is_zero():
    clock_in = datetime(2023, 1, 10, 9, 0)
    for gap in (timedelta(seconds=1), timedelta(hours=9), timedelta(days=365)):
        clock_out = clock_in - gap
        assert work_duration(clock_in, clock_out).minutes == 0


def test_open_record_has_no_duration():
    assert work_duration(datetime(2023, 1, 1, 9, 0), None) == Duration(0)


JANUARY = ReportingPeriod.for_month(2023, 1)


@pytest.mark.parametrize(
    "clock_in, clock_out, expected",
    [
        ("2023-01-15T09:00:00", "2023-01-15T18:00:00", "09:00"),
        ("2022-12-31T22:00:00", "2023-01-01T06:00:00", "06:00"),
        ("2023-01-31T22:00:00", "2023-02-01T06:00:00", "02:00"),
        ("2022-12-31T22:00:00", "2023-02-01T06:00:00", "744:00"),
        ("2023-01-31T23:30:00", "2023-01-31T23:45:00", "00:15"),
        ("2023-02-01T09:00:00", "2023-02-01T18:00:00", "00:00"),
        ("2023-01-15T18:00:00", "2023-01-15T09:00:00", "00:00"),
    ],
)
def test_work_duration_in_period(clock_in, clock_out, expected):
    result = work_duration_in_period(datetime.fromisoformat(clock_in), datetime.fromisoformat(clock_out), JANUARY)
    assert result.formatted == expected


def test_period_end_is_midnight_after_last_day():
    assert JANUARY.end_exclusive == datetime(2023, 2, 1, 0, 0)
    assert JANUARY.contains(datetime(2023, 1, 31, 23, 59, 59))
    assert not JANUARY.contains(datetime(2023, 2, 1, 0, 0))


def test_partial_minute_at_period_boundary_is_dropped():
    result = work_duration_in_period(datetime(2023, 1, 31, 23, 59, 30), datetime(2023, 2, 1, 0, 10), JANUARY)
    assert result.minutes == 0


def test_split_across_adjacent_periods_sums_to_whole_interval():
    clock_in = datetime(2022, 12, 31, 22, 0)
    clock_out = datetime(2023, 1, 1, 6, 0)
    december = ReportingPeriod(start=datetime(2022, 12, 1), end=date(2022, 12, 31))

    first = work_duration_in_period(clock_in, clock_out, december)
    second = work_duration_in_period(clock_in, clock_out, JANUARY)

    assert (first.formatted, second.formatted) == ("02:00", "06:00")
    assert first + second == work_duration(clock_in, clock_out)


def test_calculations_are_repeatable():
    clock_in = datetime(2022, 12, 31, 22, 0)
    clock_out = datetime(2023, 2, 1, 6, 0)

    assert work_duration_in_period(clock_in, clock_out, JANUARY) == work_duration_in_period(clock_in, clock_out, JANUARY)
