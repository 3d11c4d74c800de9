from datetime import datetime

from src.timeclock.timeclock.attendance.model import AttendanceInterval
from src.timeclock.timeclock.attendance.validation import validate_records, validate_records_strict


def rec(clock_in, clock_out=None):
    return AttendanceInterval(
        clock_in=datetime.fromisoformat(clock_in),
        clock_out=datetime.fromisoformat(clock_out) if clock_out else None,
    )


def test_empty_list_is_consistent():
    assert validate_records([])
    assert validate_records_strict([])


def test_closed_records_are_consistent():
    records = [
        rec("2023-01-01T09:00:00", "2023-01-01T18:00:00"),
        rec("2023-01-02T09:00:00", "2023-01-02T18:00:00"),
    ]
    assert validate_records(records)
    assert validate_records_strict(records)


def test_single_open_record_is_allowed():
    records = [
        rec("2023-01-01T09:00:00", "2023-01-01T18:00:00"),
        rec("2023-01-02T09:00:00"),
    ]
    assert validate_records(records)
    assert validate_records_strict(records)


def test_two_open_records_fail():
    records = [rec("2023-01-01T09:00:00"), rec("2023-01-02T09:00:00")]
    assert not validate_records(records)
    assert not validate_records_strict(records)


def test_strict_rejects_touching_records():
    records = [
        rec("2023-01-01T09:00:00", "2023-01-01T18:00:00"),
        rec("2023-01-01T18:00:00", "2023-01-01T19:00:00"),
    ]
    assert validate_records(records)
    assert not validate_records_strict(records)


def test_strict_rejects_overlap():
    records = [
        rec("2023-01-01T22:00:00", "2023-01-02T06:00:00"),
        rec("2023-01-02T05:00:00", "2023-01-02T09:00:00"),
    ]
    assert not validate_records_strict(records)


def test_strict_accepts_cross_day_chain_in_any_input_order():
    records = [
        rec("2023-01-02T09:00:00"),
        rec("2023-01-01T22:00:00", "2023-01-02T06:00:00"),
    ]
    assert validate_records_strict(records)


def test_strict_rejects_open_record_followed_by_another():
    records = [
        rec("2023-01-01T09:00:00"),
        rec("2023-01-02T09:00:00", "2023-01-02T18:00:00"),
    ]
    assert validate_records(records)
    assert not validate_records_strict(records)


def test_strict_skips_exact_duplicates():
    records = [
        rec("2023-01-01T09:00:00", "2023-01-01T18:00:00"),
        rec("2023-01-01T09:00:00", "2023-01-01T18:00:00"),
        rec("2023-01-02T09:00:00", "2023-01-02T18:00:00"),
    ]
    assert validate_records_strict(records)


def test_strict_rejects_inverted_record():
    assert not validate_records_strict([rec("2023-01-01T18:00:00", "2023-01-01T09:00:00")])


def test_strict_rejects_duplicate_open_records():
    records = [rec("2024-01-02T09:00:00"), rec("2024-01-02T09:00:00")]
    assert not validate_records(records)
    assert not validate_records_strict(records)
