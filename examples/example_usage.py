"""Example: price a month of attendance without a database.

The calculators only need plain records, so the service layer can be fed
straight from rows exported by the data store.
"""

from src.timeclock.timeclock.attendance.model import ReportingPeriod, record_from_mapping
from src.timeclock.timeclock.attendance.validation import validate_records
from src.timeclock.timeclock.payroll.aggregator import aggregate_period
from src.timeclock.timeclock.payroll.rates import PayrollPolicy

ROWS = [
    {"id": "1", "staff_id": "s1", "clock_in": "2024-01-05T10:00:00", "clock_out": "2024-01-05T18:00:00",
     "break_start": "2024-01-05T12:00:00", "break_end": "2024-01-05T13:00:00"},
    {"id": "2", "staff_id": "s1", "clock_in": "2024-01-06T21:00:00", "clock_out": "2024-01-07T02:00:00",
     "break_start": None, "break_end": None},
    {"id": "3", "staff_id": "s1", "clock_in": "2024-01-31T22:00:00", "clock_out": "2024-02-01T06:00:00",
     "break_start": None, "break_end": None},
]


def main():
    records = [record_from_mapping(row) for row in ROWS]
    intervals = [r.interval for r in records]
    period = ReportingPeriod.for_month(2024, 1)

    totals = aggregate_period(intervals, period, policy=PayrollPolicy.default())
    print("consistent:", validate_records(intervals))
    print("worked:", totals.formatted, "wage:", totals.wage)


if __name__ == "__main__":
    main()
