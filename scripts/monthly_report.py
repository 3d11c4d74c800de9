"""Print one staff member's monthly worked hours and wage.

Usage: python -m scripts.monthly_report <staff_id> <YYYY> <MM>
"""

from __future__ import annotations

import sys

from src.timeclock.timeclock.core.constants import AttendanceErrors
from src.timeclock.timeclock.main import bootstrap


def main(argv: list[str]) -> None:
    if len(argv) != 3:
        raise SystemExit(__doc__)

    staff_id, year, month = argv[0], int(argv[1]), int(argv[2])
    container = bootstrap()
    report = container.payroll_report_service.build_monthly_report(staff_id, year=year, month=month)

    if not report.is_consistent:
        print(f"WARNING: {AttendanceErrors.DATA_INCONSISTENCY}")
    for row in report.rows:
        if row["carried_over"]:
            wage = "(paid last month)"
        else:
            wage = f"{row['wage']:,}" if row["wage"] is not None else "-"
        print(f"{row['date']}\t{row['clock_in']}\t{row['clock_out']}\t{row['break']}\t{row['worked_hours']}\t{wage}")
    suffix = " (capped)" if report.totals.capped else ""
    print(f"Worked total: {report.totals.formatted}{suffix}  Wage: {report.totals.wage:,}")


if __name__ == "__main__":
    main(sys.argv[1:])
