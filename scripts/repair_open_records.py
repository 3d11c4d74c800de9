"""Delete duplicate open clock-in records for one staff member.

Usage: python -m scripts.repair_open_records <staff_id> [YYYY-MM-DD]

Keeps the latest open record among those touching the given day (default:
today) and deletes the rest. This is the explicit repair step offered when
the consistency check fails; nothing else ever deletes records.
"""

from __future__ import annotations

import sys

from src.timeclock.timeclock.common.datetime_utils import now_local, parse_iso_date, start_of_day
from src.timeclock.timeclock.main import bootstrap


def main(argv: list[str]) -> None:
    if not argv:
        raise SystemExit(__doc__)

    staff_id = argv[0]
    container = bootstrap()
    day = parse_iso_date(argv[1]) if len(argv) > 1 else now_local(container.timezone).date()

    deleted = container.attendance_service.repair_open_records(staff_id, since=start_of_day(day))
    if deleted:
        print(f"OK: deleted {len(deleted)} duplicate open record(s): {', '.join(deleted)}")
    else:
        print("Nothing to repair.")


if __name__ == "__main__":
    main(sys.argv[1:])
