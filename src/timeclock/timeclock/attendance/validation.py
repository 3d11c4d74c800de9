"""Structural consistency checks over a staff member's records.

Failures are reported, never repaired here; see
``AttendanceService.repair_open_records`` for the explicit fix.
"""

from __future__ import annotations

from typing import Iterable

from .model import AttendanceInterval


def validate_records(intervals: Iterable[AttendanceInterval]) -> bool:
    """At most one record may still be waiting for its clock out."""
    open_count = 0
    for interval in intervals:
        if interval.clock_out is None:
            open_count += 1
            if open_count > 1:
                return False
    return True


def validate_records_strict(intervals: Iterable[AttendanceInterval]) -> bool:
    """Records must form a non-overlapping chronological chain.

    Adds to ``validate_records``: only the latest record may be open, no
    record may end before it starts, and each record must end strictly
    before the next one starts. Exact duplicates of a closed record (same
    clock in and clock out) are skipped; duplicate open records still fail.
    """
    ordered = sorted(intervals, key=lambda i: i.clock_in)
    if not validate_records(ordered):
        return False

    chain: list[AttendanceInterval] = []
    for interval in ordered:
        if chain and interval.clock_out is not None and _same_span(chain[-1], interval):
            continue
        chain.append(interval)

    for current, following in zip(chain, chain[1:]):
        if current.clock_out is None:
            return False
        if current.clock_out < current.clock_in:
            return False
        if not current.clock_out < following.clock_in:
            return False

    last = chain[-1] if chain else None
    if last is not None and last.clock_out is not None and last.clock_out < last.clock_in:
        return False
    return True


def _same_span(a: AttendanceInterval, b: AttendanceInterval) -> bool:
    return a.clock_in == b.clock_in and a.clock_out == b.clock_out
