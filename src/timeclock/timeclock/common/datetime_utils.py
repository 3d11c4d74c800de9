from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import ParseError

InstantLike = Union[str, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ParseError(value, "YYYY-MM-DD date") from exc


def parse_instant(value: InstantLike, *, tz: Optional[str] = None) -> datetime:
    """Parse an ISO-8601 timestamp into a naive local datetime.

    Offset-aware values are converted to ``tz`` (``DEFAULT_TIMEZONE`` when
    not given) and stripped of tzinfo, so every instant the
    calculators see is local wall time. Naive values are taken as local.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ParseError(value, "ISO-8601 timestamp") from exc
    else:
        raise ParseError(value, "ISO-8601 timestamp")

    if parsed.tzinfo is None:
        return parsed
    return parsed.astimezone(_zone(tz or DEFAULT_TIMEZONE)).replace(tzinfo=None)


def parse_optional_instant(value: Optional[InstantLike], *, tz: Optional[str] = None) -> Optional[datetime]:
    if value is None or value == "":
        return None
    return parse_instant(value, tz=tz)


def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ParseError(name, "IANA timezone name") from exc


def start_of_day(d: date) -> datetime:
    return datetime.combine(d, time.min)


def next_midnight(d: date) -> datetime:
    """00:00 of the day after ``d``, i.e. 24:00 of ``d``."""
    return start_of_day(d + timedelta(days=1))


def first_day_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def now_local(tz: Optional[str] = None) -> datetime:
    """Current wall time, in ``tz`` when given, else the host's local time.

    Note: Wrapped so tests can patch/mock it more easily.
    """
    if tz is None:
        return datetime.now()
    return datetime.now(_zone(tz)).replace(tzinfo=None)
