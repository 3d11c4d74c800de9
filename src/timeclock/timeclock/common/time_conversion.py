"""Interval to minutes conversion and ``HH:mm`` formatting.

Worked time rounds partial minutes up, period clamping rounds them down.
The rounding rule is always passed explicitly; mixing the two silently
shifts payroll totals by a minute.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from ..core.constants import MILLISECONDS_IN_MINUTE, MINUTES_IN_HOUR
from ..core.enums import Rounding
from ..core.exceptions import ParseError

_HHMM = re.compile(r"^(\d+):([0-5]\d)$")
_ONE_MS = timedelta(milliseconds=1)


def milliseconds_between(a: datetime, b: datetime) -> int:
    return (b - a) // _ONE_MS


def minutes_between(a: datetime, b: datetime, *, rounding: Rounding) -> int:
    """Whole minutes from ``a`` to ``b``; negative when ``b`` is before ``a``."""
    ms = milliseconds_between(a, b)
    rounding = Rounding(rounding)
    if rounding is Rounding.CEIL:
        return -(-ms // MILLISECONDS_IN_MINUTE)
    return ms // MILLISECONDS_IN_MINUTE


def ceil_minutes_between(a: datetime, b: datetime) -> int:
    return minutes_between(a, b, rounding=Rounding.CEIL)


def floor_minutes_between(a: datetime, b: datetime) -> int:
    return minutes_between(a, b, rounding=Rounding.FLOOR)


def format_minutes(total: int) -> str:
    """Render minutes as ``HH:mm``; hours are not capped at 24."""
    total = max(int(total), 0)
    return f"{total // MINUTES_IN_HOUR:02d}:{total % MINUTES_IN_HOUR:02d}"


def parse_hhmm(value: str) -> int:
    match = _HHMM.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ParseError(value, "HH:mm duration")
    return int(match.group(1)) * MINUTES_IN_HOUR + int(match.group(2))
