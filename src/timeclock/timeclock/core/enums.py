from __future__ import annotations

from enum import Enum


class Rounding(str, Enum):
    """How a millisecond interval is turned into whole minutes."""

    CEIL = "ceil"
    FLOOR = "floor"


class WageTier(str, Enum):
    """Time-of-day pay band."""

    NORMAL = "NORMAL"
    EVENING = "EVENING"
    LATE_NIGHT = "LATE_NIGHT"


class WorkStatus(str, Enum):
    """Current state of a staff member, derived from their latest records."""

    WORKING = "WORKING"
    COMPLETED = "COMPLETED"
