"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_IN_HOUR = 60
MILLISECONDS_IN_MINUTE = 60 * 1000
MILLISECONDS_IN_HOUR = 60 * MILLISECONDS_IN_MINUTE

MAX_MONTHLY_HOURS = 160
MAX_MONTHLY_MINUTES = MAX_MONTHLY_HOURS * MINUTES_IN_HOUR

# Hourly rates in yen.
DEFAULT_NORMAL_RATE = 1500
DEFAULT_EVENING_RATE = 1875
DEFAULT_LATE_NIGHT_RATE = 2000

DEFAULT_EVENING_START_HOUR = 22
DEFAULT_LATE_NIGHT_END_HOUR = 3

DEFAULT_TIMEZONE = "Asia/Tokyo"


class AttendanceErrors:
    """User-facing messages for rejected clock actions."""

    ALREADY_WORKING = "There is already an open clock-in record."
    ALREADY_COMPLETED = "You have already clocked in and out today."
    NOT_WORKING = "No open clock-in record, or already clocked out."
    NO_STAFF_INFO = "Staff information is missing."
    INVALID_CLOCK_OUT = "Cannot clock out before the clock-in time."
    DATA_INCONSISTENCY = "Attendance records are inconsistent. Please contact an administrator."
    BREAK_ALREADY_TAKEN = "A break has already been recorded for this shift."
    BREAK_IN_PROGRESS = "A break is already in progress."
    BREAK_BEFORE_CLOCK_IN = "Cannot start a break before the clock-in time."
    NO_BREAK_RECORD = "No break has been started, or it has already ended."
    INVALID_BREAK_END = "Cannot end a break before it started."
