"""Settings shared by every environment module."""

import os


def env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


def env_bool(name: str, default: bool) -> bool:
    return bool(int(os.environ.get(name, "1" if default else "0")))


def db_config(default_password: str) -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": env_int("DB_PORT", 3306),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "timeclock_db"),
    }


def wage_rates() -> dict:
    return {
        "normal": env_int("WAGE_RATE_NORMAL", 1500),
        "evening": env_int("WAGE_RATE_EVENING", 1875),
        "late_night": env_int("WAGE_RATE_LATE_NIGHT", 2000),
    }


TIMEZONE = os.getenv("TIMEZONE", "Asia/Tokyo")

EVENING_START_HOUR = env_int("EVENING_START_HOUR", 22)
LATE_NIGHT_END_HOUR = env_int("LATE_NIGHT_END_HOUR", 3)

# 160 hours
MAX_MONTHLY_MINUTES = env_int("MAX_MONTHLY_MINUTES", 160 * 60)
