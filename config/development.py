import os

from .config import (
    EVENING_START_HOUR,
    LATE_NIGHT_END_HOUR,
    MAX_MONTHLY_MINUTES,
    TIMEZONE,
    db_config,
    env_bool,
    wage_rates,
)

DB_CONFIG = db_config(default_password="dev-password")

WAGE_RATES = wage_rates()

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = env_bool("LOG_JSON", False)
