from .config import db_config

DB_CONFIG = db_config(default_password="test-password")

# Fixed so test expectations do not depend on the environment.
TIMEZONE = "Asia/Tokyo"
WAGE_RATES = {"normal": 1500, "evening": 1875, "late_night": 2000}
EVENING_START_HOUR = 22
LATE_NIGHT_END_HOUR = 3
MAX_MONTHLY_MINUTES = 160 * 60

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_JSON = False
