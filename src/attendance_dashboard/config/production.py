import os

# No defaults for credentials: missing values surface as NotConfiguredError.
SECRET_KEY = os.getenv("SECRET_KEY", "")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", ""),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", ""),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", ""),
}

TIMEZONE = os.getenv("TIMEZONE", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
MAX_PRESENCE_ENTRIES = int(os.getenv("MAX_PRESENCE_ENTRIES", "5000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
