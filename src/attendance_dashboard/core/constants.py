"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7

# Reconciled rows are stamped at noon so local-date truncation never crosses midnight.
ATTENDANCE_ANCHOR_HOUR = 12

GROWTH_WINDOW_DAYS = 7
TREND_WINDOW_DAYS = 30
TREND_MAX_POINTS = 14

# Upper bound on entries accepted in one presence map.
DEFAULT_MAX_PRESENCE_ENTRIES = 5000

MIN_PASSWORD_LENGTH = 6

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
