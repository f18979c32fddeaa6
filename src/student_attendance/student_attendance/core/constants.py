"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_COURSE = "N/A"
DEFAULT_SUBJECT = "general"
DEFAULT_DATA_FILE = "data/attendance.json"
NO_DAY = "-"
JSON_INDENT = 2
