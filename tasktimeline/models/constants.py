"""Constants for tasktimeline.

This module centralizes all magic numbers and default values used throughout the engine.
"""


# Extraction defaults
DEFAULT_DATE_FORMAT = "DD-MMM-YYYY"
DEFAULT_TASK_PATTERN = r"(.+?)\s*->\s*_([\d]{1,2}-[A-Za-z]{3}-\d{4})_\s*(#[A-Za-z0-9_]+)"
REQUIRED_CAPTURE_GROUPS = 3  # task text, date token, tag

# A task whose text starts with one of these is completed
COMPLETION_MARKERS = ("[x]", "- [x]")

# Colors
DEFAULT_TAG_COLOR = "#5a8eee"

# Urgency
SOON_THRESHOLD_DAYS = 7

# Calendar
MAX_VISIBLE_PER_DAY_CELL = 3
DAYS_PER_WEEK = 7

# Refresh (milliseconds, 0 disables the caller's timer)
DEFAULT_REFRESH_INTERVAL_MS = 5000
