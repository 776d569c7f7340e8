"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PREFS_NAME = "attendance_prefs"
KEY_ATTENDANCE_LIST = "attendance_list"

MAX_STORED_RECORDS = 100

FIELD_SEPARATOR = "|"
RECORD_SEPARATOR = ";;"

TIME_ZONE_TAG = "WIB"

DEFAULT_WORK_START = "08:00"
DEFAULT_WORK_END = "17:00"

EMPTY_TIME_PLACEHOLDER = "-"
