"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

# Spreadsheet serial dates count days from 1899-12-30 (absorbs the 1900 leap-year bug).
SERIAL_DATE_EPOCH = date(1899, 12, 30)
SERIAL_DATE_MIN = 40000
SERIAL_DATE_MAX = 60000

MINUTES_PER_DAY = 24 * 60

SUPPORTED_EXTENSIONS = (".xls", ".xlsx", ".csv")

EMPLOYEE_SCAN_AHEAD = 4
STATUS_SCAN_RADIUS = 2
REMARKS_MAX_COLUMNS = 10
REMARKS_SEPARATOR = " | "

NOISE_MARKERS = (
    "total duration=",
    "daily attendance",
    "company:",
    "department:",
    "printed on",
)

DEFAULT_WORK_TYPE = "office"
DEFAULT_IMPORT_WORKERS = 4
DEFAULT_MAX_UPLOAD_MB = 10
