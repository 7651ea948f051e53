from __future__ import annotations

from enum import Enum


class StatusTag(str, Enum):
    """Trạng thái chấm công chuẩn hoá ghi vào CSDL."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half_day"
    LATE = "late"
    WEEKLY_OFF = "weekly_off"


class RowKind(str, Enum):
    """Role of one physical sheet row during the scan."""

    EMPLOYEE_CODE = "employee_code"
    EMPLOYEE_NAME = "employee_name"
    COLUMN_HEADER = "column_header"
    NOISE = "noise"
    DATA = "data"
    BLANK = "blank"


class UpsertOutcome(str, Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    SKIPPED = "skipped"
