from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import StatusTag


@dataclass(frozen=True)
class ParsedAttendanceRow:
    """Thực thể miền (domain): một ngày chấm công đọc từ file máy chấm công."""

    employee_code: str
    employee_name: str
    date: date
    check_in: Optional[time]
    check_out: Optional[time]
    shift: str
    total_duration: str
    status: StatusTag
    raw_status: str
    remarks: str = ""

    @property
    def notes(self) -> str:
        """Text stored in the attendance record's notes column."""
        return self.remarks or self.raw_status
