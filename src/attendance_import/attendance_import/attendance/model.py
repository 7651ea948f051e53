from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import DEFAULT_WORK_TYPE
from ..core.enums import StatusTag


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công, duy nhất theo (nhân viên, ngày)."""

    record_id: int
    employee_id: int
    attendance_date: date
    status: StatusTag
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    notes: Optional[str] = None
    work_type: str = DEFAULT_WORK_TYPE


@dataclass(frozen=True)
class ImportSummary:
    inserted: int = 0
    updated: int = 0
    skipped: int = 0
    unmatched: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
