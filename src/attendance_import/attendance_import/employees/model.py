from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

from ..parsing.model import ParsedAttendanceRow


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): nhân viên đang làm việc trong danh bạ.

    Lưu ý: ``code`` là mã chấm công (badge) in trên báo cáo của máy chấm công.
    """

    employee_id: int
    code: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class MatchedRow(ParsedAttendanceRow):
    employee_id: Optional[int] = None
    matched_name: Optional[str] = None

    @classmethod
    def from_parsed(
        cls,
        row: ParsedAttendanceRow,
        *,
        employee_id: Optional[int] = None,
        matched_name: Optional[str] = None,
    ) -> "MatchedRow":
        values = {f.name: getattr(row, f.name) for f in fields(ParsedAttendanceRow)}
        return cls(**values, employee_id=employee_id, matched_name=matched_name)

    @property
    def is_matched(self) -> bool:
        return self.employee_id is not None
