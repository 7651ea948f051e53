from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional, Protocol

from ..core.enums import StatusTag

# Keys accepted by update_fields(); anything else is a programming error.
UPDATABLE_FIELDS = ("status", "check_in", "check_out", "notes")


class AttendanceImportRepository(Protocol):
    """Write side of the attendance store used by the importer.

    Implementations must be safe to call from several worker threads.
    """

    def find_id(self, employee_id: int, work_date: date) -> Optional[int]:
        raise NotImplementedError

    def update_fields(self, record_id: int, fields: Mapping[str, Any]) -> bool:
        """Partial update: only the given fields are overwritten."""

        raise NotImplementedError

    def insert(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: StatusTag,
        check_in: Optional[datetime],
        check_out: Optional[datetime],
        notes: Optional[str],
        work_type: str,
    ) -> int:
        raise NotImplementedError
