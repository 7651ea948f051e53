from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import ImportSummary
from ..attendance.reconciler import PersistenceReconciler, importable_rows
from ..common.datetime_utils import format_hhmm
from ..common.validators import require_non_empty_upload, require_supported_extension
from ..core.exceptions import NoAttendanceRecordsError
from ..employees.matcher import EmployeeMatcher
from ..employees.model import MatchedRow
from ..employees.repository import EmployeeDirectory
from ..parsing.assembler import parse_grid
from ..parsing.events import EventSink
from ..sheets.grid import SheetGrid
from ..sheets.loader import load_sheet_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportPreview:
    """Read-model for the operator preview before anything is written."""

    filename: str
    rows: list[MatchedRow]
    employees_found: int
    matched_employees: int
    unmatched_names: list[str]
    period_start: Optional[date]
    period_end: Optional[date]
    records_to_import: int

    @classmethod
    def build(cls, filename: str, rows: Sequence[MatchedRow]) -> "ImportPreview":
        rows = list(rows)
        unmatched_names = list(dict.fromkeys(r.employee_name for r in rows if not r.is_matched))
        return cls(
            filename=filename,
            rows=rows,
            employees_found=len({r.employee_code for r in rows}),
            matched_employees=len({r.employee_code for r in rows if r.is_matched}),
            unmatched_names=unmatched_names,
            period_start=rows[0].date if rows else None,
            period_end=rows[-1].date if rows else None,
            records_to_import=len(importable_rows(rows)),
        )

    def to_dict(self, *, row_limit: Optional[int] = None) -> dict:
        shown = self.rows if row_limit is None else self.rows[:row_limit]
        return {
            "filename": self.filename,
            "employees_found": self.employees_found,
            "matched_employees": self.matched_employees,
            "unmatched_names": self.unmatched_names,
            "period_start": self.period_start.isoformat() if self.period_start else None,
            "period_end": self.period_end.isoformat() if self.period_end else None,
            "records_to_import": self.records_to_import,
            "total_rows": len(self.rows),
            "rows": [_row_to_ui(r) for r in shown],
        }


def _row_to_ui(r: MatchedRow) -> dict:
    return {
        "employee_code": r.employee_code,
        "employee_name": r.matched_name or r.employee_name,
        "employee_id": r.employee_id,
        "date": r.date.isoformat(),
        "check_in": format_hhmm(r.check_in),
        "check_out": format_hhmm(r.check_out),
        "shift": r.shift,
        "total_duration": r.total_duration,
        "status": r.status.value,
        "raw_status": r.raw_status,
        "remarks": r.remarks,
    }


class BiometricImportService:
    def __init__(
        self,
        employees: EmployeeDirectory,
        reconciler: PersistenceReconciler,
        *,
        max_upload_bytes: Optional[int] = None,
    ):
        self._employees = employees
        self._reconciler = reconciler
        self._max_upload_bytes = max_upload_bytes

    def preview_grid(self, grid: SheetGrid, *, filename: str = "", sink: Optional[EventSink] = None) -> ImportPreview:
        parsed = parse_grid(grid, sink=sink)
        if not parsed:
            raise NoAttendanceRecordsError()
        matcher = EmployeeMatcher(self._employees.list_active())
        preview = ImportPreview.build(filename, matcher.match_all(parsed))
        logger.info(
            "parsed %s: rows=%d employees=%d unmatched=%d",
            filename or "<grid>",
            len(preview.rows),
            preview.employees_found,
            len(preview.unmatched_names),
        )
        return preview

    def preview(self, filename: str, data: bytes, *, sink: Optional[EventSink] = None) -> ImportPreview:
        require_supported_extension(filename)
        require_non_empty_upload(data, max_bytes=self._max_upload_bytes)
        grid = load_sheet_grid(filename, data)
        return self.preview_grid(grid, filename=filename, sink=sink)

    def commit(self, rows: Sequence[MatchedRow], *, cancel: Optional[threading.Event] = None) -> ImportSummary:
        return self._reconciler.reconcile(rows, cancel=cancel)

    def import_file(
        self,
        filename: str,
        data: bytes,
        *,
        cancel: Optional[threading.Event] = None,
    ) -> tuple[ImportPreview, ImportSummary]:
        preview = self.preview(filename, data)
        return preview, self.commit(preview.rows, cancel=cancel)
