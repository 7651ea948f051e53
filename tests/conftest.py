from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Mapping, Optional

import pytest

from src.attendance_import.attendance_import.attendance.model import AttendanceRecord
from src.attendance_import.attendance_import.core.enums import StatusTag
from src.attendance_import.attendance_import.employees.model import Employee
from src.attendance_import.attendance_import.sheets.grid import SheetGrid


@dataclass
class InMemoryDirectory:
    employees: list[Employee]

    def list_active(self):
        return list(self.employees)


class InMemoryAttendanceStore:
    """Thread-safe fake of the attendance store keyed by (employee_id, date)."""

    def __init__(self, fail_keys: Optional[set] = None):
        self._lock = threading.Lock()
        self._by_key: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0
        self.fail_keys = set(fail_keys or ())
        self.writes: list[tuple[str, int, date]] = []

    def _check(self, key):
        if key in self.fail_keys:
            raise RuntimeError(f"store rejected {key}")

    def find_id(self, employee_id: int, work_date: date) -> Optional[int]:
        with self._lock:
            rec = self._by_key.get((employee_id, work_date))
            return rec.record_id if rec else None

    def update_fields(self, record_id: int, fields: Mapping[str, Any]) -> bool:
        with self._lock:
            for key, rec in self._by_key.items():
                if rec.record_id == record_id:
                    self._check(key)
                    self._by_key[key] = replace(rec, **dict(fields))
                    self.writes.append(("update", *key))
                    return True
            return False

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
        key = (employee_id, work_date)
        with self._lock:
            self._check(key)
            if key in self._by_key:
                raise RuntimeError(f"duplicate key {key}")
            self._id += 1
            self._by_key[key] = AttendanceRecord(
                record_id=self._id,
                employee_id=employee_id,
                attendance_date=work_date,
                status=status,
                check_in=check_in,
                check_out=check_out,
                notes=notes,
                work_type=work_type,
            )
            self.writes.append(("insert", *key))
            return self._id

    def get(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_id, work_date))

    def snapshot(self) -> dict:
        return dict(self._by_key)


SAMPLE_ROWS = [
    ["Employee Code: 7"],
    ["Employee Name: JOHN DOE"],
    ["Date", "", "In Time", "Out Time", "", "Shift", "Total Duration", "Status", "Remarks"],
    ["01-Jan-2026", "", "09:05", "18:10", "", "General", "09:05", "Present", ""],
    ["02-Jan-2026", "", "", "", "", "General", "00:00", "WeeklyOff", ""],
]

SAMPLE_CSV = b"\n".join(
    [
        b"Daily Attendance Report",
        b"Company: ACME Pvt Ltd",
        b"Employee Code: 7",
        b"Employee Name: JOHN DOE",
        b"Date,,In Time,Out Time,,Shift,Total Duration,Status,Remarks",
        b"01-Jan-2026,,09:05,18:10,,General,09:05,Present,",
        b"02-Jan-2026,,,,,General,00:00,WeeklyOff,",
        b"Total Duration=09:05",
    ]
)


@pytest.fixture
def sample_grid() -> SheetGrid:
    return SheetGrid.from_rows(SAMPLE_ROWS)


@pytest.fixture
def sample_csv() -> bytes:
    return SAMPLE_CSV


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee(employee_id=101, code="7", first_name="John", last_name="Doe"),
        Employee(employee_id=102, code="12", first_name="Priya", last_name="Sharma"),
        Employee(employee_id=103, code="", first_name="Arjun", last_name="Mehta"),
    ]


@pytest.fixture
def directory(employees) -> InMemoryDirectory:
    return InMemoryDirectory(employees)


@pytest.fixture
def store() -> InMemoryAttendanceStore:
    return InMemoryAttendanceStore()


@pytest.fixture
def make_store():
    return InMemoryAttendanceStore
