from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..core.enums import StatusTag
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import UPDATABLE_FIELDS, AttendanceImportRepository

_COLUMNS = {
    "status": "attendance_status",
    "check_in": "check_in",
    "check_out": "check_out",
    "notes": "notes",
}


def _db_value(value: Any) -> Any:
    return value.value if isinstance(value, StatusTag) else value


class MySQLAttendanceRepository(AttendanceImportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_id(self, employee_id: int, work_date: date) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id
                FROM hr_attendance
                WHERE employee_id=%s AND attendance_date=%s
                LIMIT 1
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return int(r["id"]) if r else None

    def update_fields(self, record_id: int, fields: Mapping[str, Any]) -> bool:
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unsupported attendance fields: {sorted(unknown)}")
        if not fields:
            return True

        names = [k for k in UPDATABLE_FIELDS if k in fields]
        assignments = ", ".join(f"{_COLUMNS[k]}=%s" for k in names)
        params = [_db_value(fields[k]) for k in names]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE hr_attendance SET {assignments} WHERE id=%s",
                (*params, record_id),
            )
            # rowcount is 0 when values are unchanged; existence is what matters here.
            cur.execute("SELECT 1 AS found FROM hr_attendance WHERE id=%s", (record_id,))
            return fetchone(cur) is not None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO hr_attendance(employee_id, attendance_date, check_in, check_out, attendance_status, notes, work_type)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, work_date, check_in, check_out, status.value, notes, work_type),
            )
            return int(cur.lastrowid)
