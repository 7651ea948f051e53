from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeDirectory


class MySQLEmployeeDirectory(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, badge_id, first_name, last_name
                FROM hr_employees
                WHERE is_active=1
                ORDER BY id
                """
            )
            rows = fetchall(cur)
            return [
                Employee(
                    employee_id=int(r["id"]),
                    code=str(r["badge_id"] or "").strip(),
                    first_name=r.get("first_name") or "",
                    last_name=r.get("last_name") or "",
                )
                for r in rows
            ]
