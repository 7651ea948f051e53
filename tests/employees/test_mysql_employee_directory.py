from src.attendance_import.attendance_import.employees.model import Employee
from src.attendance_import.attendance_import.employees.mysql_employee_repository import MySQLEmployeeDirectory


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.sql = ""

    def execute(self, sql, params=()):
        self.sql = " ".join(sql.split())

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows):
        self.cursor = FakeCursor(rows)

    def connect(self):
        return FakeConn(self.cursor)


def test_list_active_maps_badge_to_code():
    factory = FakeConnFactory(
        [
            {"id": 101, "badge_id": 7, "first_name": "John", "last_name": "Doe"},
            {"id": 103, "badge_id": None, "first_name": "Arjun", "last_name": None},
        ]
    )

    employees = MySQLEmployeeDirectory(factory).list_active()

    assert employees == [
        Employee(employee_id=101, code="7", first_name="John", last_name="Doe"),
        Employee(employee_id=103, code="", first_name="Arjun", last_name=""),
    ]
    assert "WHERE is_active=1" in factory.cursor.sql
    assert employees[1].full_name == "Arjun"
