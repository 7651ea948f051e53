from pathlib import Path

from src.attendance_import.attendance_import.database.bootstrap import (
    _strip_create_db_and_use,
    _strip_line_comments,
    iter_sql_statements,
)


def test_split_ignores_semicolons_in_literals():
    sql = "INSERT INTO t VALUES ('a;b'); UPDATE t SET x=\"c;d\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'UPDATE t SET x="c;d"',
        "SELECT 1",
    ]


def test_schema_file_has_both_tables():
    schema = Path(__file__).resolve().parents[1] / "database" / "schema.sql"
    sql = _strip_line_comments(_strip_create_db_and_use(schema.read_text(encoding="utf-8")))

    statements = list(iter_sql_statements(sql))

    assert len(statements) == 2
    assert "hr_employees" in statements[0]
    assert "UNIQUE KEY uq_hr_attendance_employee_date (employee_id, attendance_date)" in statements[1]
