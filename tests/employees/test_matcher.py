from datetime import date

from src.attendance_import.attendance_import.core.enums import StatusTag
from src.attendance_import.attendance_import.employees.matcher import EmployeeMatcher, normalize_name
from src.attendance_import.attendance_import.employees.model import MatchedRow
from src.attendance_import.attendance_import.parsing.model import ParsedAttendanceRow


def _row(code: str, name: str) -> ParsedAttendanceRow:
    return ParsedAttendanceRow(
        employee_code=code,
        employee_name=name,
        date=date(2026, 1, 1),
        check_in=None,
        check_out=None,
        shift="General",
        total_duration="",
        status=StatusTag.ABSENT,
        raw_status="Absent",
    )


def test_normalize_name():
    assert normalize_name("  JOHN   Doe ") == "john doe"
    assert normalize_name("") == ""


def test_exact_code_match_wins(employees):
    matcher = EmployeeMatcher(employees)

    matched = matcher.match(_row("12", "SOMEONE ELSE"))

    assert matched.employee_id == 102
    assert matched.matched_name == "Priya Sharma"


def test_name_match_variants(employees):
    matcher = EmployeeMatcher(employees)

    assert matcher.match(_row("404", "ARJUN  MEHTA")).employee_id == 103
    assert matcher.match(_row("404", "arjun")).employee_id == 103
    assert matcher.match(_row("404", "Arjun Mehta (Contract)")).employee_id == 103
    assert matcher.match(_row("404", "Mehta")).employee_id == 103


def test_unmatched_row_is_kept(employees):
    matcher = EmployeeMatcher(employees)

    matched = matcher.match(_row("404", "NOBODY KNOWN"))

    assert isinstance(matched, MatchedRow)
    assert matched.employee_id is None
    assert matched.matched_name is None
    assert not matched.is_matched
    assert matched.employee_name == "NOBODY KNOWN"


def test_empty_name_never_fuzzy_matches(employees):
    assert EmployeeMatcher(employees).match(_row("", "")).employee_id is None


def test_matching_does_not_mutate_parsed_row(employees):
    parsed = _row("7", "JOHN DOE")

    matched = EmployeeMatcher(employees).match(parsed)

    assert matched.employee_id == 101
    assert not hasattr(parsed, "employee_id")
    assert matched.date == parsed.date and matched.raw_status == parsed.raw_status


def test_match_all_keeps_order(employees):
    rows = [_row("404", "x"), _row("7", "JOHN DOE"), _row("12", "")]

    out = EmployeeMatcher(employees).match_all(rows)

    assert [r.employee_id for r in out] == [None, 101, 102]
