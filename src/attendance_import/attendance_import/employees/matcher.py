from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..parsing.model import ParsedAttendanceRow
from .model import Employee, MatchedRow


def normalize_name(value: str) -> str:
    return " ".join((value or "").lower().split())


class EmployeeMatcher:
    """Resolve parsed rows to employees: badge code first, then name.

    Each row is matched on its own against a fixed directory, so the result
    never depends on the order or the other rows of the batch.
    """

    def __init__(self, directory: Sequence[Employee]):
        self._directory = tuple(directory)
        self._by_code = {}
        for e in self._directory:
            if e.code:
                self._by_code.setdefault(e.code, e)

    def find(self, row: ParsedAttendanceRow) -> Optional[Employee]:
        match = self._by_code.get(str(row.employee_code))
        if match:
            return match

        wanted = normalize_name(row.employee_name)
        if not wanted:
            return None
        for e in self._directory:
            full = normalize_name(f"{e.first_name} {e.last_name}")
            if not full:
                continue
            if full == wanted or normalize_name(e.first_name) == wanted or wanted in full or full in wanted:
                return e
        return None

    def match(self, row: ParsedAttendanceRow) -> MatchedRow:
        e = self.find(row)
        if e is None:
            return MatchedRow.from_parsed(row)
        return MatchedRow.from_parsed(row, employee_id=e.employee_id, matched_name=e.full_name)

    def match_all(self, rows: Iterable[ParsedAttendanceRow]) -> list[MatchedRow]:
        return [self.match(r) for r in rows]
