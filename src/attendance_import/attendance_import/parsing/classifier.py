"""Row classification for biometric attendance sheets.

Merged header cells shift labels unpredictably across columns, so every
decision is made on the text of the whole row rather than on a fixed cell.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from ..core.constants import (
    EMPLOYEE_SCAN_AHEAD,
    NOISE_MARKERS,
    REMARKS_MAX_COLUMNS,
    REMARKS_SEPARATOR,
    STATUS_SCAN_RADIUS,
)
from ..core.enums import RowKind
from ..sheets.grid import cell_text, joined_lower, row_texts
from .normalizer import looks_like_status, normalize_date

CellRow = Sequence[Optional[str]]

_CODE_RE = re.compile(r"employee\s*code[\s:.#\-]*(\d+)", re.IGNORECASE)
_NAME_RE = re.compile(r"employee\s*name[\s:.\-]*(.*)$", re.IGNORECASE)
_NUMERIC_RE = re.compile(r"^\d+$")
_SPACE_BEFORE_COLON_RE = re.compile(r"\s+:")


@dataclass(frozen=True)
class ColumnMap:
    """Physical column index of each field, as announced by the last header row."""

    date: int = 0
    in_time: int = 2
    out_time: int = 3
    shift: int = 5
    duration: int = 6
    status: int = 7
    remarks: int = 9


def _row_marker_text(row: CellRow) -> str:
    return _SPACE_BEFORE_COLON_RE.sub(":", joined_lower(row))


def _is_label(text: str) -> bool:
    return ":" in text or "employee" in text.lower()


def classify_row(row: CellRow) -> RowKind:
    text = _row_marker_text(row)
    if not text:
        return RowKind.BLANK
    if "employee code" in text:
        return RowKind.EMPLOYEE_CODE
    if "employee name" in text:
        return RowKind.EMPLOYEE_NAME
    if ("intime" in text or "in time" in text) and not any(normalize_date(t) for t in row_texts(row) if t):
        return RowKind.COLUMN_HEADER
    if any(marker in text for marker in NOISE_MARKERS):
        return RowKind.NOISE
    return RowKind.DATA


def extract_employee_code(row: CellRow) -> str:
    cells = row_texts(row)
    for idx, text in enumerate(cells):
        if "employee code" not in text.lower():
            continue
        m = _CODE_RE.search(text)
        if m:
            return m.group(1)
        for ahead in cells[idx + 1 : idx + 1 + EMPLOYEE_SCAN_AHEAD]:
            if _NUMERIC_RE.match(ahead):
                return ahead
    return ""


def extract_employee_name(row: CellRow, *, code: str = "") -> str:
    cells = row_texts(row)
    for idx, text in enumerate(cells):
        m = _NAME_RE.search(text)
        if not m:
            continue
        embedded = m.group(1).strip()
        if embedded and not _is_label(embedded):
            return embedded
        for ahead in cells[idx + 1 : idx + 1 + EMPLOYEE_SCAN_AHEAD]:
            if ahead and not _is_label(ahead):
                return ahead

    # No usable label: take the last free-text token on the row.
    for text in reversed(cells):
        if not text or _is_label(text) or text == code or _NUMERIC_RE.match(text):
            continue
        return text
    return ""


def rebuild_column_map(row: CellRow, previous: ColumnMap) -> ColumnMap:
    found: dict[str, int] = {}
    for idx, text in enumerate(row_texts(row)):
        label = " ".join(text.lower().split())
        if not label:
            continue
        if "duration" in label:
            found.setdefault("duration", idx)
        elif "outtime" in label or "out time" in label:
            found.setdefault("out_time", idx)
        elif "intime" in label or "in time" in label:
            found.setdefault("in_time", idx)
        elif "date" in label:
            found.setdefault("date", idx)
        elif "shift" in label:
            found.setdefault("shift", idx)
        elif "status" in label:
            found.setdefault("status", idx)
        elif "remark" in label:
            found.setdefault("remarks", idx)
    return replace(previous, **found)


def find_status_text(row: CellRow, columns: ColumnMap) -> str:
    status = cell_text(row, columns.status)
    if status:
        return status
    for distance in range(1, STATUS_SCAN_RADIUS + 1):
        for col in (columns.status - distance, columns.status + distance):
            candidate = cell_text(row, col)
            if looks_like_status(candidate):
                return candidate
    return ""


def join_remarks(row: CellRow, columns: ColumnMap) -> str:
    start = columns.remarks
    parts = [cell_text(row, col) for col in range(start, start + REMARKS_MAX_COLUMNS)]
    return REMARKS_SEPARATOR.join(p for p in parts if p)
