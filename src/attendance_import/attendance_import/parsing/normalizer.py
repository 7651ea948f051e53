"""Cell normalizers: raw cell value -> date, clock time or status tag.

All functions here are pure and never raise on bad input; a value that cannot
be understood comes back as ``None`` (or the default status).
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from dateutil import parser as date_parser

from ..core.constants import MINUTES_PER_DAY, SERIAL_DATE_EPOCH, SERIAL_DATE_MAX, SERIAL_DATE_MIN
from ..core.enums import StatusTag

_DATE_FORMATS = (
    "%d-%b-%Y",
    "%d-%b-%y",
    "%d %b %Y",
    "%d-%B-%Y",
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%d.%m.%Y",
)

_CLOCK_RE = re.compile(r"^(?:\d{4}-\d{2}-\d{2}[ T])?(\d{1,2}):(\d{2})(?::\d{2})?$")
_DATE_SEPARATOR_RE = re.compile(r"[-/.\s]")
_COMPACT_DATE_RE = re.compile(r"^\d{8}$")

_WEEKLY_OFF_MARKERS = ("weeklyoff", "weekly off")
_HALF_PRESENT_MARKERS = ("half present", "halfpresent")
_STATUS_KEYWORDS = ("present", "absent", "late", "half", *_WEEKLY_OFF_MARKERS)


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return None


def _compact_date(serial: float) -> Optional[date]:
    # 20260101; other numbers outside the serial range are not dates.
    text = str(int(serial)) if serial.is_integer() else ""
    if not _COMPACT_DATE_RE.match(text):
        return None
    try:
        return datetime.strptime(text, "%Y%m%d").date()
    except ValueError:
        return None


def normalize_date(cell: Any) -> Optional[date]:
    """Canonical calendar date from a serial day count or date text."""
    if cell is None:
        return None
    if isinstance(cell, datetime):
        return cell.date()
    if isinstance(cell, date):
        return cell

    serial = _to_float(cell)
    if serial is not None:
        if SERIAL_DATE_MIN < serial < SERIAL_DATE_MAX:
            return SERIAL_DATE_EPOCH + timedelta(days=int(serial))
        return _compact_date(serial)

    text = str(cell).strip()
    if not text:
        return None

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    # Generic fallback; bare words and lone numbers are never dates here.
    if not any(ch.isdigit() for ch in text) or not _DATE_SEPARATOR_RE.search(text):
        return None
    try:
        return date_parser.parse(text, dayfirst=True).date()
    except (ValueError, OverflowError):
        return None


def normalize_time(cell: Any) -> Optional[time]:
    """Clock time of a punch; ``None`` when no punch was recorded.

    "00:00" and blank cells mean "no punch", not midnight.
    """

    if cell is None:
        return None
    if isinstance(cell, time):
        return cell if (cell.hour, cell.minute) != (0, 0) else None

    text = str(cell).strip()
    if not text:
        return None

    m = _CLOCK_RE.match(text)
    if m:
        hours, minutes = int(m.group(1)), int(m.group(2))
        if hours >= 24 or minutes >= 60 or (hours, minutes) == (0, 0):
            return None
        return time(hours, minutes)

    fraction = _to_float(cell)
    if fraction is None or not 0 <= fraction < 1:
        return None
    total = int(fraction * MINUTES_PER_DAY + 0.5)
    if total == 0:
        return None
    total = min(total, MINUTES_PER_DAY - 1)
    return time(total // 60, total % 60)


def _fold_status(raw: Any) -> str:
    text = str(raw or "").replace("½", "half").replace("1/2", "half")
    return text.lower().strip()


def _is_half_present(text: str) -> bool:
    return any(m in text for m in _HALF_PRESENT_MARKERS)


def normalize_status(raw: Any) -> StatusTag:
    """Map free-text terminal status to a StatusTag.

    Unrecognized text maps to ABSENT; callers keep the raw text for audit.
    """

    text = _fold_status(raw)

    if any(m in text for m in _WEEKLY_OFF_MARKERS):
        if _is_half_present(text):
            return StatusTag.HALF_DAY
        if "present" in text:
            return StatusTag.PRESENT
        return StatusTag.WEEKLY_OFF

    if _is_half_present(text):
        return StatusTag.HALF_DAY
    if "present" in text:
        return StatusTag.PRESENT
    if text == "absent":
        return StatusTag.ABSENT
    if text == "late":
        return StatusTag.LATE
    return StatusTag.ABSENT


def looks_like_status(text: Any) -> bool:
    folded = _fold_status(text)
    return bool(folded) and any(k in folded for k in _STATUS_KEYWORDS)
