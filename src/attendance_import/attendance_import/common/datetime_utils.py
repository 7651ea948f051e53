from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional


def combine_optional(work_date: date, value: Optional[time]) -> Optional[datetime]:
    """Full timestamp for a punch, or None when there was no punch."""
    if value is None:
        return None
    return datetime.combine(work_date, value)


def format_hhmm(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None
