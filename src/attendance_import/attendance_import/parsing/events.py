from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger("attendance_import.parsing")

EventSink = Callable[[str, dict], None]


def logging_sink(event: str, payload: dict[str, Any]) -> None:
    """Default sink: scan diagnostics as DEBUG log records."""
    if logger.isEnabledFor(logging.DEBUG):
        details = " ".join(f"{k}={v!r}" for k, v in payload.items())
        logger.debug("%s %s", event, details)


class CollectingSink:
    """Keeps every event in memory; handy for previews and tests."""

    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def __call__(self, event: str, payload: dict) -> None:
        self.events.append((event, dict(payload)))

    def count(self, event: str) -> int:
        return sum(1 for name, _ in self.events if name == event)
