from __future__ import annotations

import logging
import threading
from collections import Counter
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import combine_optional
from ..core.constants import DEFAULT_IMPORT_WORKERS, DEFAULT_WORK_TYPE
from ..core.enums import StatusTag, UpsertOutcome
from ..employees.model import MatchedRow
from .model import ImportSummary
from .repository import AttendanceImportRepository

logger = logging.getLogger(__name__)


def importable_rows(rows: Iterable[MatchedRow]) -> list[MatchedRow]:
    """Matched rows that will be written; weekly-off days are never imported."""
    return [r for r in rows if r.employee_id is not None and r.status != StatusTag.WEEKLY_OFF]


def group_by_key(rows: Iterable[MatchedRow]) -> dict[tuple[int, date], list[MatchedRow]]:
    groups: dict[tuple[int, date], list[MatchedRow]] = {}
    for r in rows:
        groups.setdefault((r.employee_id, r.date), []).append(r)
    return groups


class PersistenceReconciler:
    """Idempotent upsert of matched rows keyed by (employee_id, date).

    Distinct keys are written concurrently by a small worker pool. Rows sharing
    a key run one after another in file order inside a single task, so the
    last row in the file wins and no duplicate record can be created.
    """

    def __init__(
        self,
        store: AttendanceImportRepository,
        *,
        max_workers: int = DEFAULT_IMPORT_WORKERS,
        work_type: str = DEFAULT_WORK_TYPE,
    ):
        self._store = store
        self._max_workers = max(1, int(max_workers))
        self._work_type = work_type

    def upsert(self, row: MatchedRow) -> UpsertOutcome:
        check_in = combine_optional(row.date, row.check_in)
        check_out = combine_optional(row.date, row.check_out)
        try:
            existing_id = self._store.find_id(row.employee_id, row.date)
            if existing_id is not None:
                fields = {"status": row.status, "notes": row.notes}
                if check_in is not None:
                    fields["check_in"] = check_in
                if check_out is not None:
                    fields["check_out"] = check_out
                if self._store.update_fields(existing_id, fields):
                    return UpsertOutcome.UPDATED
                logger.warning("attendance %s vanished before update (employee=%s date=%s)", existing_id, row.employee_id, row.date)
                return UpsertOutcome.SKIPPED

            self._store.insert(
                employee_id=row.employee_id,
                work_date=row.date,
                status=row.status,
                check_in=check_in,
                check_out=check_out,
                notes=row.notes,
                work_type=self._work_type,
            )
            return UpsertOutcome.INSERTED
        except Exception:
            logger.warning("skipping attendance row employee=%s date=%s", row.employee_id, row.date, exc_info=True)
            return UpsertOutcome.SKIPPED

    def _write_key(self, rows: Sequence[MatchedRow], cancel: Optional[threading.Event]) -> list[UpsertOutcome]:
        outcomes: list[UpsertOutcome] = []
        for row in rows:
            if cancel is not None and cancel.is_set():
                break
            outcomes.append(self.upsert(row))
        return outcomes

    def reconcile(self, rows: Sequence[MatchedRow], *, cancel: Optional[threading.Event] = None) -> ImportSummary:
        unmatched = sum(1 for r in rows if r.employee_id is None)
        groups = group_by_key(importable_rows(rows))
        counts: Counter = Counter()

        if groups:
            workers = min(self._max_workers, len(groups))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="attendance-import") as pool:
                futures: list[Future] = [pool.submit(self._write_key, key_rows, cancel) for key_rows in groups.values()]
                for fut in as_completed(futures):
                    if fut.cancelled():
                        continue
                    counts.update(fut.result())
                    if cancel is not None and cancel.is_set():
                        for pending in futures:
                            pending.cancel()

        summary = ImportSummary(
            inserted=counts[UpsertOutcome.INSERTED],
            updated=counts[UpsertOutcome.UPDATED],
            skipped=counts[UpsertOutcome.SKIPPED],
            unmatched=unmatched,
        )
        logger.info(
            "attendance import: inserted=%d updated=%d skipped=%d unmatched=%d",
            summary.inserted,
            summary.updated,
            summary.skipped,
            summary.unmatched,
        )
        return summary
