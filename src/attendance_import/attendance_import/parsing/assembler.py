"""Single forward scan turning a SheetGrid into ParsedAttendanceRow values.

The scan is a fold: ``step(context, row)`` returns the next context and at most
one parsed row. Row N may depend on every row before it (current employee,
current column map), so the scan is sequential by nature.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from ..core.enums import RowKind
from ..sheets.grid import SheetGrid, cell_text
from .classifier import (
    CellRow,
    ColumnMap,
    classify_row,
    extract_employee_code,
    extract_employee_name,
    find_status_text,
    join_remarks,
    rebuild_column_map,
)
from .events import EventSink, logging_sink
from .model import ParsedAttendanceRow
from .normalizer import normalize_date, normalize_status, normalize_time


@dataclass(frozen=True)
class ParseContext:
    current_code: str = ""
    current_name: str = ""
    column_map: ColumnMap = field(default_factory=ColumnMap)
    # Set by an employee-code row; a name row alone does not open a block.
    in_block: bool = False

    @property
    def has_employee(self) -> bool:
        return self.in_block

    @property
    def display_name(self) -> str:
        return self.current_name or f"Employee {self.current_code}"


def step(
    ctx: ParseContext,
    row: CellRow,
    *,
    row_index: int = -1,
    sink: EventSink = logging_sink,
) -> tuple[ParseContext, Optional[ParsedAttendanceRow]]:
    kind = classify_row(row)

    if kind == RowKind.EMPLOYEE_CODE:
        code = extract_employee_code(row)
        name = extract_employee_name(row, code=code)
        sink("employee_context", {"row": row_index, "code": code, "name": name})
        return replace(ctx, current_code=code, current_name=name, in_block=True), None

    if kind == RowKind.EMPLOYEE_NAME:
        name = extract_employee_name(row, code=ctx.current_code)
        sink("employee_name", {"row": row_index, "name": name})
        return replace(ctx, current_name=name or ctx.current_name), None

    if kind == RowKind.COLUMN_HEADER:
        columns = rebuild_column_map(row, ctx.column_map)
        sink("column_map", {"row": row_index, "columns": columns})
        return replace(ctx, column_map=columns), None

    if kind in (RowKind.NOISE, RowKind.BLANK):
        return ctx, None

    return ctx, _assemble(ctx, row, row_index=row_index, sink=sink)


def _assemble(ctx: ParseContext, row: CellRow, *, row_index: int, sink: EventSink) -> Optional[ParsedAttendanceRow]:
    columns = ctx.column_map
    if not ctx.has_employee:
        sink("row_dropped", {"row": row_index, "reason": "no_employee_context"})
        return None

    work_date = normalize_date(cell_text(row, columns.date))
    if work_date is None:
        sink("row_dropped", {"row": row_index, "reason": "unparseable_date", "cell": cell_text(row, columns.date)})
        return None

    raw_status = find_status_text(row, columns)
    if not raw_status:
        sink("row_dropped", {"row": row_index, "reason": "missing_status", "date": work_date})
        return None

    return ParsedAttendanceRow(
        employee_code=ctx.current_code,
        employee_name=ctx.display_name,
        date=work_date,
        check_in=normalize_time(cell_text(row, columns.in_time)),
        check_out=normalize_time(cell_text(row, columns.out_time)),
        shift=cell_text(row, columns.shift),
        total_duration=cell_text(row, columns.duration),
        status=normalize_status(raw_status),
        raw_status=raw_status,
        remarks=join_remarks(row, columns),
    )


def parse_grid(grid: SheetGrid, *, sink: Optional[EventSink] = None) -> list[ParsedAttendanceRow]:
    emit = sink or logging_sink
    ctx = ParseContext()
    out: list[ParsedAttendanceRow] = []
    for idx, row in enumerate(grid):
        ctx, parsed = step(ctx, row, row_index=idx, sink=emit)
        if parsed is not None:
            out.append(parsed)
    emit("scan_complete", {"rows": len(grid), "parsed": len(out)})
    return out
