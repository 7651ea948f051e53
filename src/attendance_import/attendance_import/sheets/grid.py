from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

Row = Tuple[Optional[str], ...]


@dataclass(frozen=True)
class SheetGrid:
    """First sheet of a workbook as rows of optional text cells.

    Rows may have different lengths (trailing blanks are often trimmed by the
    exporting terminal). Use ``cell()`` / ``text()`` instead of indexing so an
    out-of-range position simply reads as an empty string.
    """

    rows: Tuple[Row, ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Optional[object]]]) -> "SheetGrid":
        return cls(rows=tuple(tuple(_as_text(v) for v in row) for row in rows))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def cell(self, row: int, col: int) -> str:
        if row < 0 or row >= len(self.rows):
            return ""
        return cell_text(self.rows[row], col)


def cell_text(row: Sequence[Optional[str]], col: int) -> str:
    """Trimmed text at ``col`` or ``""`` for blanks and out-of-range columns."""
    if col < 0 or col >= len(row):
        return ""
    value = row[col]
    return value.strip() if value else ""


def row_texts(row: Sequence[Optional[str]]) -> list[str]:
    return [cell_text(row, i) for i in range(len(row))]


def joined_lower(row: Sequence[Optional[str]]) -> str:
    return " ".join(t for t in row_texts(row) if t).lower()


def _as_text(value: Optional[object]) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None
