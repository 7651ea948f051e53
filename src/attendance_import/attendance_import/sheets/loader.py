from __future__ import annotations

import codecs
import io
import logging
from datetime import date, datetime, time
from typing import Any, Optional

import pandas as pd

from ..common.validators import require_supported_extension
from ..core.exceptions import IngestionError
from .grid import SheetGrid

logger = logging.getLogger(__name__)

_EXCEL_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}
_CSV_ENCODINGS = ("utf-8-sig", "cp1252")


def load_sheet_grid(filename: str, data: bytes) -> SheetGrid:
    """Decode the first sheet of an uploaded workbook into a SheetGrid."""
    suffix = require_supported_extension(filename)
    if suffix == ".csv":
        rows = _read_csv_rows(data)
    else:
        rows = _read_excel_rows(data, engine=_EXCEL_ENGINES[suffix])
    logger.debug("loaded %s: %d rows", filename, len(rows))
    return SheetGrid.from_rows(rows)


def _read_excel_rows(data: bytes, *, engine: str) -> list[list[Optional[str]]]:
    try:
        df = pd.read_excel(
            io.BytesIO(data),
            sheet_name=0,
            header=None,
            dtype=object,
            engine=engine,
        )
    except Exception as e:
        raise IngestionError(f"Could not read workbook: {e}") from e
    return [[render_cell(v) for v in record] for record in df.itertuples(index=False, name=None)]


def _decode_csv(data: bytes) -> str:
    # Without a BOM, utf-16 would "decode" almost any even-length byte string.
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        encodings = ("utf-16",)
    else:
        encodings = _CSV_ENCODINGS
    for encoding in encodings:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise IngestionError("Could not decode CSV file")


def _read_csv_rows(data: bytes) -> list[list[Optional[str]]]:
    text = _decode_csv(data)

    # Terminal exports are ragged (header blocks are narrower than data rows);
    # size the frame to the widest line so short rows are padded, not rejected.
    width = max((line.count(",") for line in text.splitlines()), default=0) + 1
    try:
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            names=range(width),
            dtype=object,
            keep_default_na=False,
            skip_blank_lines=False,
        )
    except Exception as e:
        raise IngestionError(f"Could not read CSV file: {e}") from e
    return [[render_cell(v) for v in record] for record in df.itertuples(index=False, name=None)]


def render_cell(value: Any) -> Optional[str]:
    """Render one decoded cell value as text the normalizers understand.

    - NaN / None -> None
    - integral floats -> "7" (not "7.0"), other floats keep their repr
    - datetimes -> ISO date, plus time when it is not midnight
    - times -> HH:MM
    """

    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (datetime, pd.Timestamp)):
        if pd.isna(value):
            return None
        if value.hour == 0 and value.minute == 0 and value.second == 0:
            return value.strftime("%Y-%m-%d")
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, float):
        if pd.isna(value):
            return None
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    if pd.isna(value):
        return None
    return str(value)
