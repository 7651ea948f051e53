from __future__ import annotations

from pathlib import PurePath

from ..core.constants import SUPPORTED_EXTENSIONS
from ..core.exceptions import ValidationError


def require_supported_extension(filename: str) -> str:
    suffix = PurePath(filename or "").suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ValidationError("Please upload an XLS, XLSX or CSV file")
    return suffix


def require_non_empty_upload(data: bytes, *, max_bytes: int | None = None) -> bytes:
    if not data:
        raise ValidationError("Uploaded file is empty")
    if max_bytes is not None and len(data) > max_bytes:
        raise ValidationError(f"Uploaded file exceeds {max_bytes // (1024 * 1024)} MB")
    return data
