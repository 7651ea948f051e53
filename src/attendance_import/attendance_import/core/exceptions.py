class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when an upload is rejected before any parsing happens."""


class IngestionError(DomainError):
    """Raised when a workbook cannot be turned into attendance records."""


class NoAttendanceRecordsError(IngestionError):
    """Raised when a workbook yields zero attendance rows."""

    def __init__(self, message: str = "No attendance records found in file"):
        super().__init__(message)
