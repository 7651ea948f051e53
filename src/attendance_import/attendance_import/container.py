from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.reconciler import PersistenceReconciler
from .core.constants import DEFAULT_IMPORT_WORKERS, DEFAULT_MAX_UPLOAD_MB, DEFAULT_WORK_TYPE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeDirectory
from .imports.service import BiometricImportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeDirectory
    attendance_repo: MySQLAttendanceRepository

    reconciler: PersistenceReconciler
    import_service: BiometricImportService


def build_container(
    *,
    db_config: dict,
    max_workers: int = DEFAULT_IMPORT_WORKERS,
    work_type: str = DEFAULT_WORK_TYPE,
    max_upload_mb: int = DEFAULT_MAX_UPLOAD_MB,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeDirectory(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    reconciler = PersistenceReconciler(attendance_repo, max_workers=max_workers, work_type=work_type)
    import_service = BiometricImportService(
        employees_repo,
        reconciler,
        max_upload_bytes=int(max_upload_mb) * 1024 * 1024,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        reconciler=reconciler,
        import_service=import_service,
    )
