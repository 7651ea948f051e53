import os


def _env_bool(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    """Shared defaults; environment modules override what differs."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "hrms_db")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Biometric import
    IMPORT_MAX_WORKERS = int(os.environ.get("IMPORT_MAX_WORKERS", "4"))
    IMPORT_WORK_TYPE = os.environ.get("IMPORT_WORK_TYPE", "office")
    IMPORT_MAX_UPLOAD_MB = int(os.environ.get("IMPORT_MAX_UPLOAD_MB", "10"))

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
