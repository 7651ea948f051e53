import os

from config.config import Config, _env_bool

SECRET_KEY = Config.SECRET_KEY

DB_CONFIG = Config.db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = _env_bool("AUTO_INIT_DB", "1")

IMPORT_MAX_WORKERS = Config.IMPORT_MAX_WORKERS
IMPORT_WORK_TYPE = Config.IMPORT_WORK_TYPE
IMPORT_MAX_UPLOAD_MB = Config.IMPORT_MAX_UPLOAD_MB
