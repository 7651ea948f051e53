import os

from config.config import Config, _env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = Config.db_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = _env_bool("AUTO_INIT_DB", "0")

IMPORT_MAX_WORKERS = Config.IMPORT_MAX_WORKERS
IMPORT_WORK_TYPE = Config.IMPORT_WORK_TYPE
IMPORT_MAX_UPLOAD_MB = Config.IMPORT_MAX_UPLOAD_MB
