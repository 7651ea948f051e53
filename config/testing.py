from config.config import Config

SECRET_KEY = "test-secret"

DB_CONFIG = Config.db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False

# Single worker keeps test runs deterministic.
IMPORT_MAX_WORKERS = 1
IMPORT_WORK_TYPE = "office"
IMPORT_MAX_UPLOAD_MB = Config.IMPORT_MAX_UPLOAD_MB
