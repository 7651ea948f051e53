from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_IMPORT_WORKERS, DEFAULT_MAX_UPLOAD_MB, DEFAULT_WORK_TYPE
from .database.bootstrap import apply_schema, list_tables
from .imports.controller import register as register_imports

logger = logging.getLogger("attendance_import")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    max_upload_mb = int(getattr(settings, "IMPORT_MAX_UPLOAD_MB", DEFAULT_MAX_UPLOAD_MB))
    # Leave headroom for multipart framing; the service enforces the exact file limit.
    app.config["MAX_CONTENT_LENGTH"] = (max_upload_mb + 1) * 1024 * 1024

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        db_config=db_config,
        max_workers=int(getattr(settings, "IMPORT_MAX_WORKERS", DEFAULT_IMPORT_WORKERS)),
        work_type=str(getattr(settings, "IMPORT_WORK_TYPE", DEFAULT_WORK_TYPE)),
        max_upload_mb=max_upload_mb,
    )

    register_imports(app, container)

    return app
