from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from ..container import Container
from ..core.exceptions import IngestionError, ValidationError

logger = logging.getLogger(__name__)

PREVIEW_ROW_LIMIT = 200
TOO_LARGE_MESSAGE = "File is too large"


def register(app: Flask, container: Container) -> None:
    def _read_upload():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise ValidationError("Please choose a file to upload")
        return secure_filename(upload.filename) or upload.filename, upload.read()

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/api/attendance/biometric/preview", methods=["POST"], endpoint="biometric_preview")
    def biometric_preview():
        try:
            filename, data = _read_upload()
            preview = container.import_service.preview(filename, data)
            return jsonify({"success": True, "preview": preview.to_dict(row_limit=PREVIEW_ROW_LIMIT)}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except IngestionError as e:
            return _error(str(e), 422)
        except RequestEntityTooLarge:
            return _error(TOO_LARGE_MESSAGE, 413)
        except Exception:
            logger.exception("biometric preview failed")
            return _error("Could not read attendance report", 500)

    @app.route("/api/attendance/biometric/import", methods=["POST"], endpoint="biometric_import")
    def biometric_import():
        try:
            filename, data = _read_upload()
            preview, summary = container.import_service.import_file(filename, data)
            return jsonify(
                {
                    "success": True,
                    "message": "Attendance data imported successfully",
                    "preview": preview.to_dict(row_limit=0),
                    "summary": summary.to_dict(),
                }
            ), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except IngestionError as e:
            return _error(str(e), 422)
        except RequestEntityTooLarge:
            return _error(TOO_LARGE_MESSAGE, 413)
        except Exception:
            logger.exception("biometric import failed")
            return _error("Could not import attendance report", 500)
