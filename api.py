"""Blueprint hosting every resource endpoint under ``FUNCTIONS_PREFIX``.

Domain blueprints are nested here so CORS headers and the JSON error
envelope apply uniformly to all of them.
"""

import os

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from errors import ApiError
from extensions import db
from utils import handle_file_upload

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = current_app.config.get("CORS_ALLOW_ORIGIN", "*")
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,DELETE,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
    return response


@api_bp.errorhandler(ApiError)
def handle_api_error(exc: ApiError):
    db.session.rollback()
    current_app.logger.info("%s %s -> %s: %s", request.method, request.path, exc.status_code, exc.message)
    return jsonify(exc.to_dict()), exc.status_code


@api_bp.errorhandler(HTTPException)
def handle_http_error(exc: HTTPException):
    return jsonify(error=exc.description), exc.code


@api_bp.errorhandler(Exception)
def handle_unexpected_error(exc: Exception):
    db.session.rollback()
    current_app.logger.exception("%s %s failed", request.method, request.path)
    return jsonify(error=str(exc) or "Internal server error"), 500


@api_bp.route("/upload-file", methods=["POST", "OPTIONS"])
def upload_file():
    """Store one multipart ``file`` and return its public relative path."""
    if request.method == "OPTIONS":
        return jsonify(ok=True)

    file = request.files.get("file")
    if file is None or not file.filename:
        raise ApiError("No file found in request")

    folder = current_app.config["UPLOAD_FOLDER"]
    stored = handle_file_upload(file, folder)
    if stored is None:
        raise ApiError("File type not allowed")

    path = f"{current_app.config['UPLOAD_URL_PREFIX'].rstrip('/')}/{stored}"
    current_app.logger.info("upload-file: stored %s", os.path.join(folder, stored))
    return jsonify(success=True, path=path, fileName=stored, originalFileName=file.filename)


from modules.vehicles import bp as vehicles_bp  # noqa: E402
from modules.equipment import bp as equipment_bp  # noqa: E402
from modules.software import bp as software_bp  # noqa: E402
from modules.personnel import bp as personnel_bp  # noqa: E402
from modules.offers import bp as offers_bp  # noqa: E402
from modules.documents import bp as documents_bp  # noqa: E402

for _child in (vehicles_bp, equipment_bp, software_bp, personnel_bp, offers_bp, documents_bp):
    api_bp.register_blueprint(_child)
