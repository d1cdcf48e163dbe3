from flask import Flask, send_from_directory
from dotenv import load_dotenv
import os

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db  # noqa: E402  (load_dotenv needs to run first)


def create_app(config_overrides: dict | None = None) -> Flask:
    """Application factory for the ERP backend."""

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # init extensions
    db.init_app(app)

    # blueprints: every domain module is nested under the api blueprint
    from api import api_bp

    app.register_blueprint(api_bp, url_prefix=app.config["FUNCTIONS_PREFIX"])

    # uploaded files are served back from the same relative path the upload returned
    upload_folder = app.config.get("UPLOAD_FOLDER", "uploads")
    url_prefix = app.config.get("UPLOAD_URL_PREFIX", "/enterprisefiles").rstrip("/")

    @app.route(f"{url_prefix}/<path:filename>")
    def uploaded_file(filename):
        return send_from_directory(os.path.abspath(upload_folder), filename)

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401
        from modules.vehicles import models as vehicle_models  # noqa: F401
        from modules.equipment import models as equipment_models  # noqa: F401
        from modules.software import models as software_models  # noqa: F401
        from modules.personnel import models as personnel_models  # noqa: F401
        from modules.offers import models as offer_models  # noqa: F401
        from modules.documents import models as document_models  # noqa: F401

        db.create_all()

    os.makedirs(upload_folder, exist_ok=True)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
