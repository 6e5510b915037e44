from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .communications.controller import register as register_communications
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .grades.controller import register as register_grades
from .parents.controller import register as register_parents
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(*, settings_module: str | None = None, container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_config = getattr(settings, "DB_CONFIG", None)
    backend = str(getattr(settings, "STORAGE_BACKEND", "mysql")).lower()

    if container is None:
        if backend == "mysql":
            logger.info(
                "settings=%s backend=mysql db=%s@%s:%s/%s",
                settings_module,
                db_config.get("user"),
                db_config.get("host"),
                db_config.get("port", 3306),
                db_config.get("database"),
            )
            if bool(getattr(settings, "AUTO_INIT_DB", False)):
                apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
                logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
            if bool(getattr(settings, "AUTO_SEED_DB", False)):
                apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
                logger.info("Demo seed ready")
        else:
            logger.info("settings=%s backend=%s", settings_module, backend)
        container = build_container(db_config=db_config, backend=backend)

    app.extensions["scholarhub.container"] = container
    register_error_handlers(app)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "backend": container.backend})

    register_students(app, container)
    register_parents(app, container)
    register_communications(app, container)
    register_grades(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
