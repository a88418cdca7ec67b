from __future__ import annotations

import importlib
import logging
from typing import Callable, List, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .assistant.client import GeminiTextGenerator
from .assistant.controller import register as register_assistant
from .attendance.controller import register as register_attendance
from .audit.controller import register as register_audit
from .common.datetime_utils import now_local
from .container import Container, build_container
from .core.exceptions import DomainError, ServiceUnavailableError
from .database.bootstrap import StartupTasks, apply_schema, list_tables
from .database.seed import seed_demo_data
from .gamification.controller import register as register_gamification
from .leaves.controller import register as register_leaves
from .salaries.controller import register as register_salaries
from .users.controller import register as register_users

log = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["Content-Type", "Authorization", "X-User-ID"]
CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


def _install_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        return jsonify({"message": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def _unexpected_error(e: Exception):
        log.exception("unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": "Internal server error."}), 500


def _startup_steps(settings, container: Container, db_config: dict) -> List[Callable[[], None]]:
    steps: List[Callable[[], None]] = []
    timezone = getattr(settings, "TIMEZONE", None)

    if container.backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        def _schema():
            apply_schema(db_config)
            log.info(
                "schema ready on %s@%s:%s/%s (tables=%d)",
                db_config.get("user"),
                db_config.get("host"),
                db_config.get("port", 3306),
                db_config.get("database"),
                len(list_tables(db_config)),
            )

        steps.append(_schema)

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        steps.append(lambda: seed_demo_data(container, today=now_local(timezone).date()))

    return steps


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", 5 * 1024 * 1024))
    app.config["CORS_ORIGIN"] = getattr(settings, "CORS_ORIGIN", "*")

    startup = StartupTasks()
    if container is None:
        backend = getattr(settings, "STORE_BACKEND", "mysql")
        db_config = dict(getattr(settings, "DB_CONFIG", {}))
        log.info("settings=%s backend=%s", settings_module, backend)

        api_key = getattr(settings, "API_KEY", None)
        generator = None
        if api_key:
            generator = GeminiTextGenerator(
                api_key,
                model=getattr(settings, "AI_MODEL", "gemini-2.5-flash"),
                timeout=float(getattr(settings, "AI_TIMEOUT", 30.0)),
            )
        else:
            log.warning("API_KEY is not set; the AI assistant is disabled")

        container = build_container(
            backend=backend,
            db_config=db_config,
            timezone=getattr(settings, "TIMEZONE", None),
            text_generator=generator,
        )
        startup = StartupTasks(_startup_steps(settings, container, db_config))

    try:
        startup.run()
    except ServiceUnavailableError:
        log.warning("store unavailable at startup; preparation will be retried on the next request")

    app.extensions["hr_portal"] = container
    app.extensions["hr_portal.startup"] = startup

    CORS(
        app,
        origins=app.config["CORS_ORIGIN"],
        allow_headers=CORS_ALLOW_HEADERS,
        methods=CORS_METHODS,
    )
    _install_error_handlers(app)

    @app.before_request
    def _ensure_store_ready():
        if request.method != "OPTIONS":
            startup.run()

    register_users(app, container)
    register_attendance(app, container)
    register_salaries(app, container)
    register_leaves(app, container)
    register_gamification(app, container)
    register_audit(app, container)
    register_assistant(app, container)

    return app
