"""Attendance Dashboard package.

Organized by feature modules (employees, attendance, reports) with a thin
Flask JSON controller layer over service/repository layers.
"""
from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .config.settings import Settings, load_settings
from .container import Container, build_container
from .core.exceptions import NotConfiguredError
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")


def _register_health(app: Flask) -> None:
    @app.route("/healthz", methods=["GET"], endpoint="healthz")
    def healthz():
        return jsonify({"status": "ok"})


def _not_configured_app(error: NotConfiguredError) -> Flask:
    """App that answers every request with 500 until configuration is fixed."""
    app = Flask(__name__)

    @app.before_request
    def refuse():
        return jsonify({"error": f"Server misconfigured: {error}"}), 500

    return app


def create_app(settings: Optional[Settings] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    try:
        settings = settings or load_settings()
    except NotConfiguredError as e:
        _configure_logging("INFO")
        logger.critical("Startup configuration error: %s", e)
        return _not_configured_app(e)

    _configure_logging(settings.log_level)

    if container is None:
        try:
            container = build_container(settings)
            if settings.auto_init_db and container.conn is not None:
                apply_schema(container.conn)
                logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))
        except NotConfiguredError as e:
            logger.critical("Startup configuration error: %s", e)
            return _not_configured_app(e)

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["DEBUG"] = settings.debug
    app.json.sort_keys = False

    logger.debug("settings=%s db=%s", settings.module_name, _describe_db(settings.db_config))

    _register_health(app)
    register_employees(app, container, session_days=settings.session_days)
    register_attendance(app, container)
    register_reports(app, container)

    return app


def _describe_db(db_config: dict) -> str:
    return f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
