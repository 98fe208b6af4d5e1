"""Employee Management package.

This package is organized by feature modules (users, tasks, documents,
appointments, feedback, messages, calendars) with a thin Flask controller layer
over service/repository layers backed by Flask-SQLAlchemy.
"""
from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from config import get_settings_module

from .common.errors import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_CORS_ORIGIN, DEFAULT_UPLOAD_DIR
from .database.bootstrap import apply_schema, ensure_admin_account, list_tables, schema_ready
from .extensions import cors, db

from .appointments.controller import register as register_appointments
from .calendars.controller import register as register_calendars
from .documents.controller import register as register_documents
from .feedback.controller import register as register_feedback
from .messages.controller import register as register_messages
from .tasks.controller import register as register_tasks
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

CONTAINER_KEY = "employee_management.container"


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger("employee_management").setLevel(level)
    app.logger.setLevel(level)


def get_container(app: Flask) -> Container:
    return app.extensions[CONTAINER_KEY]


def create_app(config_overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    if config_overrides:
        app.config.update(config_overrides)

    _configure_logging(app)
    logger.info("settings=%s db=%s", settings_module, db_label(app.config.get("SQLALCHEMY_DATABASE_URI", "")))

    db.init_app(app)
    cors.init_app(app, origins=[app.config.get("CORS_ORIGIN", DEFAULT_CORS_ORIGIN)])

    container = build_container(upload_dir=app.config.get("UPLOAD_DIR", DEFAULT_UPLOAD_DIR))
    app.extensions[CONTAINER_KEY] = container

    with app.app_context():
        if app.config.get("AUTO_INIT_DB"):
            apply_schema()
            logger.debug("schema ready (tables=%d)", len(list_tables()))
        if schema_ready():
            ensure_admin_account(container.credentials_repo, container.users_repo)
        else:
            logger.warning("Tables missing; run scripts/init_db.py to create them and seed the admin account")

    register_error_handlers(app)
    register_users(app, container)
    register_tasks(app, container)
    register_documents(app, container)
    register_appointments(app, container)
    register_feedback(app, container)
    register_messages(app, container)
    register_calendars(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "healthy", "service": "employee-management"})

    return app


def db_label(uri: str) -> str:
    """Database URL with the password masked, for startup logs."""
    try:
        return make_url(uri).render_as_string(hide_password=True)
    except ArgumentError:
        return "<unparseable>"
