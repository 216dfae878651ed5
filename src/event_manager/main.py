from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from config import get_settings_module

from .common.audit import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT, SESSION_TTL_HOURS
from .database.bootstrap import apply_schema, list_tables

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .candidates.controller import register as register_candidates
from .dashboard.controller import register as register_dashboard
from .points.controller import register as register_points

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[2]


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Tests pass a prebuilt ``container`` (in-memory repositories); otherwise
    one is wired against MySQL from the active settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(ROOT_DIR / "templates"), static_folder=str(ROOT_DIR / "static"))

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    ttl_hours = int(getattr(settings, "SESSION_TTL_HOURS", SESSION_TTL_HOURS))
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(hours=ttl_hours)

    configure_logging(getattr(settings, "LOG_FILE", "action.log"), level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if getattr(settings, "TRUST_PROXY", False):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    if container is None:
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(
            db_config=db_config,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_POOL_SIZE)),
            pool_timeout=float(getattr(settings, "DB_POOL_TIMEOUT", DEFAULT_POOL_TIMEOUT)),
            session_backend=getattr(settings, "SESSION_BACKEND", "mysql"),
            session_ttl_hours=ttl_hours,
        )

    app.extensions["event_manager"] = container

    register_auth(app, container)
    register_candidates(app, container)
    register_points(app, container)
    register_attendance(app, container)
    # Page catch-all last.
    register_dashboard(app, container)

    return app
