from __future__ import annotations

import importlib
from pathlib import Path
from urllib.parse import urlsplit

from dotenv import load_dotenv
from flask import Flask, make_response, redirect, request, url_for

from config import get_settings_module

from .common import formatting
from .container import Container, build_container
from .core.constants import DEFAULT_EMPLOYEE_PASSWORD, THEME_COOKIE, THEMES
from .core.logging import configure_logging, get_logger
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .database.connection import DBConfig
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .users.access import current_view
from .users.controller import register as register_users

logger = get_logger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _bootstrap_database(settings, db_config: dict) -> None:
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_demo_users(db_config)
        logger.info("Demo seed ready")


def _same_site_referrer() -> str | None:
    """The Referer header when it points back at this host, else None."""
    referrer = request.referrer
    if not referrer:
        return None
    parts = urlsplit(referrer)
    if parts.scheme not in ("", "http", "https") or parts.netloc not in ("", request.host):
        return None
    return referrer


def _register_shell(app: Flask) -> None:
    """Template globals, theme preference and the catch-all redirect."""

    app.add_template_filter(formatting.initials, "initials")
    app.add_template_filter(formatting.format_currency, "currency")
    app.add_template_filter(formatting.format_date, "us_date")
    app.add_template_filter(formatting.or_fallback, "or_fallback")
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.context_processor
    def inject_shell():
        theme = request.cookies.get(THEME_COOKIE, THEMES[0])
        return {
            "current_view": current_view(),
            "theme": theme if theme in THEMES else THEMES[0],
        }

    @app.route("/theme", methods=["POST"], endpoint="toggle_theme")
    def toggle_theme():
        current = request.cookies.get(THEME_COOKIE, THEMES[0])
        next_theme = "light" if current == "dark" else "dark"
        response = make_response(redirect(_same_site_referrer() or url_for("dashboard")))
        response.set_cookie(THEME_COOKIE, next_theme, max_age=365 * 24 * 3600, samesite="Lax")
        return response

    @app.errorhandler(404)
    def not_found(_):
        return redirect(url_for("dashboard"))


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())
        _bootstrap_database(settings, db_config)
        container = build_container(
            db_config=db_config,
            default_password=getattr(settings, "DEFAULT_EMPLOYEE_PASSWORD", DEFAULT_EMPLOYEE_PASSWORD),
        )

    _register_shell(app)
    register_users(app, container)
    register_dashboard(app, container)
    register_employees(app, container)
    register_departments(app, container)

    return app
