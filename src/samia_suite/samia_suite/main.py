from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from functools import partial
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, g
from werkzeug.security import generate_password_hash

from config import get_settings_module

from .common.web import current_site, nav_for
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .core.enums import Site
from .database.bootstrap import apply_schema, list_tables, seed_directory
from .database.connection import DatabaseConnection, DBConfig
from .storage.mysql_store import MySQLKeyValueStore
from .storage.session_storage import FlaskSessionStorage

from .apartments.controller import register as register_apartments
from .cash.controller import register as register_cash
from .laundry.controller import register as register_laundry
from .meals.controller import register as register_meals
from .messages.controller import register as register_messages
from .reports.controller import register as register_reports
from .staff.controller import register as register_staff
from .stock.controller import register as register_stock
from .users.controller import register as register_users
from .vouchers.controller import register as register_vouchers

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def _build_default_container(settings, *, hash_password) -> Container:
    db_config = getattr(settings, "DB_CONFIG")
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        count = seed_directory(db_config, hash_password=hash_password)
        logger.info("Directory ready (accounts=%d)", count)

    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_container(
        store=MySQLKeyValueStore(conn),
        durable=FlaskSessionStorage("durable", permanent=True),
        ephemeral=FlaskSessionStorage("tab", permanent=False),
        hash_password=hash_password,
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Settings %s", settings_module)

    if container is None:
        method = getattr(settings, "PASSWORD_HASH_METHOD", "scrypt")
        container = _build_default_container(settings, hash_password=partial(generate_password_hash, method=method))
        logger.info("Store %s", DBConfig.from_mapping(getattr(settings, "DB_CONFIG")).describe())

    app.extensions["samia_suite"] = container

    @app.before_request
    def load_current_user():
        g.current_user = container.session_service.current_user()

    @app.context_processor
    def inject_layout():
        user = g.get("current_user")
        if user is None:
            return {"current_user": None}
        return {
            "current_user": user,
            "active_site": current_site(),
            "operational_sites": Site.operational(),
            "navigation": nav_for(user),
            "unread_count": container.message_service.unread_count(user),
        }

    register_users(app, container)
    register_reports(app, container)
    register_stock(app, container)
    register_meals(app, container)
    register_vouchers(app, container)
    register_apartments(app, container)
    register_laundry(app, container)
    register_staff(app, container)
    register_cash(app, container)
    register_messages(app, container)

    return app
