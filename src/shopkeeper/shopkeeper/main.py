from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .assistant.controller import register as register_assistant
from .attendance.controller import register as register_attendance
from .container import build_container
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .storage.store import Store

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def load_settings() -> Any:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_app(settings: Optional[Any] = None, *, store: Optional[Store] = None) -> Flask:
    settings = settings or load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()
    logger.info("settings=%s storage=%s", getattr(settings, "__name__", type(settings).__name__), backend)

    if store is None and backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        db_config = getattr(settings, "DB_CONFIG")
        apply_schema(db_config)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(settings, store=store)
    app.extensions["shopkeeper"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_dashboard(app, container)
    register_assistant(app, container)

    return app
