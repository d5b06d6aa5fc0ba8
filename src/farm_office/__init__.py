"""Farm office back end.

The package is organized by feature modules (farms, workers, work logs,
payroll, ...) with a thin Flask controller layer on top of service and
repository layers.
"""
from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .common.logging_setup import configure_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_admin_user, list_tables
from .farms.controller import register as register_farms
from .payroll.controller import register as register_payroll
from .service_types.controller import register as register_service_types
from .settings import get_settings_module
from .users.controller import register as register_users
from .workers.controller import register as register_workers
from .worklogs.controller import register as register_work_logs

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    """Application factory.

    ``container`` lets callers (tests, scripts) supply their own repositories;
    when omitted the MySQL container is built from the settings and the
    database is initialized as configured.
    """
    load_dotenv(override=False)
    configure_logging()
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False) and getattr(settings, "ADMIN_PASSWORD", ""):
            ensure_admin_user(
                db_config,
                login=getattr(settings, "ADMIN_LOGIN", "admin"),
                password=getattr(settings, "ADMIN_PASSWORD"),
            )

        container = build_container(db_config=db_config)

    @app.route("/api", methods=["GET"], endpoint="health")
    def health():
        return "API do Sistema Agrícola funcionando!"

    register_users(app, container)
    register_farms(app, container)
    register_service_types(app, container)
    register_workers(app, container)
    register_work_logs(app, container)
    register_payroll(app, container)

    return app
