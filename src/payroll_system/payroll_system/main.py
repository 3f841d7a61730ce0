from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import STORAGE_MYSQL, build_container
from .database.bootstrap import apply_schema, list_tables
from .payroll.calculator.salary_calculator import CalculatorOptions
from .payroll.controller import register as register_payroll
from .workers.controller import register as register_workers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    storage_backend = getattr(settings, "STORAGE_BACKEND", STORAGE_MYSQL)
    db_config = getattr(settings, "DB_CONFIG", None)

    logger.info("settings=%s storage=%s", settings_module, storage_backend)
    if storage_backend == STORAGE_MYSQL and db_config:
        logger.info(
            "db=%s@%s:%s/%s",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        storage_backend=storage_backend,
        db_config=db_config,
        memory_store_path=getattr(settings, "MEMORY_STORE_PATH", None),
        calculator_options=CalculatorOptions(
            include_bonus=bool(getattr(settings, "INCLUDE_BONUS", True)),
            include_overtime=bool(getattr(settings, "INCLUDE_OVERTIME", True)),
            include_late_deduction=bool(getattr(settings, "INCLUDE_LATE_DEDUCTION", True)),
        ),
        default_overtime=bool(getattr(settings, "DEFAULT_OVERTIME", False)),
    )
    app.extensions["payroll_container"] = container

    register_workers(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    @app.route("/api/health", endpoint="health")
    def health():
        return jsonify({"success": True, "storage": container.storage_backend})

    return app
