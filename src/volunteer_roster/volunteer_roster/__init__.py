"""Volunteer roster package.

This package is organized by feature modules (volunteers, attendance,
statistics, ...) with a thin Flask controller layer over service/repository
layers. The backing store is a Google spreadsheet.
"""
from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .container import Container, build_container
from .health_controller import register as register_health
from .attendance.controller import register as register_attendance
from .statistics.controller import register as register_statistics
from .volunteers.controller import register as register_volunteers

logger = logging.getLogger(__name__)


def _log_settings(settings_module: str, settings) -> None:
    sheets = getattr(settings, "SHEETS_CONFIG", {})
    has_key = bool(sheets.get("service_account_json") or (sheets.get("client_email") and sheets.get("private_key")))
    logger.info("settings=%s", settings_module)
    logger.info("spreadsheet id present: %s", bool(sheets.get("spreadsheet_id")))
    logger.info("service account credentials present: %s", has_key)
    logger.info("statistics export configured: %s", bool(getattr(settings, "STATS_EXPORT_URL", "")))
    if not has_key or not sheets.get("spreadsheet_id"):
        logger.warning("Spreadsheet backend is not fully configured; API calls will fail until it is")


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", "*"))

    if container is None:
        _log_settings(settings_module, settings)
        container = build_container(settings=settings)

    register_health(app)
    register_volunteers(app, container)
    register_attendance(app, container)
    register_statistics(app, container)

    return app
