from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_API_BASE_URL, DEFAULT_REPORT_DAYS
from .core.enums import AttendanceBackend, StatisticsBackend
from .shell.controller import register as register_shell
from .students.controller import register as register_students
from .classes.controller import register as register_classes
from .attendance.controller import register as register_attendance
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, **overrides) -> Flask:
    """Build the Flask app.

    `container` lets tests run the UI over in-memory repositories; `overrides`
    are applied on top of the selected settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_BASE_URL"] = getattr(settings, "API_BASE_URL", DEFAULT_API_BASE_URL)
    app.config["API_TIMEOUT"] = getattr(settings, "API_TIMEOUT", None)
    app.config["ATTENDANCE_BACKEND"] = getattr(settings, "ATTENDANCE_BACKEND", AttendanceBackend.SIMULATED.value)
    app.config["REPORT_SOURCE"] = getattr(settings, "REPORT_SOURCE", StatisticsBackend.RANDOM.value)
    app.config["DEFAULT_REPORT_DAYS"] = int(getattr(settings, "DEFAULT_REPORT_DAYS", DEFAULT_REPORT_DAYS))
    app.config.update(overrides)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s api=%s", settings_module, app.config["API_BASE_URL"])

    if container is None:
        container = build_container(
            api_base_url=app.config["API_BASE_URL"],
            api_timeout=app.config["API_TIMEOUT"],
            attendance_backend=AttendanceBackend(app.config["ATTENDANCE_BACKEND"]),
            report_source=StatisticsBackend(app.config["REPORT_SOURCE"]),
        )

    register_shell(app, container)
    register_students(app, container)
    register_classes(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
