from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        api_config = getattr(settings, "ATTENDANCE_API")
        container = build_container(
            api_config=api_config,
            split_late_early_dots=bool(getattr(settings, "SPLIT_LATE_EARLY_DOTS", False)),
        )
        if app.config["DEBUG"]:
            app.logger.info(
                "[attendance-calendar] settings=%s api=%s",
                settings_module,
                api_config.get("base_url") or "<not configured>",
            )

    register_attendance(app, container)

    return app
