from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import load_settings

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_DATA_FILE, DEFAULT_SUBJECT
from .metrics.controller import register as register_metrics
from .roster.controller import register as register_roster

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATA_FILE"] = getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE)
    app.config["DEFAULT_SUBJECT"] = getattr(settings, "DEFAULT_SUBJECT", DEFAULT_SUBJECT)
    app.config["HOST"] = getattr(settings, "HOST", "127.0.0.1")
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s data_file=%s", settings.__name__, app.config["DATA_FILE"])

    if container is None:
        container = build_container(
            data_file=app.config["DATA_FILE"],
            default_subject=app.config["DEFAULT_SUBJECT"],
        )

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_roster(app, container)
    register_attendance(app, container)
    register_metrics(app, container)

    return app
