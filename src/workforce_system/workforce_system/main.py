from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .advances.controller import register as register_advances
from .container import Container, build_container
from .payroll.controller import register as register_payroll
from .schedules.model import ProductivityOptions

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        default_options = ProductivityOptions(
            permission_time_minutes=float(getattr(settings, "DEFAULT_PERMISSION_MINUTES", 15)),
            filtered_batch=str(getattr(settings, "DEFAULT_BATCH_NAME", "Full Time")),
        )
        container = build_container(db_config=db_config, default_options=default_options)

    register_payroll(app, container)
    register_advances(app, container)

    return app
