from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .payroll.controller import register as register_payroll
from .rules.loader import load_pay_rules
from .rules.model import PayRules

logger = logging.getLogger(__name__)


def create_app(*, rules: Optional[PayRules] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s", settings_module)

    container = build_container(rules=rules or load_pay_rules(settings))
    app.extensions["flexwork_payroll"] = container

    register_payroll(app, container)

    return app
