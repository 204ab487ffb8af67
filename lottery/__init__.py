"""Lottery machine package: core engine, console driver and Flask API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask
from dotenv import load_dotenv


def create_app(test_config: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        test_config: Values applied over the environment-based config.

    Returns:
        Configured Flask application.

    Raises:
        InvalidPrizeSchedule: The configured prize schedule is unusable.
    """
    load_dotenv()

    from lottery.config import get_config
    from lottery.error_handlers import register_error_handlers
    from lottery.logging_config import configure_logging
    from lottery.routes.draw import draw_bp
    from lottery.routes.health import health_bp
    from lottery.routes.tickets import tickets_bp
    from lottery.runtime import init_machine

    app = Flask(__name__)
    app.config.from_object(get_config())
    if test_config:
        app.config.update(test_config)

    configure_logging(app.config.get("LOG_LEVEL"))
    init_machine(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(tickets_bp)
    app.register_blueprint(draw_bp)

    return app
