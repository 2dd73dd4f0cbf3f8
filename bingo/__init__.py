"""Flask application package for the bingo caller."""

from __future__ import annotations

from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: dict[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied after the environment config,
            mainly for tests.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from bingo.config import get_config
    from bingo.error_handlers import register_error_handlers
    from bingo.game import init_game
    from bingo.logging_config import configure_logging
    from bingo.routes.draw import draw_bp
    from bingo.routes.health import health_bp
    from bingo.routes.layout import layout_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_game(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(draw_bp)
    app.register_blueprint(layout_bp)

    return app
