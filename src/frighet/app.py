"""
Flask Application Factory.

Creates and configures the Flask application.
"""

import signal
import sys
from typing import Optional

from flask import Flask

from frighet.api import api_bp
from frighet.config import settings
from frighet.infrastructure.logging import log_request_context, logger
from frighet.infrastructure.metrics import setup_metrics_middleware


def _handle_sigterm(signum: int, frame) -> None:
    """Exit cleanly when the container is stopped."""
    logger.info(
        "Received SIGTERM, shutting down gracefully",
        extra={"extra_fields": {"signal": signum}}
    )
    sys.exit(0)


signal.signal(signal.SIGTERM, _handle_sigterm)


def create_app(config: Optional[dict] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config: Optional configuration dictionary.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    app.json.sort_keys = False

    if config:
        app.config.update(config)

    log_request_context(app)
    setup_metrics_middleware(app)

    app.register_blueprint(api_bp)

    logger.info(
        "Application initialized",
        extra={"extra_fields": {
            "environment": settings.environment,
            "mailjet_configured": settings.mailjet.is_configured,
            "email_configured": settings.email.is_configured,
        }}
    )

    return app


app = create_app()


if __name__ == "__main__":
    app.run(
        host="0.0.0.0",
        port=settings.port,
        debug=settings.debug or settings.environment == "development",
    )
