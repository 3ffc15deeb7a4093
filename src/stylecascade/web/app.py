from __future__ import annotations

import logging

from flask import Flask

from stylecascade.config import CascadeConfig

logger = logging.getLogger(__name__)


def create_app(config: CascadeConfig | None = None, settings: dict | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(settings or {})

    # Store the engine config on app for access in routes
    app.extensions["stylecascade_config"] = config or CascadeConfig()

    # Register blueprints
    from stylecascade.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    logger.info("stylecascade API ready")
    return app
