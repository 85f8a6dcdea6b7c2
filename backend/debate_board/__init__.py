"""Application factory and blueprint registration."""
from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from .config import BaseConfig
from .api.health.routes import bp as health_bp
from .api.topics.routes import bp as topics_bp
from .errors import register_error_handlers
from .integrations.board_ext import board_ext


def create_app(config_class: type[BaseConfig] | BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class or BaseConfig())
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGIN"]}})

    # Init extensions
    board_ext.init_app(app)

    # Register blueprints
    app.register_blueprint(health_bp, url_prefix="/api/health")
    app.register_blueprint(topics_bp, url_prefix="/api/topics")

    # Global error handlers
    register_error_handlers(app)
    return app
