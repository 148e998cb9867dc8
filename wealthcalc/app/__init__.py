"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from wealthcalc.app.api.routes import api_bp
from wealthcalc.config import Config
from wealthcalc.core.insights import GeminiInsightProvider


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    logging.getLogger("wealthcalc").setLevel(app.config["LOG_LEVEL"])

    if app.config.get("INSIGHT_PROVIDER") is None and app.config.get("GEMINI_API_KEY"):
        app.config["INSIGHT_PROVIDER"] = GeminiInsightProvider(
            api_key=app.config["GEMINI_API_KEY"],
            model_name=app.config["INSIGHT_MODEL"],
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
