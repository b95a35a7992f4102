"""
Flask application factory for the challenge site.

The challenge site serves four small login pages, each built around a
different timing quirk, plus an index page linking to them. The browser
suite drives these pages; nothing here persists state between requests.

Key Concepts Demonstrated:
- Application factory pattern (``create_app``)
- Environment-specific configuration objects
- Blueprint-based route registration
"""

import logging

from flask import Flask

from config import get_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the challenge site.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating challenge site with config: %s", config_class.__name__)

    # Register blueprints
    from challenge_app.routes.api import api_bp
    from challenge_app.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(views_bp)

    return app
