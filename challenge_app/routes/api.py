"""
JSON endpoints for the challenge site.

Endpoints:
    GET    /api/health        - Health check
"""

import logging
import os

from flask import Blueprint, Response, jsonify

from challenge_app.routes.views import CHALLENGES

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint polled before the browser suite starts."""
    return jsonify({
        "status": "healthy",
        "service": "challenge-site",
        "challenges": sorted(CHALLENGES),
        "environment": os.getenv("ENVIRONMENT", "unknown"),
    }), 200
