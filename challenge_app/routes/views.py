"""
HTML view routes for the challenge site.

Routes:
    GET  /                   - Index page linking to every challenge
    GET  /<name>.html        - One challenge page (challenge1 .. challenge4)
"""

import logging

from flask import Blueprint, abort, current_app, render_template

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

# Page name -> title shown on the index
CHALLENGES = {
    "challenge1": "Delayed success message",
    "challenge2": "Animated form and delayed loading",
    "challenge3": "Forgot password",
    "challenge4": "Global ready flag",
}

# Config keys handed to the page scripts, per challenge
TIMING_KEYS = {
    "challenge1": ("C1_SUBMIT_DELAY_MS", "C1_MESSAGE_VISIBLE_MS"),
    "challenge2": (
        "C2_ANIMATION_MS",
        "C2_INIT_DELAY_MS",
        "C2_DASHBOARD_DELAY_MS",
        "C2_MENU_INIT_DELAY_MS",
    ),
    "challenge3": ("C3_FORM_SWAP_DELAY_MS", "C3_RESET_DELAY_MS"),
    "challenge4": ("C4_READY_DELAY_MS", "C4_BACKEND_LAG_MS", "C4_BACKEND_POLL_MS"),
}


def timings_for(name: str) -> dict[str, int]:
    """Collect the configured delays a challenge page needs."""
    return {key.lower(): int(current_app.config[key]) for key in TIMING_KEYS[name]}


@views_bp.route("/")
def index():
    """
    Render the index page.

    Returns:
        Rendered index.html template with one link per challenge.
    """
    logger.info("GET / - Rendering challenge index")
    return render_template("index.html", challenges=CHALLENGES)


@views_bp.route("/<name>.html")
def challenge(name: str):
    """
    Render a single challenge page.

    Args:
        name: Page name without extension, e.g. ``challenge2``.

    Returns:
        Rendered ``<name>.html`` template, or 404 for unknown pages.
    """
    if name not in CHALLENGES:
        abort(404)

    logger.info("GET /%s.html - Rendering challenge page", name)
    return render_template(
        f"{name}.html",
        title=CHALLENGES[name],
        timings=timings_for(name),
    )
