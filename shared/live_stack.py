"""Live challenge-site helpers for smoke and E2E test suites."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Generator

import requests
from werkzeug.serving import make_server

from challenge_app import create_app

logger = logging.getLogger(__name__)


def is_site_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the challenge site health endpoint responds with 200."""
    try:
        response = requests.get(f"{url}/api/health", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_site_healthy(url: str, timeout: int = 30, interval: float = 0.2) -> None:
    """Poll the challenge site health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Challenge site at {url} not healthy after {timeout}s")


def live_site_url(
    *,
    base_url_env: str = "CHALLENGE_BASE_URL",
    config_name: str = "testing",
) -> Generator[str, None, None]:
    """
    Yield a healthy challenge-site base URL.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait for health).
    2. Reuse a site already answering on the configured host and port.
    3. Serve the bundled site from a background thread, shut it down on exit.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        provided_base_url = provided_base_url.rstrip("/")
        wait_for_site_healthy(provided_base_url)
        yield provided_base_url
        return

    app = create_app(config_name)
    host = app.config["CHALLENGE_HOST"]
    port = app.config["CHALLENGE_PORT"]
    base_url = f"http://{host}:{port}"

    if is_site_ready(base_url):
        logger.info("Reusing challenge site already running at %s", base_url)
        yield base_url
        return

    server = make_server(host, port, app, threaded=True)
    server_thread = threading.Thread(target=server.serve_forever, daemon=True)
    server_thread.start()
    logger.info("Serving challenge site at %s", base_url)

    try:
        wait_for_site_healthy(base_url)
        yield base_url
    finally:
        server.shutdown()
        server_thread.join(timeout=5)
