"""
Smoke tests for the challenge site.

Smoke tests are lightweight, fast checks that the site under test is up
before the browser suite spends time on it. They use plain ``requests``
(no browser) against the live site.
"""

import pytest
import requests

from challenge_app.routes.views import CHALLENGES


pytestmark = pytest.mark.smoke


def test_site_health(smoke_base_url):
    """Test that the health endpoint reports the site healthy."""
    # Act
    response = requests.get(f"{smoke_base_url}/api/health", timeout=5)

    # Assert
    assert response.status_code == 200
    assert response.json().get("status") == "healthy"


def test_index_is_running(smoke_base_url):
    """Test that the index page responds and links the challenges."""
    response = requests.get(f"{smoke_base_url}/", timeout=5)

    assert response.status_code == 200
    for name in CHALLENGES:
        assert f"/{name}.html" in response.text


@pytest.mark.parametrize("name", sorted(CHALLENGES))
def test_challenge_page_is_served(smoke_base_url, name):
    """Test that every challenge page is reachable at /<name>.html."""
    response = requests.get(f"{smoke_base_url}/{name}.html", timeout=5)

    assert response.status_code == 200
    assert "text/html" in response.headers["Content-Type"]
