"""
Smoke-test fixtures for the challenge site.

Provides the ``smoke_base_url`` session-scoped fixture that yields a healthy
challenge-site URL shared across the entire smoke suite. URL resolution is
delegated to :func:`shared.live_stack.live_site_url`, which honours
``CHALLENGE_BASE_URL`` or serves the bundled site on demand.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from shared.live_stack import live_site_url


@pytest.fixture(scope="session")
def smoke_base_url() -> Generator[str, None, None]:
    """Yield a healthy challenge-site URL for smoke tests."""
    yield from live_site_url()
