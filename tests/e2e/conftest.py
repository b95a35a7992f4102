"""Playwright fixtures for the login challenge E2E tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, expect

from shared.live_stack import live_site_url
from shared.readiness import DEFAULT_TIMEOUT_MS
from shared.test_helpers import make_credentials

expect.set_options(timeout=DEFAULT_TIMEOUT_MS)


@pytest.fixture(scope="session")
def live_server() -> Generator[str, None, None]:
    """
    Return a live challenge-site URL for E2E tests.

    If CHALLENGE_BASE_URL is set, use that site.
    Otherwise serve the bundled site and stop it afterwards.
    """
    yield from live_site_url()


@pytest.fixture(scope="session")
def browser_context_args(live_server: str):
    return {
        "base_url": live_server,
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def credential_factory() -> Callable[[int], dict[str, str]]:
    """Factory for the deterministic per-iteration login credentials."""
    return make_credentials


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = "test-results/screenshots"
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"
            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")
