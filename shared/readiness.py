"""
Readiness-gated interaction helpers for the challenge pages.

Every helper here waits on something the page itself signals (visibility,
an attribute, a global flag, running animations) before acting, so the
scenarios never need a fixed sleep. Each wait is bounded and raises a typed
error naming the condition that never became true.

Key SDET Concepts Demonstrated:
- Condition-based waits instead of static sleeps
- Typed failures that separate "missing element" from "never ready"
- Bounded retry with an escalating interval sequence
- Named steps so a failure report points at the step that broke
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Generator, Sequence
from contextlib import contextmanager
from urllib.parse import urlparse

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config import get_config
from shared.selectors import SELECTORS

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = get_config().READINESS_TIMEOUT_MS

# Escalating delays between submit attempts, last one repeats
DEFAULT_RETRY_INTERVALS_MS = (100, 100, 200, 300, 500)
DEFAULT_RETRY_TIMEOUT_MS = 5000
DEFAULT_ATTEMPT_TIMEOUT_MS = 300


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------

class ReadinessError(Exception):
    """Base class for every failure raised by the readiness helpers."""

    def __init__(self, message: str, *, selector: str | None = None,
                 timeout_ms: int | None = None):
        super().__init__(message)
        self.selector = selector
        self.timeout_ms = timeout_ms


class ElementNotFoundError(ReadinessError):
    """No element matched the selector."""


class WaitTimeoutError(ReadinessError):
    """A readiness condition stayed false for the whole wait budget."""


class VisibilityTimeoutError(WaitTimeoutError):
    """Element never reached the expected visible/enabled/hidden state."""


class AttributeTimeoutError(WaitTimeoutError):
    """Element attribute never matched the expected value."""


class AnimationWaitTimeoutError(WaitTimeoutError):
    """Animations on the element were still running when the budget ran out."""


class NavigationTimeoutError(WaitTimeoutError):
    """Browser location never reached the expected path."""


class ReadinessFlagTimeoutError(WaitTimeoutError):
    """Page-global readiness flag never became ``true``."""


class RetryExhaustedError(ReadinessError):
    """No submit attempt produced the confirmation element in time."""

    def __init__(self, message: str, *, attempts: int, **kwargs):
        super().__init__(message, **kwargs)
        self.attempts = attempts


def _budget(timeout: int | None) -> int:
    return DEFAULT_TIMEOUT_MS if timeout is None else timeout


class _Deadline:
    """One budget shared by every wait inside a single operation."""

    def __init__(self, budget_ms: int, clock: Callable[[], float]):
        self._clock = clock
        self._end = clock() + budget_ms / 1000

    def remaining_ms(self) -> int:
        # Playwright reads a timeout of 0 as "no timeout"
        return max(round((self._end - self._clock()) * 1000), 1)


# -----------------------------------------------------------------------------
# Steps
# -----------------------------------------------------------------------------

@contextmanager
def step(name: str) -> Generator[None, None, None]:
    """
    Run a block as a named scenario step.

    On failure the step name is attached to the exception as a note, so the
    pytest report shows which step broke alongside the failure type.

    Args:
        name: Human readable step title.
    """
    logger.info("Step started: %s", name)
    try:
        yield
    except Exception as exc:
        exc.add_note(f"Failed step: {name}")
        logger.error("Step failed: %s (%s)", name, type(exc).__name__)
        raise
    logger.info("Step passed: %s", name)


# -----------------------------------------------------------------------------
# Navigation
# -----------------------------------------------------------------------------

def open_challenge(page: Page, name: str, *, timeout: int | None = None,
                   clock: Callable[[], float] = time.monotonic) -> None:
    """
    Open a challenge page through its link on the index page.

    Blocks until the browser location path is exactly ``/<name>.html``.
    Loading the index, clicking the link and the URL wait share one budget.

    Args:
        page: Playwright page instance.
        name: Challenge page name, e.g. ``challenge1``.
        timeout: Navigation budget in milliseconds.
        clock: Monotonic clock in seconds.

    Raises:
        ElementNotFoundError: The index page has no link to the challenge.
        NavigationTimeoutError: The index or the challenge did not load in time.
    """
    budget = _budget(timeout)
    deadline = _Deadline(budget, clock)
    target_path = f"/{name}.html"
    link_selector = SELECTORS["link"](name)

    logger.debug("Navigating to %s", target_path)
    try:
        page.goto("/", timeout=deadline.remaining_ms())
        link = page.locator(link_selector)
        if link.count() == 0:
            raise ElementNotFoundError(
                f"No link to {target_path} on the index page", selector=link_selector
            )
        link.click(timeout=deadline.remaining_ms())
        page.wait_for_url(
            lambda url: urlparse(url).path == target_path,
            timeout=deadline.remaining_ms(),
        )
    except PlaywrightTimeoutError as exc:
        raise NavigationTimeoutError(
            f"Location never reached {target_path} within {budget}ms",
            selector=link_selector,
            timeout_ms=budget,
        ) from exc


def disable_native_form_submit(page: Page) -> None:
    """Cancel native form submission on every document the page loads."""
    page.add_init_script(
        "document.addEventListener('submit', e => e.preventDefault(), true);"
    )


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------

def fill_field(page: Page, selector: str, value: str) -> None:
    """
    Write a value into a field that must already exist.

    No visibility wait happens here; callers gate on one first when the
    field may not be rendered yet.

    Raises:
        ElementNotFoundError: Nothing matches ``selector``.
    """
    field = page.locator(selector)
    if field.count() == 0:
        raise ElementNotFoundError(f"Field {selector!r} not found", selector=selector)
    field.fill(value)


def fill_credentials(page: Page, email: str, password: str) -> None:
    """Fill the login form email and password fields."""
    fill_field(page, SELECTORS["email"], email)
    fill_field(page, SELECTORS["password"], password)


def click_when_ready(page: Page, selector: str, *, timeout: int | None = None,
                     clock: Callable[[], float] = time.monotonic) -> None:
    """
    Click a control once it is visible, enabled and no longer animating.

    All three waits and the click share one budget.

    Raises:
        VisibilityTimeoutError: Control never became visible and enabled.
        AnimationWaitTimeoutError: Control was still animating at the deadline.
    """
    deadline = _Deadline(_budget(timeout), clock)
    wait_visible_and_enabled(page, selector, timeout=deadline.remaining_ms(), clock=clock)
    wait_animation_settled(page, selector, timeout=deadline.remaining_ms(), clock=clock)
    page.locator(selector).click(timeout=deadline.remaining_ms())


# -----------------------------------------------------------------------------
# Waits
# -----------------------------------------------------------------------------

def wait_visible_and_enabled(page: Page, selector: str, *,
                             timeout: int | None = None,
                             clock: Callable[[], float] = time.monotonic) -> None:
    """
    Wait until an element is visible and no longer disabled.

    Both conditions share one budget.

    Raises:
        VisibilityTimeoutError: Either condition stayed false.
    """
    budget = _budget(timeout)
    deadline = _Deadline(budget, clock)
    locator = page.locator(selector)
    logger.debug("Waiting for %s to be visible and enabled", selector)
    try:
        expect(locator).to_be_visible(timeout=deadline.remaining_ms())
        expect(locator).to_be_enabled(timeout=deadline.remaining_ms())
    except AssertionError as exc:
        raise VisibilityTimeoutError(
            f"{selector!r} not visible and enabled within {budget}ms",
            selector=selector,
            timeout_ms=budget,
        ) from exc


def wait_hidden(page: Page, selector: str, *, timeout: int | None = None) -> None:
    """
    Wait until an element is detached or not visible.

    Raises:
        VisibilityTimeoutError: Element was still visible at the deadline.
    """
    budget = _budget(timeout)
    logger.debug("Waiting for %s to be hidden", selector)
    try:
        expect(page.locator(selector)).to_be_hidden(timeout=budget)
    except AssertionError as exc:
        raise VisibilityTimeoutError(
            f"{selector!r} still visible after {budget}ms",
            selector=selector,
            timeout_ms=budget,
        ) from exc


def wait_attribute_equals(page: Page, selector: str, name: str, expected: str, *,
                          timeout: int | None = None) -> None:
    """
    Wait until an element attribute equals ``expected`` exactly.

    Raises:
        AttributeTimeoutError: Attribute never matched.
    """
    budget = _budget(timeout)
    logger.debug("Waiting for %s[%s=%r]", selector, name, expected)
    try:
        expect(page.locator(selector)).to_have_attribute(name, expected, timeout=budget)
    except AssertionError as exc:
        raise AttributeTimeoutError(
            f"{selector!r} attribute {name!r} never became {expected!r} within {budget}ms",
            selector=selector,
            timeout_ms=budget,
        ) from exc


def wait_global_flag(page: Page, flag_name: str, *, timeout: int | None = None) -> None:
    """
    Poll ``window[flag_name]`` until it is strictly ``true``.

    Raises:
        ReadinessFlagTimeoutError: Flag stayed falsy (or non-boolean).
    """
    budget = _budget(timeout)
    logger.debug("Waiting for window.%s === true", flag_name)
    try:
        page.wait_for_function("flag => window[flag] === true", arg=flag_name, timeout=budget)
    except PlaywrightTimeoutError as exc:
        raise ReadinessFlagTimeoutError(
            f"window.{flag_name} not true within {budget}ms", timeout_ms=budget
        ) from exc


# Awaits every animation on the element and its subtree, ignoring
# cancellations, until none are left running or the budget expires.
_SETTLE_ANIMATIONS_JS = """
async (element, timeoutMs) => {
    const deadline = Date.now() + timeoutMs;
    const pending = () => (element.getAnimations?.({ subtree: true }) ?? [])
        .filter(animation => animation.playState !== 'finished'
            && animation.playState !== 'idle');
    let awaited = 0;
    let running = pending();
    while (running.length) {
        const remaining = deadline - Date.now();
        if (remaining <= 0) {
            throw new Error(`${running.length} animation(s) still running`);
        }
        let timer;
        const expired = new Promise((_, reject) => {
            timer = setTimeout(
                () => reject(new Error(`${running.length} animation(s) still running`)),
                remaining,
            );
        });
        try {
            await Promise.race([
                Promise.all(running.map(animation => animation.finished.catch(() => {}))),
                expired,
            ]);
        } finally {
            clearTimeout(timer);
        }
        awaited += running.length;
        running = pending();
    }
    return awaited;
}
"""

# Rejection text of the script above when its own timer wins the race
_ANIMATIONS_RUNNING_MARKER = "animation(s) still running"


def wait_animation_settled(page: Page, selector: str, *,
                           timeout: int | None = None,
                           clock: Callable[[], float] = time.monotonic) -> int:
    """
    Wait for every animation on an element (and its descendants) to finish.

    Cancelled animations count as settled. Animations started while waiting
    are awaited too. Attaching the element and settling its animations share
    one budget.

    Returns:
        Number of animations awaited.

    Raises:
        ElementNotFoundError: Element never attached.
        AnimationWaitTimeoutError: Animations were still running at the deadline.
    """
    budget = _budget(timeout)
    deadline = _Deadline(budget, clock)
    locator = page.locator(selector)
    logger.debug("Waiting for animations on %s to settle", selector)
    try:
        locator.wait_for(state="attached", timeout=deadline.remaining_ms())
        remaining = deadline.remaining_ms()
        awaited = locator.evaluate(_SETTLE_ANIMATIONS_JS, remaining, timeout=remaining)
    except PlaywrightTimeoutError as exc:
        raise ElementNotFoundError(
            f"{selector!r} not attached within {budget}ms",
            selector=selector,
            timeout_ms=budget,
        ) from exc
    except PlaywrightError as exc:
        if _ANIMATIONS_RUNNING_MARKER not in str(exc):
            raise
        raise AnimationWaitTimeoutError(
            f"Animations on {selector!r} not settled within {budget}ms",
            selector=selector,
            timeout_ms=budget,
        ) from exc

    logger.debug("Animations on %s settled (%d awaited)", selector, awaited)
    return awaited


# -----------------------------------------------------------------------------
# Retry
# -----------------------------------------------------------------------------

def retryable_submit(
    page: Page,
    submit_selector: str,
    confirm_selector: str,
    *,
    timeout: int = DEFAULT_RETRY_TIMEOUT_MS,
    intervals: Sequence[int] = DEFAULT_RETRY_INTERVALS_MS,
    attempt_timeout: int = DEFAULT_ATTEMPT_TIMEOUT_MS,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Click submit until a confirmation element shows up.

    Each attempt clicks ``submit_selector`` and waits up to
    ``attempt_timeout`` for ``confirm_selector`` to be visible. A missed
    attempt is retried after the next delay from ``intervals`` (the last
    delay repeats) until the overall ``timeout`` is spent. A confirmation
    that shows up late is checked for before every retry, so it counts for
    the attempt that caused it.

    Args:
        page: Playwright page instance.
        submit_selector: Control whose click may be dropped.
        confirm_selector: Element that proves the click landed.
        timeout: Overall budget in milliseconds.
        intervals: Delays between attempts in milliseconds.
        attempt_timeout: Per-attempt confirmation wait in milliseconds.
        clock: Monotonic clock in seconds.

    Returns:
        The 1-based number of the attempt that succeeded.

    Raises:
        RetryExhaustedError: No attempt succeeded within ``timeout``.
    """
    submit = page.locator(submit_selector)
    confirm = page.locator(confirm_selector)
    deadline = clock() + timeout / 1000
    attempt = 0
    last_error: Exception | None = None

    while True:
        if attempt and confirm.is_visible():
            logger.info("Submit confirmed late by %s after attempt %d", confirm_selector, attempt)
            return attempt

        remaining_ms = round((deadline - clock()) * 1000)
        if remaining_ms <= 0:
            break

        attempt += 1
        step_timeout = min(attempt_timeout, remaining_ms)
        try:
            submit.click(timeout=step_timeout)
            expect(confirm).to_be_visible(timeout=step_timeout)
        except (AssertionError, PlaywrightTimeoutError) as exc:
            last_error = exc
        else:
            logger.info("Submit confirmed by %s on attempt %d", confirm_selector, attempt)
            return attempt

        delay = intervals[min(attempt - 1, len(intervals) - 1)] if intervals else 0
        remaining_ms = round((deadline - clock()) * 1000)
        if remaining_ms <= delay:
            break

        logger.info(
            "Attempt %d: %s not visible, retrying in %dms", attempt, confirm_selector, delay
        )
        page.wait_for_timeout(delay)

    if attempt and confirm.is_visible():
        logger.info("Submit confirmed late by %s after attempt %d", confirm_selector, attempt)
        return attempt

    raise RetryExhaustedError(
        f"{confirm_selector!r} never appeared after {attempt} submit attempt(s) in {timeout}ms",
        attempts=attempt,
        selector=confirm_selector,
        timeout_ms=timeout,
    ) from last_error
