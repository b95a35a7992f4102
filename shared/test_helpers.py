"""Test helper functions shared by the challenge test suites."""

from __future__ import annotations

DEFAULT_RESET_EMAIL = "test@example.com"


def make_credentials(index: int) -> dict[str, str]:
    """Build the deterministic credential pair for login attempt ``index``."""
    return {
        "email": f"test{index}@example.com",
        "password": f"password{index}",
    }


def success_lines(email: str, password: str) -> list[str]:
    """Lines the challenge 1 banner must show after a submit."""
    return [
        "Successfully submitted!",
        f"Email: {email}",
        f"Password: {password}",
    ]
