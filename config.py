"""
Application configuration module.

This module defines configuration classes for the challenge site and the
readiness driver in different environments (development, testing,
production). Values are loaded from environment variables with sensible
defaults.

Challenge timings are deliberately uneven so the pages reproduce the races
the suite is meant to survive; the testing config keeps the same shape with
shorter, deterministic delays.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to ``default``."""
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else default


class Config:
    """Base configuration with default settings."""

    # Where the live site helper binds the bundled challenge site
    CHALLENGE_HOST: str = os.environ.get("CHALLENGE_HOST", "127.0.0.1")
    CHALLENGE_PORT: int = _int_env("CHALLENGE_PORT", 5001)

    # Default budget for every readiness wait, in milliseconds
    READINESS_TIMEOUT_MS: int = _int_env("READINESS_TIMEOUT_MS", 5000)

    # Challenge 1: success banner appears after a delay, then hides again
    C1_SUBMIT_DELAY_MS: int = _int_env("C1_SUBMIT_DELAY_MS", 800)
    C1_MESSAGE_VISIBLE_MS: int = _int_env("C1_MESSAGE_VISIBLE_MS", 1500)

    # Challenge 2: fading form whose button enables before the fade ends,
    # then a delayed menu init
    C2_ANIMATION_MS: int = _int_env("C2_ANIMATION_MS", 1500)
    C2_INIT_DELAY_MS: int = _int_env("C2_INIT_DELAY_MS", 500)
    C2_DASHBOARD_DELAY_MS: int = _int_env("C2_DASHBOARD_DELAY_MS", 800)
    C2_MENU_INIT_DELAY_MS: int = _int_env("C2_MENU_INIT_DELAY_MS", 1000)

    # Challenge 3: forgot-password form swap and submit delays
    C3_FORM_SWAP_DELAY_MS: int = _int_env("C3_FORM_SWAP_DELAY_MS", 600)
    C3_RESET_DELAY_MS: int = _int_env("C3_RESET_DELAY_MS", 900)

    # Challenge 4: global ready flag, then a backend that accepts clicks later
    C4_READY_DELAY_MS: int = _int_env("C4_READY_DELAY_MS", 1000)
    C4_BACKEND_LAG_MS: int = _int_env("C4_BACKEND_LAG_MS", 700)
    C4_BACKEND_POLL_MS: int = _int_env("C4_BACKEND_POLL_MS", 100)


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # Shorter delays keep the suite fast without removing the races
    C1_SUBMIT_DELAY_MS: int = _int_env("TEST_C1_SUBMIT_DELAY_MS", 400)
    C1_MESSAGE_VISIBLE_MS: int = _int_env("TEST_C1_MESSAGE_VISIBLE_MS", 800)
    C2_ANIMATION_MS: int = _int_env("TEST_C2_ANIMATION_MS", 1200)
    C2_INIT_DELAY_MS: int = _int_env("TEST_C2_INIT_DELAY_MS", 300)
    C2_DASHBOARD_DELAY_MS: int = _int_env("TEST_C2_DASHBOARD_DELAY_MS", 400)
    C2_MENU_INIT_DELAY_MS: int = _int_env("TEST_C2_MENU_INIT_DELAY_MS", 500)
    C3_FORM_SWAP_DELAY_MS: int = _int_env("TEST_C3_FORM_SWAP_DELAY_MS", 300)
    C3_RESET_DELAY_MS: int = _int_env("TEST_C3_RESET_DELAY_MS", 400)
    C4_READY_DELAY_MS: int = _int_env("TEST_C4_READY_DELAY_MS", 500)
    C4_BACKEND_LAG_MS: int = _int_env("TEST_C4_BACKEND_LAG_MS", 400)


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
