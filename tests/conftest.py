"""
Shared pytest fixtures for the login challenge suite.

This module contains fixtures that are shared across all test modules:
the challenge site application, a Flask test client, and generated data.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Application factory reuse in tests
- Test data generation with Faker
"""

import os
import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from challenge_app import create_app


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create the challenge site for the test session.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests without a real server.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def random_email() -> str:
    """Provide a generated email address."""
    return fake.email()


@pytest.fixture
def random_password() -> str:
    """Provide a generated password."""
    return fake.password(length=12)
