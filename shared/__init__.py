"""Helpers shared by the challenge test suites: readiness waits, selectors, live site."""
