"""
Browser test package for the login challenges.

This package contains Playwright-based scenarios and demonstrates:
- Waiting on application state instead of fixed sleeps
- Named steps for readable failure reports
- One isolated browser context per scenario
"""
