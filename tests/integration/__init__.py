"""
Site test package for the challenge pages.

This package contains tests for the server-rendered challenge site.
Tests use the Flask test client and demonstrate:
- Route and status code checks
- HTML contract checks for the elements the browser suite uses
- Configuration reaching the rendered pages
"""
