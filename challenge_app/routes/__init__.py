"""
Routes package for the challenge site.

This package contains route blueprints:
- api: health endpoint used by the live site helper
- views: the index page and the four challenge pages
"""
