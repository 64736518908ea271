"""Playwright UI interaction demo.

Drives Chromium through ``playwright.async_api`` to show element lookup
strategies and form-control manipulation against an example page.
"""

__version__ = "1.4.0"
