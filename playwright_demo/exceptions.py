"""exceptions

Common exception classes used by the Playwright demo.

Defines a common base exception `DemoError` and subclasses for the
browser session, navigation, locator building and element operations
so that the outer boundary of the demo can report them uniformly.
"""

from __future__ import annotations


class DemoError(Exception):
    """Base exception for the entire library."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BrowserSessionError(DemoError):
    """Launching the browser or opening its context/page failed."""


class NavigationError(DemoError):
    """Navigating the page to a URL failed."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class LocatorError(DemoError):
    """Unknown locator strategy or empty locator value."""


class ElementOperationError(DemoError):
    """Evaluating or manipulating a located element failed."""

    def __init__(self, message: str, operation: str, target: str) -> None:
        super().__init__(message)
        self.operation = operation
        self.target = target
