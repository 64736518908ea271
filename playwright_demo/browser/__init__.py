"""browser package

Provides browser automation functionality using Playwright.
This package includes the following modules:
- session: Scoped launch and release of the browser, context and page
- locators: Locator strategies (id, name, class, link text, XPath)
- actions: Navigation and form-control operations (fill, check, select, etc.)
- snapshot: JavaScript evaluated against located elements
- utils: Headless mode and launch arguments
"""

from .actions import (check, get_input_value, get_outer_html,
                      get_selected_option, goto_url, input_text, is_checked,
                      select_option)
from .locators import LOCATOR_STRATEGIES, build_locator, build_selector
from .session import BrowserSession, open_browser_session
from .utils import get_launch_args, is_headless

__all__: list[str] = [
    "BrowserSession",
    "open_browser_session",
    "LOCATOR_STRATEGIES",
    "build_locator",
    "build_selector",
    "goto_url",
    "get_outer_html",
    "input_text",
    "get_input_value",
    "check",
    "is_checked",
    "select_option",
    "get_selected_option",
    "is_headless",
    "get_launch_args",
]
