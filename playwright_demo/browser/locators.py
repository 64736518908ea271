"""browser.locators

Maps the lookup strategies shown by the demo (id, name attribute, class,
link text, XPath) to Playwright locators. Locators are lazy: nothing is
resolved until an action runs against them.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import LocatorError
from ..utils import add_debug_log

__all__ = [
    "LOCATOR_STRATEGIES",
    "build_selector",
    "quote_selector_string",
    "build_locator",
    "checked_option",
]

LOCATOR_STRATEGIES = ("id", "name", "class", "link_text", "xpath")


def quote_selector_string(value: str) -> str:
    """Double-quoted CSS string with backslashes and quotes escaped"""

    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_selector(strategy: str, value: str, exact: bool = False) -> str:
    """Playwright selector string for ``strategy``/``value``.

    ``link_text`` matches anchors containing the text, or whose whole text
    equals it when ``exact`` is set.
    """

    if strategy not in LOCATOR_STRATEGIES:
        raise LocatorError(f"Unknown locator strategy: {strategy!r}")
    if not value:
        raise LocatorError(f"Empty value for locator strategy {strategy!r}")

    if strategy == "id":
        return f"#{value}"
    if strategy == "name":
        return f"[name={quote_selector_string(value)}]"
    if strategy == "class":
        return f".{value}"
    if strategy == "xpath":
        return value if value.startswith("xpath=") else f"xpath={value}"
    if exact:
        return f"a:text-is({quote_selector_string(value)})"
    return f"a:has-text({quote_selector_string(value)})"


def build_locator(page: Any, strategy: str, value: str, exact: bool = False) -> Any:
    """Playwright ``Locator`` on ``page`` for the given strategy."""

    selector = build_selector(strategy, value, exact=exact)
    add_debug_log(f"locate by {strategy}: {value!r} -> {selector}")

    return page.locator(selector)


def checked_option(select_locator: Any) -> Any:
    """The currently selected ``<option>`` inside a select."""

    return select_locator.locator("option:checked")
