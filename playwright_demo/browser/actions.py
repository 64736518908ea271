"""browser.actions

High-level browser operations used by the demo: navigation, markup
retrieval and form-control manipulation (fill, type, check, select).

Every Playwright failure is logged with ``log_operation_error`` and
re-raised as a library exception; nothing here retries. Waiting for an
element to appear is left to Playwright's auto-waiting locators.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, List, Optional, TypeVar

from playwright.async_api import Error as PlaywrightError

import main as constants

from ..exceptions import ElementOperationError, NavigationError
from ..utils import add_debug_log, log_operation_error
from . import snapshot as snapshot_mod
from .locators import checked_option

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "goto_url",
    "get_outer_html",
    "input_text",
    "get_input_value",
    "check",
    "is_checked",
    "select_option",
    "get_selected_option",
]

# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


async def goto_url(page: Any, url: str) -> None:
    """Navigates to the specified URL"""

    add_debug_log(f"browser.goto_url: Navigate to URL: {url}")
    try:
        await page.goto(
            url,
            wait_until="load",
            timeout=constants.NAVIGATION_TIMEOUT_MS,
        )
    except PlaywrightError as e:
        log_operation_error("goto", e.message, {"url": url})
        raise NavigationError(f"URL navigation failed: {e.message}", url) from e
    logger.info("Navigated to %s", url)


# ---------------------------------------------------------------------------
# Element operations
# ---------------------------------------------------------------------------


async def get_outer_html(locator: Any) -> str:
    """Serialized markup of the element"""

    return await _run_operation(
        "get_outer_html", locator, snapshot_mod.take_outer_html(locator)
    )


async def input_text(locator: Any, text: str, sequential: bool = False) -> None:
    """Sets the text of an input.

    ``fill`` replaces the value in one step; with ``sequential`` the text is
    typed character by character, firing key events for each one.
    """

    if text is None:
        raise ElementOperationError(
            "Text to input is required", "input_text", _describe(locator)
        )

    add_debug_log(f"browser.input_text: Inputting text '{text}' (sequential={sequential})")
    if sequential:
        await _run_operation(
            "press_sequentially",
            locator,
            locator.press_sequentially(text, timeout=constants.DEFAULT_TIMEOUT_MS),
        )
    else:
        await _run_operation(
            "fill", locator, locator.fill(text, timeout=constants.DEFAULT_TIMEOUT_MS)
        )


async def get_input_value(locator: Any) -> str:
    """Current value of an input, textarea or select"""

    return await _run_operation(
        "input_value", locator, locator.input_value(timeout=constants.DEFAULT_TIMEOUT_MS)
    )


async def check(locator: Any, via_click: bool = False) -> None:
    """Puts a checkbox or radio into the checked state.

    ``via_click`` clicks the control instead, which toggles a checkbox that
    is already checked.
    """

    if via_click:
        await _run_operation(
            "click", locator, locator.click(timeout=constants.DEFAULT_TIMEOUT_MS)
        )
    else:
        await _run_operation(
            "check", locator, locator.check(timeout=constants.DEFAULT_TIMEOUT_MS)
        )


async def is_checked(locator: Any) -> bool:
    return await _run_operation(
        "is_checked", locator, locator.is_checked(timeout=constants.DEFAULT_TIMEOUT_MS)
    )


async def select_option(
    locator: Any,
    *,
    index: Optional[int] = None,
    value: Optional[str] = None,
    label: Optional[str] = None,
) -> List[str]:
    """Chooses an option of a select by position, value or visible label.

    Exactly one of ``index``, ``value`` and ``label`` must be given.

    Returns:
        The values of the options selected afterwards
    """

    given = {
        k: v
        for k, v in (("index", index), ("value", value), ("label", label))
        if v is not None
    }
    if len(given) != 1:
        raise ElementOperationError(
            f"Exactly one of index, value or label is required (got {sorted(given) or 'none'})",
            "select_option",
            _describe(locator),
        )

    add_debug_log(f"browser.select_option: {given}")
    return await _run_operation(
        "select_option",
        locator,
        locator.select_option(timeout=constants.DEFAULT_TIMEOUT_MS, **given),
    )


def get_selected_option(locator: Any) -> Any:
    """Locator of the checked ``<option>`` of a select"""

    return checked_option(locator)


# ---------------------------------------------------------------------------
# Internal utilities
# ---------------------------------------------------------------------------


def _describe(locator: Any) -> str:
    return repr(locator)


async def _run_operation(operation: str, locator: Any, awaitable: Awaitable[T]) -> T:
    """Awaits a Playwright call, translating its failure into ElementOperationError"""

    try:
        return await awaitable
    except PlaywrightError as e:
        target = _describe(locator)
        log_operation_error(operation, e.message, {"target": target})
        raise ElementOperationError(
            f"{operation} failed on {target}: {e.message}", operation, target
        ) from e
