"""browser.session

Scoped ownership of the Playwright driver, the Chromium process, its
browsing context and the single page used by the demo.

``open_browser_session`` is an async context manager: the browser is
closed and the driver stopped on every exit path, normal or exceptional.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional

from playwright.async_api import Browser, BrowserContext
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, Playwright, async_playwright

import main as constants

from ..exceptions import BrowserSessionError
from ..utils import add_debug_log
from .utils import get_launch_args, is_headless

logger = logging.getLogger(__name__)

__all__ = [
    "BrowserSession",
    "open_browser_session",
]


@dataclass
class BrowserSession:
    """Handles owned by one demo run. Page < context < browser < driver."""

    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page


@asynccontextmanager
async def open_browser_session(
    headless: Optional[bool] = None,
    launch_args: Optional[List[str]] = None,
    accept_downloads: Optional[bool] = None,
) -> AsyncIterator[BrowserSession]:
    """Launch Chromium, open an isolated context and a page.

    Args:
        headless: Overrides the ``HEADLESS`` environment setting
        launch_args: Overrides ``BROWSER_LAUNCH_ARGS`` from main.py
        accept_downloads: Overrides ``ACCEPT_DOWNLOADS`` from main.py

    Raises:
        BrowserSessionError: If the browser, context or page cannot be created
    """

    if headless is None:
        headless = is_headless
    if launch_args is None:
        launch_args = get_launch_args()
    if accept_downloads is None:
        accept_downloads = getattr(constants, "ACCEPT_DOWNLOADS", False)

    add_debug_log("Starting Playwright driver")
    playwright = await async_playwright().start()
    browser: Browser | None = None
    try:
        try:
            browser = await playwright.chromium.launch(
                headless=headless, args=launch_args
            )
            context = await browser.new_context(accept_downloads=accept_downloads)
            page = await context.new_page()
        except PlaywrightError as e:
            raise BrowserSessionError(f"Failed to open browser session: {e.message}") from e

        logger.info(
            "Browser launched (headless=%s, accept_downloads=%s)",
            headless,
            accept_downloads,
        )
        yield BrowserSession(
            playwright=playwright, browser=browser, context=context, page=page
        )
    finally:
        add_debug_log("Cleanup process")
        try:
            if browser is not None:
                try:
                    await browser.close()
                    logger.info("Browser closed")
                except PlaywrightError as e:
                    add_debug_log(f"Browser close error: {e.message}", level="WARNING")
        finally:
            await playwright.stop()
