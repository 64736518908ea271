import sys
import unittest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

from playwright.async_api import Error as PlaywrightError

project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

import main as constants
from playwright_demo.browser.session import open_browser_session
from playwright_demo.exceptions import BrowserSessionError


def _mock_playwright():
    """Playwright driver mock whose chromium.launch returns a browser mock"""
    playwright = MagicMock()
    playwright.stop = AsyncMock()
    browser = MagicMock()
    browser.close = AsyncMock()
    context = MagicMock()
    page = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    browser.new_context = AsyncMock(return_value=context)
    context.new_page = AsyncMock(return_value=page)

    starter = MagicMock()
    starter.start = AsyncMock(return_value=playwright)
    return starter, playwright, browser, context, page


class TestOpenBrowserSession(unittest.IsolatedAsyncioTestCase):
    """Scoped acquire/release of the browser"""

    async def test_handles_and_release_on_normal_exit(self):
        starter, playwright, browser, context, page = _mock_playwright()
        with patch(
            "playwright_demo.browser.session.async_playwright", return_value=starter
        ):
            async with open_browser_session(headless=True) as session:
                self.assertIs(session.browser, browser)
                self.assertIs(session.context, context)
                self.assertIs(session.page, page)
                browser.close.assert_not_called()

        playwright.chromium.launch.assert_awaited_once_with(
            headless=True, args=constants.BROWSER_LAUNCH_ARGS
        )
        browser.new_context.assert_awaited_once_with(
            accept_downloads=constants.ACCEPT_DOWNLOADS
        )
        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    async def test_release_on_exception(self):
        starter, playwright, browser, _, _ = _mock_playwright()
        with patch(
            "playwright_demo.browser.session.async_playwright", return_value=starter
        ):
            with self.assertRaises(RuntimeError):
                async with open_browser_session(headless=True):
                    raise RuntimeError("step failed")

        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    async def test_driver_stopped_when_close_fails(self):
        starter, playwright, browser, _, _ = _mock_playwright()
        browser.close.side_effect = RuntimeError("connection lost")
        with patch(
            "playwright_demo.browser.session.async_playwright", return_value=starter
        ):
            with self.assertRaises(RuntimeError):
                async with open_browser_session(headless=True):
                    pass

        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    async def test_launch_failure(self):
        starter, playwright, browser, _, _ = _mock_playwright()
        playwright.chromium.launch.side_effect = PlaywrightError(
            "Executable doesn't exist"
        )
        with patch(
            "playwright_demo.browser.session.async_playwright", return_value=starter
        ):
            with self.assertRaises(BrowserSessionError) as ctx:
                async with open_browser_session(headless=True):
                    self.fail("session body must not run")

        self.assertIn("Executable doesn't exist", ctx.exception.message)
        browser.close.assert_not_called()
        playwright.stop.assert_awaited_once()

    async def test_context_failure_still_closes_browser(self):
        starter, playwright, browser, _, _ = _mock_playwright()
        browser.new_context.side_effect = PlaywrightError("context failed")
        with patch(
            "playwright_demo.browser.session.async_playwright", return_value=starter
        ):
            with self.assertRaises(BrowserSessionError):
                async with open_browser_session(headless=True):
                    pass

        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    async def test_headless_env_default_and_overrides(self):
        starter, playwright, browser, _, _ = _mock_playwright()
        with patch(
            "playwright_demo.browser.session.async_playwright", return_value=starter
        ), patch("playwright_demo.browser.session.is_headless", False):
            async with open_browser_session(
                launch_args=["--mute-audio"], accept_downloads=True
            ):
                pass

        playwright.chromium.launch.assert_awaited_once_with(
            headless=False, args=["--mute-audio"]
        )
        browser.new_context.assert_awaited_once_with(accept_downloads=True)


if __name__ == "__main__":
    unittest.main()
