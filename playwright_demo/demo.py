"""
Demo Procedure Module

Opens the example page and walks through the element lookup strategies and
form-control interactions one after another, printing the markup of every
element it touches. A failure in any step ends the walk: it is reported
once at the outer boundary and the browser is released either way.
"""

from __future__ import annotations

import asyncio
import logging
import sys
import traceback
from typing import Any, Awaitable, Callable

import main as constants
from playwright_demo.browser import (build_locator, check, get_input_value,
                                     get_outer_html, get_selected_option,
                                     goto_url, input_text,
                                     open_browser_session, select_option)
from playwright_demo.utils import setup_logging

logger = logging.getLogger(__name__)

Step = Callable[[Any], Awaitable[None]]


async def print_markup(locator: Any) -> str:
    """Print the outer HTML of the element and return it"""
    html = await get_outer_html(locator)
    print(html)
    return html


# ---------------------------------------------------------------------------
# Element lookup
# ---------------------------------------------------------------------------


async def find_by_id(page: Any) -> None:
    # <p id="id-example-1">Lorem Ipsum</p>
    await print_markup(build_locator(page, "id", constants.ID_EXAMPLE))


async def find_by_name(page: Any) -> None:
    # <p name="name-example-1">Lorem Ipsum</p>
    await print_markup(build_locator(page, "name", constants.NAME_EXAMPLE))


async def find_by_class(page: Any) -> None:
    # <p class="class-example-1">Lorem Ipsum</p>
    await print_markup(build_locator(page, "class", constants.CLASS_EXAMPLE))


async def find_by_link_text(page: Any) -> None:
    # <a href="https://example.com">Link Example 1</a>
    await print_markup(build_locator(page, "link_text", constants.LINK_TEXT_EXAMPLE))


async def find_by_xpath(page: Any) -> None:
    # <input type=submit>
    await print_markup(build_locator(page, "xpath", constants.XPATH_EXAMPLE))


# ---------------------------------------------------------------------------
# Form inputs
# ---------------------------------------------------------------------------


async def type_in_text_input(page: Any) -> None:
    text = build_locator(page, "id", constants.TEXT_INPUT_ID)
    await print_markup(text)
    await input_text(text, constants.TEXT_INPUT_VALUE)


async def check_checkbox(page: Any) -> None:
    checkbox = build_locator(page, "id", constants.CHECKBOX_ID)
    await print_markup(checkbox)
    await check(checkbox)


async def check_radio(page: Any) -> None:
    radio = build_locator(page, "id", constants.RADIO_ID)
    await print_markup(radio)
    await check(radio)


async def choose_select_option(page: Any) -> None:
    """Select by position, then read back the value and the checked option.

    Example HTML:

        <select id="select-example-1-id">
          <option>alfa</option>
          <option>bravo</option>
          <option>charlie</option>
        </select>
    """
    select = build_locator(page, "id", constants.SELECT_ID)
    await print_markup(select)

    await select_option(select, index=constants.SELECT_INDEX)

    selected_value = await get_input_value(select)
    print(f"Selected option value: {selected_value}")

    await print_markup(get_selected_option(select))


DEMO_STEPS: list[Step] = [
    find_by_id,
    find_by_name,
    find_by_class,
    find_by_link_text,
    find_by_xpath,
    type_in_text_input,
    check_checkbox,
    check_radio,
    choose_select_option,
]

# ---------------------------------------------------------------------------
# Outer boundary
# ---------------------------------------------------------------------------


def report_failure(err: BaseException) -> None:
    """Print a failure caught at the outer boundary.

    Any raised exception is printed with its message and traceback. The
    ``message`` attribute of Playwright errors and this package's own is
    preferred over ``str(err)``. A failure without a traceback gets the
    generic notice.
    """
    if isinstance(err, Exception) and err.__traceback__ is not None:
        print(getattr(err, "message", None) or str(err))
        print("".join(traceback.format_exception(err)))
    else:
        print(f"An unknown error occurred: {err!r}")


async def run_demo(
    url: str | None = None,
    headless: bool | None = None,
    steps: list[Step] | None = None,
) -> dict[str, Any]:
    """Run every demo step against ``url`` inside one browser session.

    Returns:
        ``{"status": "success" | "error", "completed": [step names], ...}``
        with ``message`` set on error. Browser launch failures propagate.
    """
    target_url = url or constants.TARGET_URL
    demo_steps = DEMO_STEPS if steps is None else steps
    result: dict[str, Any] = {"status": "success", "completed": []}

    async with open_browser_session(headless=headless) as session:
        try:
            await goto_url(session.page, target_url)
            for index, step in enumerate(demo_steps, start=1):
                logger.info("--- Step %s: %s ---", index, step.__name__)
                await step(session.page)
                result["completed"].append(step.__name__)
        except Exception as err:
            report_failure(err)
            result["status"] = "error"
            result["message"] = str(err)

    return result


def run_demo_mode() -> int:  # noqa: D401
    """Execute the demo. Entry point logic called by main.py."""

    setup_logging()
    logger.info("Executing demo against %s", constants.TARGET_URL)

    try:
        result = asyncio.run(run_demo())
    except Exception as e:
        print(e, file=sys.stderr)
        return 1

    if result["status"] != "success":
        logger.error("Demo failed: %s", result.get("message", "Unknown error"))
        return 1

    logger.info("Processing complete (%s steps)", len(result["completed"]))
    return 0
