"""browser.snapshot

A module that contains the JavaScript snippets evaluated against located
elements. By centralizing evaluate operations in one place, the actions
module and the tests share the exact same expressions.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import ElementOperationError

__all__ = [
    "JS_OUTER_HTML",
    "JS_TAG_NAME",
    "take_outer_html",
    "take_tag_name",
]

JS_OUTER_HTML = "(el) => el.outerHTML"

JS_TAG_NAME = "(el) => el.tagName.toLowerCase()"


async def take_outer_html(locator: Any) -> str:
    """Serialized markup of the element ``locator`` currently resolves to."""

    html = await locator.evaluate(JS_OUTER_HTML)

    if not isinstance(html, str) or not html:
        raise ElementOperationError(
            f"Unexpected outerHTML returned from JS: {html!r}",
            "get_outer_html",
            repr(locator),
        )

    return html


async def take_tag_name(locator: Any) -> str:
    """Lowercase tag name of the resolved element."""

    return str(await locator.evaluate(JS_TAG_NAME))
