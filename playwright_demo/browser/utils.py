"""browser.utils

Browser launch related utility functions module.

Main responsibilities:
1. Headless mode determination (environment variable ``HEADLESS``)
2. Launch argument assembly (`get_launch_args`)

``is_headless`` is a constant imported by other modules and
is determined when the module is loaded.
"""

import os
from typing import List

import main as constants

from ..utils import add_debug_log

__all__ = [
    "is_headless",
    "get_launch_args",
]

# ---------------------------------------------------------------------------
# Headless mode determination
# ---------------------------------------------------------------------------

is_headless: bool = os.environ.get("HEADLESS", "false").lower() == "true"

# ---------------------------------------------------------------------------
# Launch arguments
# ---------------------------------------------------------------------------


def get_launch_args() -> List[str]:  # noqa: D401
    """Chromium command line switches used for every launch.

    Returns a fresh list so callers may extend it.
    """

    args = list(getattr(constants, "BROWSER_LAUNCH_ARGS", []))
    add_debug_log(f"Browser launch args: {args}")
    return args
