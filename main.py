"""
Playwright UI Interaction Demo - Entry point and configuration file

Users can change settings such as the target page, timeouts and the
elements each demo step touches by modifying the constants below.
"""
# ---------------------------------------------------------------------------
# Default values for main.py execution
# ---------------------------------------------------------------------------

# Page supplying the example markup
TARGET_URL = "https://testingexamples.github.io"

# Element lookup examples
ID_EXAMPLE = "id-example-1"
NAME_EXAMPLE = "name-example-1"
CLASS_EXAMPLE = "class-example-1"
LINK_TEXT_EXAMPLE = "Link Example 1"
XPATH_EXAMPLE = '//input[@type="submit"]'

# Form input examples
TEXT_INPUT_ID = "text-example-1-id"
TEXT_INPUT_VALUE = "hello"
CHECKBOX_ID = "checkbox-example-1-id"
RADIO_ID = "radio-example-1-option-1-id"
SELECT_ID = "select-example-1-id"
SELECT_INDEX = 0

# ---------------------------------------------------------------------------
# User configurable constants (modify as needed)
# ---------------------------------------------------------------------------

# Log level setting ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_LEVEL = "INFO"

# Chromium command line switches
BROWSER_LAUNCH_ARGS = [
    "--verbose",  # Enable verbose logging
    "--disable-notifications",  # Disable notifications such as popups
]

# Whether the browsing context accepts downloads
ACCEPT_DOWNLOADS = False

# Default timeout for Playwright element operations (milliseconds)
DEFAULT_TIMEOUT_MS = 30000

# Timeout for page navigation (milliseconds)
NAVIGATION_TIMEOUT_MS = 30000

# ---------------------------------------------------------------------------
# Execution wrapper
# ---------------------------------------------------------------------------
import sys


def main() -> int:  # noqa: D401
    """Execute the demo wrapper function"""
    # Use dynamic import to avoid circular references
    from playwright_demo.demo import run_demo_mode

    return run_demo_mode()


if __name__ == "__main__":
    sys.exit(main())
