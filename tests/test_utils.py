import logging
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

import main as constants
from playwright_demo.browser.utils import get_launch_args
from playwright_demo.utils import (add_debug_log, log_operation_error,
                                   setup_logging)


class TestSetupLogging(unittest.TestCase):
    """Logging configuration"""

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, root.handlers[:])
        self.addCleanup(self._restore)

    def _restore(self):
        root = logging.getLogger()
        root.handlers[:] = self._saved[1]
        root.setLevel(self._saved[0])

    def test_level_from_constants(self):
        with patch.object(constants, "LOG_LEVEL", "DEBUG"), patch.dict(
            os.environ, {"CI": "false"}
        ):
            setup_logging()

        root = logging.getLogger()
        self.assertEqual(root.level, logging.DEBUG)
        self.assertEqual(len(root.handlers), 1)
        self.assertIs(root.handlers[0].stream, sys.stdout)

    def test_ci_caps_level_at_info(self):
        with patch.object(constants, "LOG_LEVEL", "ERROR"), patch.dict(
            os.environ, {"CI": "true"}
        ):
            setup_logging()

        root = logging.getLogger()
        self.assertEqual(root.level, logging.INFO)
        self.assertIn("%(lineno)d", root.handlers[0].formatter._fmt)


class TestLogHelpers(unittest.TestCase):
    """Debug log and operation error log helpers"""

    def test_add_debug_log_uses_caller_name(self):
        with self.assertLogs("playwright_demo.utils", level="DEBUG") as logs:
            add_debug_log("hello")
        self.assertEqual(
            logs.output, ["DEBUG:playwright_demo.utils:[test_add_debug_log_uses_caller_name] hello"]
        )

    def test_add_debug_log_level_and_group(self):
        with self.assertLogs("playwright_demo.utils", level="WARNING") as logs:
            add_debug_log("careful", group="session", level="warning")
        self.assertEqual(logs.output, ["WARNING:playwright_demo.utils:[session] careful"])

    def test_log_operation_error_details(self):
        with self.assertLogs("playwright_demo.utils", level="INFO") as logs:
            log_operation_error("fill", "Timeout", {"target": "#text-example-1-id"})
        self.assertEqual(
            logs.output,
            [
                "INFO:playwright_demo.utils:Operation error - fill: Timeout "
                "(target=#text-example-1-id)"
            ],
        )


class TestLaunchArgs(unittest.TestCase):
    def test_fresh_copy(self):
        args = get_launch_args()
        self.assertEqual(args, ["--verbose", "--disable-notifications"])
        args.append("--mute-audio")
        self.assertNotIn("--mute-audio", constants.BROWSER_LAUNCH_ARGS)


if __name__ == "__main__":
    unittest.main()
