"""
Utility module.

This module provides logging configuration and helpers for debug output.
Main features include application-wide logging configuration, caller-tagged
debug logs and a uniform log line for failed browser operations.
"""

import inspect
import logging
import os
import sys
import traceback
from typing import Any, Union

import main as constants

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """
    Configure application-wide logging.
    Sets the log level according to LOG_LEVEL in main.py.
    """
    root_logger = logging.getLogger()

    # Remove all existing handlers (to prevent duplicate configuration)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    is_ci = os.environ.get("CI", "false").lower() == "true"
    log_level_name = constants.LOG_LEVEL if hasattr(constants, "LOG_LEVEL") else "INFO"
    log_level = getattr(logging, log_level_name, logging.INFO)

    # Always use INFO level or higher in CI environment
    if is_ci and log_level > logging.INFO:
        log_level = logging.INFO

    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if is_ci:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    root_logger.info("Log level set to %s", logging.getLevelName(log_level))


def add_debug_log(
    msg: Union[str, Exception],
    group: str | None = None,
    level: str = "DEBUG",
) -> None:
    """
    Record a debug log message using the standard logger.

    Args:
        msg: Log message (string or exception)
        group: Log group name (uses caller function name if not specified)
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
    """

    if group is None:
        frame = None
        try:
            frame = inspect.currentframe()
            if frame and frame.f_back:
                group = frame.f_back.f_code.co_name
            else:
                group = "Unknown"
        except (AttributeError, ValueError):
            group = "Unknown"
        finally:
            del frame

    if isinstance(msg, Exception):
        message = f"Error: {msg}\n{''.join(traceback.format_exception(msg))}"
    else:
        message = str(msg)

    log_level_int = getattr(logging, level.upper(), logging.DEBUG)
    logger.log(log_level_int, "[%s] %s", group, message)


def log_operation_error(
    operation_type: str,
    error_msg: str,
    details: dict[str, Any] | None = None,
) -> None:
    """
    Log browser operation errors. Always logs at INFO level or higher regardless of log level.

    Args:
        operation_type: Type of operation ("fill", "check", "select_option", etc.)
        error_msg: Error message
        details: Error details (selector, URL, etc.)
    """
    details_str = ""
    if details:
        try:
            details_list = [f"{k}={v}" for k, v in details.items()]
            details_str = f" ({', '.join(details_list)})"
        except (TypeError, ValueError):
            details_str = f" ({details})"

    logger.info("Operation error - %s: %s%s", operation_type, error_msg, details_str)
