"""Debug logging switch."""

from __future__ import annotations

import logging
import os

from ..constants import DEBUG_ENV_VAR

LOGGER = logging.getLogger("httpstatus")


def debug_enabled() -> bool:
    """Check debug mode env flag."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip() == "1"


def configure_logging() -> None:
    """Send package debug logs to stderr when debug mode is on."""
    if not debug_enabled() or LOGGER.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    LOGGER.addHandler(handler)
    LOGGER.setLevel(logging.DEBUG)


def debug_log(logger: logging.Logger, message: str, *args: object) -> None:
    """Emit debug logs to stderr in debug mode only."""
    if debug_enabled():
        logger.debug(message, *args)
