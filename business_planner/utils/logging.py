"""
Stderr logging for Business Planner

The MCP stdio transport owns stdout, so tool and registry messages are
written to stderr only. Module loggers under ``business_planner.*``
propagate to the package logger configured here; the CLI and the server
share it.

Controlled by Config.ENABLE_LOGGING (off = CRITICAL only) and
Config.DEBUG (DEBUG instead of INFO).
"""

import logging
import sys

from ..config import Config

PACKAGE_LOGGER = "business_planner"
LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level() -> int:
    if not Config.ENABLE_LOGGING:
        return logging.CRITICAL
    return logging.DEBUG if Config.DEBUG else logging.INFO


def setup_logging(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Configure ``name`` from Config and attach one stderr handler

    Safe to call repeatedly: the level follows the current Config, and a
    logger that already has handlers keeps them.
    """
    level = _level()
    log = logging.getLogger(name)
    log.setLevel(level)

    if not Config.ENABLE_LOGGING or log.handlers:
        return log

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    log.addHandler(handler)
    return log


logger = setup_logging()
