# topmark:header:start
#
#   project      : CodeScrub
#   file         : logging.py
#   file_relpath : src/codescrub/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic logging for CodeScrub.

Adds a TRACE level below DEBUG (used for per-scan state dumps), a logger class
exposing it, and a colored formatter that tags each record with the CodeScrub
component that emitted it (``scrub.scanner``, ``cli.main``, ...).

Log records are written to ``stderr``: ``stdout`` is reserved for scrubbed content
and dry-run reports. The level comes from ``CODESCRUB_LOG_LEVEL``; without it
only CRITICAL records are shown.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from codescrub.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

PACKAGE_LOGGER_PREFIX: Final[str] = "codescrub."

LOG_FORMAT: Final[str] = "codescrub: [%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "codescrub: [%(levelname)s] [%(component)s:%(lineno)d] %(message)s"
)

# Names accepted in CODESCRUB_LOG_LEVEL
_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Highest threshold first; a record takes the style of the first one it reaches
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ScrubLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` with severity TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(ScrubLogger)


def component_name(logger_name: str) -> str:
    """Return ``logger_name`` without the ``codescrub.`` package prefix."""
    return logger_name.removeprefix(PACKAGE_LOGGER_PREFIX)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors records by severity and fills in ``%(component)s``."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored log line.
        """
        setattr(record, "component", component_name(record.name))
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``CODESCRUB_LOG_LEVEL``, or None.

    Accepts a level name (``TRACE``, ``debug``, ...) or a number. Unknown names
    are treated as unset.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Args:
        level (int | None): Level to use. When None, ``CODESCRUB_LOG_LEVEL`` is
            consulted, falling back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    # Source locations only below INFO
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> ScrubLogger:
    """Return the `ScrubLogger` called ``name`` (usually ``__name__``)."""
    return cast("ScrubLogger", logging.getLogger(name))
