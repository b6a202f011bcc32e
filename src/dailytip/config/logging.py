# topmark:header:start
#
#   project      : DailyTip
#   file         : logging.py
#   file_relpath : src/dailytip/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics logging for DailyTip.

Adds a ``TRACE`` level below ``DEBUG`` (used by the loaders and the config
layer for per-file detail), a `DailyTipLogger` that exposes it, and a
`ChalkFormatter` that tints records by severity. Records always go to stderr:
stdout is reserved for the tip.

The level comes from ``-v``/``-q`` on the command line unless
``DAILYTIP_LOG_LEVEL`` is set (a level name such as ``TRACE`` or a number).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "DAILYTIP_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
# Below INFO the source location matters more than brevity
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class DailyTipLogger(logging.Logger):
    """Logger with a `trace` method for the ``TRACE`` level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at ``TRACE`` level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(DailyTipLogger)


class ChalkFormatter(logging.Formatter):
    """Color each formatted record according to its level.

    Records below ``TRACE`` are left unstyled.
    """

    # Highest threshold first; the first one not above the record level wins
    LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color for its level."""
        message: str = super().format(record)
        for threshold, colorize in self.LEVEL_STYLES:
            if record.levelno >= threshold:
                return colorize(message)
        return message


def resolve_env_log_level(env: Mapping[str, str] | None = None) -> int | None:
    """Read the log level override from ``DAILYTIP_LOG_LEVEL``.

    Args:
        env (Mapping[str, str] | None): Environment to read; defaults to `os.environ`.

    Returns:
        int | None: The level, or ``None`` when the variable is unset or not a
        recognized level name or number.
    """
    raw: str = (os.environ if env is None else env).get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Send root logger output to stderr through a `ChalkFormatter`.

    Args:
        level (int | None): Level to apply. ``None`` consults
            ``DAILYTIP_LOG_LEVEL`` and falls back to ``CRITICAL``, so that a
            library caller who never configures logging sees nothing.
    """
    if level is None:
        env_level: int | None = resolve_env_log_level()
        level = logging.CRITICAL if env_level is None else env_level

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> DailyTipLogger:
    """Return the `DailyTipLogger` called ``name`` (normally a module's ``__name__``)."""
    return cast("DailyTipLogger", logging.getLogger(name))
