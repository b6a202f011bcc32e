# topmark:header:start
#
#   project      : DailyTip
#   file         : errors.py
#   file_relpath : src/dailytip/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DailyTip CLI.

Core errors from `dailytip.errors` are Click-agnostic; `to_cli_error` wraps
them in a `click.ClickException` subclass carrying the matching exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from dailytip.cli.exit_codes import ExitCode
from dailytip.errors import ConfigurationError, LoadError, SelectionError


class DailyTipCliError(click.ClickException):
    """Base class for all DailyTip CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class DailyTipUsageError(DailyTipCliError):
    """Error for invalid command line option combinations."""

    exit_code = ExitCode.USAGE_ERROR


class DailyTipDataError(DailyTipCliError):
    """Error for unreadable, malformed or empty collections."""

    exit_code = ExitCode.DATA_ERROR


class DailyTipConfigError(DailyTipCliError):
    """Error for a tip pipeline used before it was fully configured."""

    exit_code = ExitCode.CONFIG_ERROR


def to_cli_error(exc: Exception) -> DailyTipCliError:
    """Wrap a core DailyTip error in the matching CLI error.

    Args:
        exc (Exception): The error raised by the tip pipeline.

    Returns:
        DailyTipCliError: A Click exception with the appropriate exit code.
    """
    if isinstance(exc, ConfigurationError):
        return DailyTipConfigError(str(exc))
    if isinstance(exc, (LoadError, SelectionError)):
        return DailyTipDataError(str(exc))
    return DailyTipCliError(str(exc))
