# topmark:header:start
#
#   project      : DailyTip
#   file         : options.py
#   file_relpath : src/dailytip/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities shared by ``dailytip`` and ``dailytip-web``.

This module centralizes reusable options (verbosity, color, collections
directory) and their resolution logic, so commands stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from dailytip.cli.cli_types import EnumChoiceParam
from dailytip.cli.errors import DailyTipUsageError
from dailytip.config.color import ColorMode
from dailytip.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        DailyTipUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One -q sets ERROR, two or more set CRITICAL. Default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DailyTipUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 2:  # -qq
        return LOG_LEVELS["CRITICAL"]
    if quiet_count == 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity on stderr. Repeat for more detail (-vvv for TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors. Repeat to silence everything but critical errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def collections_dir_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --collections-dir option to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--collections-dir",
        "collections_dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        # must be parsed before an eager --help that lists collections
        is_eager=True,
        help="Directory containing *.json tip collections (default: bundled collections).",
    )(f)


def config_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the repeatable --config option to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        multiple=True,
        help="Additional TOML config file. Can be given multiple times; later files win.",
    )(f)
