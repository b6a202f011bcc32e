# topmark:header:start
#
#   project      : DailyTip
#   file         : cmd_common.py
#   file_relpath : src/dailytip/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared setup steps for DailyTip commands.

Both commands follow the same sequence:

1. `init_logging` configures diagnostics from ``-v``/``-q`` (or the
   ``DAILYTIP_LOG_LEVEL`` environment variable, which wins).
2. `load_config` merges config files, environment and CLI overrides.
3. `init_console` resolves color and stores a `ClickConsole` in ``ctx.obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dailytip.cli.console import ClickConsole
from dailytip.cli.options import resolve_verbosity
from dailytip.config.color import ColorMode, resolve_color_mode
from dailytip.config.logging import get_logger, resolve_env_log_level, setup_logging
from dailytip.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from dailytip.cli.console_api import ConsoleLike
    from dailytip.config.logging import DailyTipLogger
    from dailytip.config.model import Config
    from dailytip.formatters.formats import OutputFormat

logger: DailyTipLogger = get_logger(__name__)


def init_logging(ctx: click.Context, *, verbose: int, quiet: int) -> int:
    """Configure internal logging and remember the level on the context.

    Args:
        ctx (click.Context): Current Click context.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.

    Returns:
        int: The effective logging level.
    """
    ctx.ensure_object(dict)
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    return level


def load_config(
    *,
    config_files: Iterable[Path] = (),
    collections_dir: Path | None = None,
    output_format: OutputFormat | None = None,
    color_mode: ColorMode | None = None,
    no_color: bool = False,
) -> Config:
    """Merge config files, environment and CLI options into a `Config`.

    Args:
        config_files (Iterable[Path]): Files given with ``--config``.
        collections_dir (Path | None): ``--collections-dir``.
        output_format (OutputFormat | None): ``--format``.
        color_mode (ColorMode | None): ``--color``.
        no_color (bool): ``--no-color``; forces ``ColorMode.NEVER``.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.load_merged(extra_config_files=config_files)
    draft.apply_cli_args(
        {
            "collections_dir": collections_dir,
            "output_format": output_format,
            "color_mode": ColorMode.NEVER if no_color else color_mode,
        }
    )
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


def init_console(ctx: click.Context, config: Config) -> ConsoleLike:
    """Resolve color for ``config`` and store the console on the context.

    Args:
        ctx (click.Context): Current Click context.
        config (Config): The effective configuration.

    Returns:
        ConsoleLike: The console for program output.
    """
    ctx.ensure_object(dict)
    enable_color: bool = resolve_color_mode(
        color_mode_override=config.color_mode,
        output_format=config.output_format,
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console
    return console
