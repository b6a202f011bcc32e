# topmark:header:start
#
#   project      : DailyTip
#   file         : main.py
#   file_relpath : src/dailytip/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``dailytip`` command: print one random tip from the chosen collections.

Examples:
    ```sh
    dailytip productivity-hacks
    dailytip leadership-tone productivity-hacks --format markdown
    dailytip --list
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dailytip.builder import DailyTipBuilder
from dailytip.cli.cli_types import EnumChoiceParam
from dailytip.cli.cmd_common import init_console, init_logging, load_config
from dailytip.cli.errors import to_cli_error
from dailytip.cli.exit_codes import ExitCode
from dailytip.cli.options import (
    CONTEXT_SETTINGS,
    collections_dir_option,
    common_color_options,
    common_verbose_options,
    config_file_option,
)
from dailytip.config.logging import get_logger
from dailytip.config.model import MutableConfig
from dailytip.constants import DAILYTIP_VERSION
from dailytip.errors import DailyTipError, UnknownCollectionError
from dailytip.formatters.formats import OutputFormat, make_formatter
from dailytip.orchestrator.default import DefaultTipOrchestrator
from dailytip.registry import available_collections, build_loader, resolve_collections
from dailytip.selectors.random_tip import RandomTipSelector

if TYPE_CHECKING:
    from dailytip.cli.console_api import ConsoleLike
    from dailytip.config.color import ColorMode
    from dailytip.config.logging import DailyTipLogger
    from dailytip.config.model import Config
    from dailytip.orchestrator.base import TipOrchestrator

logger: DailyTipLogger = get_logger(__name__)


def _collections_dir_for_help(ctx: click.Context) -> Path:
    """Return the directory whose collections the help text should list."""
    if isinstance(ctx.obj, dict) and "collections_dir" in ctx.obj:
        return ctx.obj["collections_dir"]
    # --help is eager: options parsed after it are not available yet
    explicit: Path | None = ctx.params.get("collections_dir")
    if explicit is not None:
        return Path(explicit)
    return MutableConfig.load_merged().freeze().resolved_collections_dir()


class DailyTipCommand(click.Command):
    """Click command whose help lists the available collections."""

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Append the available collections and usage examples to the help."""
        names: list[str] = available_collections(_collections_dir_for_help(ctx))
        with formatter.section("Available collections"):
            if names:
                for name in names:
                    formatter.write(f"{'':>{formatter.current_indent}}- {name}\n")
            else:
                formatter.write_text("(none found)")
        example: str = names[0] if names else "productivity-hacks"
        with formatter.section("Examples"):
            formatter.write(f"{'':>{formatter.current_indent}}dailytip {example}\n")
            formatter.write(
                f"{'':>{formatter.current_indent}}dailytip {example} --format markdown\n"
            )
        super().format_epilog(ctx, formatter)


def _fail_with_help(ctx: click.Context, console: ConsoleLike, message: str | None) -> None:
    """Print an optional error, then the help text, and exit with `ExitCode.FAILURE`."""
    if message:
        console.error(f"Error: {message}")
        console.print()
    console.print(ctx.get_help())
    ctx.exit(ExitCode.FAILURE)


@click.command(
    name="dailytip",
    cls=DailyTipCommand,
    context_settings=CONTEXT_SETTINGS,
    help="Show a random tip from one or more COLLECTIONS. "
    "Tips from several collections are merged and tagged with their collection title.",
)
@click.argument("collections", nargs=-1, metavar="[COLLECTIONS]...")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format: text (default), markdown, or html.",
)
@common_color_options
@collections_dir_option
@config_file_option
@click.option(
    "--list",
    "list_collections",
    is_flag=True,
    help="List the available collections and exit.",
)
@common_verbose_options
@click.version_option(DAILYTIP_VERSION, "--version", prog_name="dailytip")
@click.pass_context
def cli(
    ctx: click.Context,
    collections: tuple[str, ...],
    output_format: OutputFormat | None,
    color_mode: ColorMode | None,
    no_color: bool,
    collections_dir: Path | None,
    config_files: tuple[Path, ...],
    list_collections: bool,
    verbose: int,
    quiet: int,
) -> None:
    """Entry point for the ``dailytip`` command."""
    init_logging(ctx, verbose=verbose, quiet=quiet)
    config: Config = load_config(
        config_files=config_files,
        collections_dir=collections_dir,
        output_format=output_format,
        color_mode=color_mode,
        no_color=no_color,
    )
    ctx.obj["config"] = config
    directory: Path = config.resolved_collections_dir()
    ctx.obj["collections_dir"] = directory
    console: ConsoleLike = init_console(ctx, config)

    if list_collections:
        names: list[str] = available_collections(directory)
        if not names:
            console.warn(f"No collection files found in {directory}")
        for name in names:
            console.print(name)
        return

    if not collections:
        _fail_with_help(ctx, console, None)

    try:
        paths: list[Path] = resolve_collections(collections, directory)
    except UnknownCollectionError as exc:
        logger.debug("Unknown collections %s in %s", exc.names, directory)
        _fail_with_help(ctx, console, str(exc))
        return

    try:
        orchestrator: TipOrchestrator[str] = (
            DailyTipBuilder[str]()
            .with_loader(build_loader(paths))
            .with_selector(RandomTipSelector())
            .with_formatter(
                make_formatter(
                    config.resolved_output_format(),
                    color=bool(ctx.obj["color_enabled"]),
                )
            )
            .with_orchestrator(DefaultTipOrchestrator)
            .build()
        )
        tip: str = orchestrator.get_tip()
    except DailyTipError as exc:
        logger.debug("Tip pipeline failed: %r", exc)
        raise to_cli_error(exc) from exc

    console.print(tip)


if __name__ == "__main__":
    cli()
