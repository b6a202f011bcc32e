# topmark:header:start
#
#   project      : DailyTip
#   file         : web.py
#   file_relpath : src/dailytip/cli/web.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``dailytip-web`` command: bundle collections for the browser front end.

Outputs (in ``--output-dir``, default ``dist/public``):

- ``tip-data.js``: every collection keyed by name, assigned to
  ``window.tipCollections``.
- ``<name>.js`` (unless ``--no-render``): one tip per collection, pre-rendered
  to HTML and assigned to ``window.tipData_<name>`` (dashes become
  underscores so the name is a valid JavaScript identifier).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from dailytip.builder import DailyTipBuilder
from dailytip.cli.cmd_common import init_console, init_logging, load_config
from dailytip.cli.errors import to_cli_error
from dailytip.cli.options import (
    CONTEXT_SETTINGS,
    collections_dir_option,
    common_verbose_options,
    config_file_option,
)
from dailytip.config.logging import get_logger
from dailytip.constants import (
    COLLECTION_SUFFIX,
    WEB_BUNDLE_FILE_NAME,
    WEB_COLLECTIONS_GLOBAL,
    WEB_DEFAULT_OUTPUT_DIR,
    WEB_TIP_DATA_PREFIX,
)
from dailytip.errors import DailyTipError
from dailytip.formatters.html import HtmlTipFormatter
from dailytip.loaders.json_loader import JsonTipLoader
from dailytip.orchestrator.default import DefaultTipOrchestrator
from dailytip.registry import available_collections
from dailytip.selectors.random_tip import RandomTipSelector

if TYPE_CHECKING:
    from dailytip.cli.console_api import ConsoleLike
    from dailytip.config.logging import DailyTipLogger
    from dailytip.config.model import Config

logger: DailyTipLogger = get_logger(__name__)


def js_identifier(name: str) -> str:
    """Return the ``window`` global used for the rendered tip of collection ``name``."""
    return f"{WEB_TIP_DATA_PREFIX}{name.replace('-', '_')}"


def js_assignment(target: str, data: Any) -> str:
    """Return a JavaScript statement assigning ``data`` to ``target`` as 2-space indented JSON."""
    return f"{target} = {json.dumps(data, indent=2, ensure_ascii=False)};"


def render_tip_html(loader: JsonTipLoader) -> str:
    """Render one random tip of ``loader`` to HTML through the tip pipeline.

    Args:
        loader (JsonTipLoader): An already loaded collection.

    Returns:
        str: The HTML fragment.
    """
    orchestrator = (
        DailyTipBuilder[str]()
        .with_loader(loader)
        .with_selector(RandomTipSelector())
        .with_formatter(HtmlTipFormatter())
        .with_orchestrator(DefaultTipOrchestrator)
        .build()
    )
    return orchestrator.get_tip()


def bundle_collections(
    collections_dir: Path,
    output_dir: Path,
    *,
    render: bool = True,
) -> list[Path]:
    """Write the browser bundle for every collection in ``collections_dir``.

    Args:
        collections_dir (Path): Directory containing ``*.json`` collections.
        output_dir (Path): Destination directory; created if missing.
        render (bool): Also write one pre-rendered ``<name>.js`` per collection.

    Returns:
        list[Path]: The files written, bundle first. Empty when there are no
        collections (nothing is written in that case).

    Raises:
        LoadError: If a collection cannot be read or parsed.
        SelectionError: If ``render`` is set and a collection has no tips.
    """
    names: list[str] = available_collections(collections_dir)
    if not names:
        return []

    loaders: dict[str, JsonTipLoader] = {
        name: JsonTipLoader(collections_dir / f"{name}{COLLECTION_SUFFIX}") for name in names
    }
    bundle: dict[str, Any] = {
        name: loader.collection.to_dict() for name, loader in loaders.items()
    }

    output_dir.mkdir(parents=True, exist_ok=True)
    bundle_path: Path = output_dir / WEB_BUNDLE_FILE_NAME
    bundle_path.write_text(js_assignment(WEB_COLLECTIONS_GLOBAL, bundle), encoding="utf-8")
    logger.info("Bundled %d collection(s) into %s", len(bundle), bundle_path)
    written: list[Path] = [bundle_path]

    if render:
        for name, loader in loaders.items():
            target: Path = output_dir / f"{name}.js"
            html: str = render_tip_html(loader)
            target.write_text(
                js_assignment(f"window.{js_identifier(name)}", {"html": html}),
                encoding="utf-8",
            )
            logger.debug("Rendered collection '%s' into %s", name, target)
            written.append(target)

    return written


@click.command(
    name="dailytip-web",
    context_settings=CONTEXT_SETTINGS,
    help="Bundle tip collections into JavaScript files for the browser front end.",
)
@collections_dir_option
@config_file_option
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=WEB_DEFAULT_OUTPUT_DIR,
    show_default=True,
    help="Directory the JavaScript files are written to (created if missing).",
)
@click.option(
    "--render/--no-render",
    default=True,
    show_default=True,
    help="Also pre-render one HTML tip per collection into <name>.js.",
)
@common_verbose_options
@click.pass_context
def web(
    ctx: click.Context,
    collections_dir: Path | None,
    config_files: tuple[Path, ...],
    output_dir: Path,
    render: bool,
    verbose: int,
    quiet: int,
) -> None:
    """Entry point for the ``dailytip-web`` command."""
    init_logging(ctx, verbose=verbose, quiet=quiet)
    config: Config = load_config(config_files=config_files, collections_dir=collections_dir)
    console: ConsoleLike = init_console(ctx, config)
    directory: Path = config.resolved_collections_dir()

    try:
        written: list[Path] = bundle_collections(directory, output_dir, render=render)
    except DailyTipError as exc:
        logger.debug("Bundling failed: %r", exc)
        raise to_cli_error(exc) from exc

    if not written:
        console.warn(f"No collection files found in {directory}")
        return

    for path in written:
        console.print(f"Written: {path}")


if __name__ == "__main__":
    web()
