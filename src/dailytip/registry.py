# topmark:header:start
#
#   project      : DailyTip
#   file         : registry.py
#   file_relpath : src/dailytip/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collection registry: maps collection names to JSON files.

A *collection name* is the stem of a ``*.json`` file in a collections
directory (``productivity-hacks`` for ``productivity-hacks.json``). The bundled
collections ship in the `dailytip.collections` package.
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING

from dailytip.config.logging import get_logger
from dailytip.constants import BUNDLED_COLLECTIONS_PACKAGE, COLLECTION_SUFFIX
from dailytip.errors import UnknownCollectionError
from dailytip.loaders.composite import CompositeTipLoader
from dailytip.loaders.json_loader import JsonTipLoader

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from dailytip.config.logging import DailyTipLogger
    from dailytip.loaders.base import TipLoader

logger: DailyTipLogger = get_logger(__name__)


def bundled_collections_dir() -> Path:
    """Return the directory holding the bundled collections."""
    return Path(str(files(BUNDLED_COLLECTIONS_PACKAGE)))


def available_collections(directory: Path) -> list[str]:
    """List the collection names found in ``directory``.

    Args:
        directory (Path): Directory to scan (not recursive).

    Returns:
        list[str]: Sorted collection names; empty when the directory is missing.
    """
    if not directory.is_dir():
        logger.debug("Collections directory %s does not exist", directory)
        return []
    names: list[str] = sorted(
        p.stem for p in directory.iterdir() if p.is_file() and p.suffix == COLLECTION_SUFFIX
    )
    logger.trace("Collections in %s: %s", directory, names)
    return names


def resolve_collections(names: Iterable[str], directory: Path) -> list[Path]:
    """Map collection names to file paths.

    Args:
        names (Iterable[str]): Requested names, in order. Duplicates are kept.
        directory (Path): Collections directory.

    Returns:
        list[Path]: One path per requested name.

    Raises:
        UnknownCollectionError: If any name is not available; lists every
            unknown name.
    """
    requested: list[str] = list(names)
    known: set[str] = set(available_collections(directory))
    unknown: list[str] = [name for name in requested if name not in known]
    if unknown:
        raise UnknownCollectionError(unknown)
    return [directory / f"{name}{COLLECTION_SUFFIX}" for name in requested]


def build_loader(paths: Sequence[Path]) -> TipLoader:
    """Return a loader for ``paths``.

    A single path yields a plain `JsonTipLoader`; several are combined in a
    `CompositeTipLoader`, which tags each tip with its collection title.

    Args:
        paths (Sequence[Path]): Collection files, at least one.

    Returns:
        TipLoader: The loader.

    Raises:
        ValueError: If ``paths`` is empty.
        LoadError: If a collection cannot be read or parsed.
    """
    if not paths:
        raise ValueError("build_loader() needs at least one collection path")
    if len(paths) == 1:
        return JsonTipLoader(paths[0])
    return CompositeTipLoader([JsonTipLoader(p) for p in paths])
