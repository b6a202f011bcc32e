# topmark:header:start
#
#   project      : DailyTip
#   file         : json_loader.py
#   file_relpath : src/dailytip/loaders/json_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load a tip collection from a JSON file.

The file is read and validated once, when the loader is constructed. Any
problem (missing file, permission error, bad JSON, wrong shape) raises
`LoadError` immediately; no partial collection is ever produced.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dailytip.config.logging import get_logger
from dailytip.errors import LoadError
from dailytip.model import TipCollection

if TYPE_CHECKING:
    from dailytip.config.logging import DailyTipLogger
    from dailytip.model import Tip

logger: DailyTipLogger = get_logger(__name__)


def load_collection(path: Path) -> TipCollection:
    """Read and validate a JSON tip collection.

    Args:
        path (Path): Path to the JSON document.

    Returns:
        TipCollection: The parsed collection.

    Raises:
        LoadError: If the file cannot be read, is not valid JSON, or does not
            match the collection shape.
    """
    logger.debug("Loading tip collection from %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot read tip collection %s: %s", path, exc)
        raise LoadError(f"cannot read collection: {exc.strerror or exc}", path=path) from exc
    except UnicodeDecodeError as exc:
        logger.error("Cannot decode tip collection %s: %s", path, exc)
        raise LoadError("collection is not valid UTF-8", path=path) from exc

    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Invalid JSON in tip collection %s: %s", path, exc)
        raise LoadError(f"invalid JSON: {exc.msg} (line {exc.lineno})", path=path) from exc

    try:
        collection: TipCollection = TipCollection.from_mapping(data)
    except LoadError as exc:
        logger.error("Malformed tip collection %s: %s", path, exc)
        raise LoadError(str(exc), path=path) from exc

    logger.trace("Loaded %d tip(s) from '%s'", len(collection.tips), collection.title)
    return collection


class JsonTipLoader:
    """Loader for one JSON collection file, parsed eagerly and cached.

    Example:
        ```python
        loader = JsonTipLoader("collections/leadership-tone.json")
        loader.get_tips()              # (Tip(...), ...)
        loader.get_collection_title()  # "Leadership Tone"
        ```
    """

    def __init__(self, path: str | Path) -> None:
        self.path: Path = Path(path)
        self._collection: TipCollection = load_collection(self.path)

    @property
    def collection(self) -> TipCollection:
        """The cached collection."""
        return self._collection

    def get_tips(self) -> tuple[Tip, ...]:
        """Return the cached tips."""
        return self._collection.tips

    def get_collection_title(self) -> str:
        """Return the cached collection title."""
        return self._collection.title

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"JsonTipLoader({str(self.path)!r})"
