# topmark:header:start
#
#   project      : DailyTip
#   file         : composite.py
#   file_relpath : src/dailytip/loaders/composite.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Combine several loaders into one.

`CompositeTipLoader` flattens the tips of its sub-loaders, in order, into a
single list. Collection identity survives only in the tip titles: every tip
coming from a loader that reports a collection title gets ``" *<title>*"``
appended, e.g. ``"Ask first *Leadership Tone*"``. The HTML formatter later
recognizes that trailing span and renders it as a small caption.

Example:
    ```python
    composite = CompositeTipLoader([
        JsonTipLoader("leadership-tone.json"),
        JsonTipLoader("productivity-hacks.json"),
    ])
    composite.get_collection_title()  # "Leadership Tone, Productivity Hacks"
    ```
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from dailytip.config.logging import get_logger
from dailytip.loaders.base import collection_title_of

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from dailytip.config.logging import DailyTipLogger
    from dailytip.loaders.base import TipLoader
    from dailytip.model import Tip

logger: DailyTipLogger = get_logger(__name__)

TITLE_SEPARATOR: str = ", "


def tag_title(title: str, collection_title: str) -> str:
    """Append a collection name to a tip title as a trailing italic span."""
    return f"{title} *{collection_title}*"


class CompositeTipLoader:
    """Present an ordered sequence of loaders as a single loader.

    Sub-loaders are queried once, at construction time. Tips are neither
    deduplicated nor reordered; loaders without a collection title (or with an
    empty one) contribute their tips unchanged and add nothing to the combined
    title.
    """

    def __init__(self, loaders: Iterable[TipLoader]) -> None:
        tips: list[Tip] = []
        titles: list[str] = []
        for loader in loaders:
            loader_title: str | None = collection_title_of(loader)
            loader_tips: Sequence[Tip] = loader.get_tips()
            if loader_title:
                tips.extend(replace(t, title=tag_title(t.title, loader_title)) for t in loader_tips)
                titles.append(loader_title)
            else:
                tips.extend(loader_tips)
            logger.trace("Merged %d tip(s) from %r", len(loader_tips), loader)

        self._tips: tuple[Tip, ...] = tuple(tips)
        self._title: str = TITLE_SEPARATOR.join(titles)
        logger.debug("Composite loader: %d tip(s) from '%s'", len(self._tips), self._title)

    def get_tips(self) -> tuple[Tip, ...]:
        """Return the merged tips, tagged with their collection names."""
        return self._tips

    def get_collection_title(self) -> str:
        """Return the sub-loaders' collection titles joined with ``", "``."""
        return self._title
