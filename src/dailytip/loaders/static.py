# topmark:header:start
#
#   project      : DailyTip
#   file         : static.py
#   file_relpath : src/dailytip/loaders/static.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory tip loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dailytip.model import Tip, TipCollection


class StaticTipLoader:
    """Serve tips from an already-built `TipCollection`."""

    def __init__(self, collection: TipCollection) -> None:
        self._collection = collection

    def get_tips(self) -> tuple[Tip, ...]:
        """Return the collection's tips."""
        return self._collection.tips

    def get_collection_title(self) -> str:
        """Return the collection's title."""
        return self._collection.title
