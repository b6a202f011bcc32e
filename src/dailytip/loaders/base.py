# topmark:header:start
#
#   project      : DailyTip
#   file         : base.py
#   file_relpath : src/dailytip/loaders/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for tip loaders.

A loader is any object exposing ``get_tips()``. Loaders that know the name of
the collection they read from additionally expose ``get_collection_title()``;
this second capability is optional, and its absence means the loader's tips are
never tagged with a collection name when combined (see
`dailytip.loaders.composite.CompositeTipLoader`).

Both contracts are structural (`typing.Protocol`), so test doubles and ad-hoc
sources need not subclass anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dailytip.model import Tip


@runtime_checkable
class TipLoader(Protocol):
    """Protocol for a source of tips."""

    def get_tips(self) -> Sequence[Tip]:
        """Return all tips from this source.

        Repeated calls on one instance must return equal results.

        Returns:
            Sequence[Tip]: The tips, in source order.
        """
        ...


@runtime_checkable
class TitledTipLoader(TipLoader, Protocol):
    """A `TipLoader` that also knows the title of its collection."""

    def get_collection_title(self) -> str:
        """Return the human-readable name of the source collection."""
        ...


def collection_title_of(loader: TipLoader) -> str | None:
    """Return the collection title of ``loader``, or ``None`` if it has no such capability.

    Args:
        loader (TipLoader): Any loader.

    Returns:
        str | None: The loader's collection title, or ``None`` when the loader does
            not implement ``get_collection_title()``.
    """
    if isinstance(loader, TitledTipLoader):
        return loader.get_collection_title()
    return None
