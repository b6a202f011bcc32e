# topmark:header:start
#
#   project      : DailyTip
#   file         : base.py
#   file_relpath : src/dailytip/formatters/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contract for tip formatters.

A formatter turns one `Tip` (plus an optional category title, usually the
collection title) into an output representation ``T``. All bundled formatters
produce ``str``; the type parameter leaves room for richer outputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from dailytip.model import Tip

T_co = TypeVar("T_co", covariant=True)


class TipFormatter(Protocol[T_co]):
    """Protocol for rendering a tip into an output representation."""

    def format_tip(self, tip: Tip, category_title: str | None = None) -> T_co:
        """Render a tip.

        Args:
            tip (Tip): The tip to render.
            category_title (str | None): Optional heading shown above the tip.
                ``None`` and the empty string both mean "no category".

        Returns:
            T_co: The rendered tip.
        """
        ...
