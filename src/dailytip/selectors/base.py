# topmark:header:start
#
#   project      : DailyTip
#   file         : base.py
#   file_relpath : src/dailytip/selectors/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contract for tip selectors.

Selectors are strategies: random, sequential, weighted and so on can be swapped
without touching the orchestrator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dailytip.model import Tip


class TipSelector(Protocol):
    """Protocol for choosing one tip out of many."""

    def get_tip(self, tips: Sequence[Tip]) -> Tip:
        """Select a single tip.

        Args:
            tips (Sequence[Tip]): Candidate tips. Must not be empty.

        Returns:
            Tip: The selected tip.
        """
        ...
