# topmark:header:start
#
#   project      : DailyTip
#   file         : random_tip.py
#   file_relpath : src/dailytip/selectors/random_tip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Uniform random tip selection."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from dailytip.config.logging import get_logger
from dailytip.errors import SelectionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dailytip.config.logging import DailyTipLogger
    from dailytip.model import Tip

logger: DailyTipLogger = get_logger(__name__)


class RandomTipSelector:
    """Pick a tip uniformly at random.

    Each of the ``n`` candidates is returned with probability ``1/n``.

    Args:
        rng (random.Random | None): Source of randomness. Pass a seeded
            `random.Random` for reproducible picks; defaults to a fresh,
            OS-seeded generator.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng: random.Random = rng if rng is not None else random.Random()

    def get_tip(self, tips: Sequence[Tip]) -> Tip:
        """Return a uniformly chosen tip.

        Args:
            tips (Sequence[Tip]): Candidate tips.

        Returns:
            Tip: The selected tip.

        Raises:
            SelectionError: If ``tips`` is empty (precondition violation).
        """
        if not tips:
            raise SelectionError("cannot select a tip from an empty tip list")
        index: int = self._rng.randrange(len(tips))
        logger.trace("Selected tip %d of %d", index + 1, len(tips))
        return tips[index]
