# topmark:header:start
#
#   project      : DailyTip
#   file         : poison.py
#   file_relpath : src/dailytip/selectors/poison.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Poison selector used as the builder's default."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from dailytip.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dailytip.model import Tip


class PoisonTipSelector:
    """Selector stand-in that fails loudly when used."""

    def get_tip(self, tips: Sequence[Tip]) -> NoReturn:  # pylint: disable=unused-argument
        """Always raise.

        Raises:
            ConfigurationError: Always.
        """
        raise ConfigurationError(type(self).__name__, "get_tip")
