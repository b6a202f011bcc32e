# topmark:header:start
#
#   project      : DailyTip
#   file         : poison.py
#   file_relpath : src/dailytip/formatters/poison.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Poison formatter used as the builder's default."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from dailytip.errors import ConfigurationError

if TYPE_CHECKING:
    from dailytip.model import Tip


class PoisonTipFormatter:
    """Formatter stand-in that fails loudly when used.

    Its return type is `NoReturn`, so it satisfies ``TipFormatter[T]`` for any ``T``.
    """

    def format_tip(
        self,
        tip: Tip,  # pylint: disable=unused-argument
        category_title: str | None = None,  # pylint: disable=unused-argument
    ) -> NoReturn:
        """Always raise.

        Raises:
            ConfigurationError: Always.
        """
        raise ConfigurationError(type(self).__name__, "format_tip")
