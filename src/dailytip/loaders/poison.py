# topmark:header:start
#
#   project      : DailyTip
#   file         : poison.py
#   file_relpath : src/dailytip/loaders/poison.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Poison loader used as the builder's default."""

from __future__ import annotations

from typing import NoReturn

from dailytip.errors import ConfigurationError


class PoisonTipLoader:
    """Loader stand-in that fails loudly when used.

    `DailyTipBuilder` starts with this loader so that forgetting
    ``with_loader()`` raises at orchestrator construction instead of silently
    serving an empty collection.
    """

    def get_tips(self) -> NoReturn:
        """Always raise.

        Raises:
            ConfigurationError: Always.
        """
        raise ConfigurationError(type(self).__name__, "get_tips")
