# topmark:header:start
#
#   project      : DailyTip
#   file         : poison.py
#   file_relpath : src/dailytip/orchestrator/poison.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Poison orchestrator used as the builder's default."""

from __future__ import annotations

from typing import NoReturn

from dailytip.errors import ConfigurationError


class PoisonTipOrchestrator:
    """Orchestrator stand-in that fails loudly when used.

    The constructor accepts and ignores any arguments, so the class can sit in
    the builder's orchestrator slot; nothing is loaded until a real
    orchestrator is configured.
    """

    def __init__(self, *args: object, **kwargs: object) -> None:
        pass

    def get_tip(self) -> NoReturn:
        """Always raise.

        Raises:
            ConfigurationError: Always.
        """
        raise ConfigurationError(type(self).__name__, "get_tip")
