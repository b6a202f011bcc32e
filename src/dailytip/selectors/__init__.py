# topmark:header:start
#
#   project      : DailyTip
#   file         : __init__.py
#   file_relpath : src/dailytip/selectors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tip selectors (selection strategies)."""

from __future__ import annotations

from dailytip.selectors.base import TipSelector
from dailytip.selectors.poison import PoisonTipSelector
from dailytip.selectors.random_tip import RandomTipSelector

__all__ = [
    "PoisonTipSelector",
    "RandomTipSelector",
    "TipSelector",
]
