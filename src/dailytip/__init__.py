# topmark:header:start
#
#   project      : DailyTip
#   file         : __init__.py
#   file_relpath : src/dailytip/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DailyTip package.

DailyTip shows one randomly chosen tip from one or more curated collections.
The pipeline is assembled from four pluggable parts (loader, selector,
formatter and orchestrator) with `DailyTipBuilder`, and ships a terminal CLI
(``dailytip``) plus a bundler for the browser front end (``dailytip-web``).
"""

from __future__ import annotations

from dailytip.builder import DailyTipBuilder
from dailytip.errors import (
    ConfigurationError,
    DailyTipError,
    LoadError,
    SelectionError,
    UnknownCollectionError,
)
from dailytip.model import Tip, TipCollection

__all__ = [
    "ConfigurationError",
    "DailyTipBuilder",
    "DailyTipError",
    "LoadError",
    "SelectionError",
    "Tip",
    "TipCollection",
    "UnknownCollectionError",
]
