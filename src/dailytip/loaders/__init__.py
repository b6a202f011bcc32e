# topmark:header:start
#
#   project      : DailyTip
#   file         : __init__.py
#   file_relpath : src/dailytip/loaders/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tip loaders.

Public names:
    - `TipLoader`, `TitledTipLoader`: loader contracts.
    - `collection_title_of`: query the optional collection-title capability.
    - `JsonTipLoader`: one JSON collection file.
    - `StaticTipLoader`: an in-memory collection.
    - `CompositeTipLoader`: several loaders merged into one.
    - `PoisonTipLoader`: fail-fast builder default.
"""

from __future__ import annotations

from dailytip.loaders.base import TipLoader, TitledTipLoader, collection_title_of
from dailytip.loaders.composite import CompositeTipLoader
from dailytip.loaders.json_loader import JsonTipLoader, load_collection
from dailytip.loaders.poison import PoisonTipLoader
from dailytip.loaders.static import StaticTipLoader

__all__ = [
    "CompositeTipLoader",
    "JsonTipLoader",
    "PoisonTipLoader",
    "StaticTipLoader",
    "TipLoader",
    "TitledTipLoader",
    "collection_title_of",
    "load_collection",
]
