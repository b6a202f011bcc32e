# topmark:header:start
#
#   project      : DailyTip
#   file         : __init__.py
#   file_relpath : src/dailytip/orchestrator/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tip orchestrators."""

from __future__ import annotations

from dailytip.orchestrator.base import OrchestratorFactory, TipOrchestrator
from dailytip.orchestrator.default import DefaultTipOrchestrator
from dailytip.orchestrator.poison import PoisonTipOrchestrator

__all__ = [
    "DefaultTipOrchestrator",
    "OrchestratorFactory",
    "PoisonTipOrchestrator",
    "TipOrchestrator",
]
