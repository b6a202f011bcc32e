# topmark:header:start
#
#   project      : DailyTip
#   file         : test_poison.py
#   file_relpath : tests/test_poison.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the poison stand-ins."""

from __future__ import annotations

import pytest

from dailytip.errors import ConfigurationError
from dailytip.formatters.poison import PoisonTipFormatter
from dailytip.loaders.base import collection_title_of
from dailytip.loaders.poison import PoisonTipLoader
from dailytip.model import Tip
from dailytip.orchestrator.poison import PoisonTipOrchestrator
from dailytip.selectors.poison import PoisonTipSelector


def test_poison_loader_raises_configuration_error() -> None:
    """It should name the component and the method in the error."""
    with pytest.raises(ConfigurationError) as excinfo:
        PoisonTipLoader().get_tips()

    assert excinfo.value.component == "PoisonTipLoader"
    assert excinfo.value.method == "get_tips"
    assert "poison implementation" in str(excinfo.value)


def test_poison_loader_has_no_title() -> None:
    """The poison loader should not offer a collection title."""
    assert collection_title_of(PoisonTipLoader()) is None


def test_poison_selector_raises() -> None:
    """The poison selector should raise on any input."""
    with pytest.raises(ConfigurationError, match="PoisonTipSelector"):
        PoisonTipSelector().get_tip([Tip("a", "b")])


def test_poison_formatter_raises() -> None:
    """The poison formatter should raise with or without a category."""
    with pytest.raises(ConfigurationError, match="format_tip"):
        PoisonTipFormatter().format_tip(Tip("a", "b"), "Category")


def test_poison_orchestrator_accepts_anything_then_raises() -> None:
    """The poison orchestrator should construct from any arguments and raise on use."""
    orchestrator = PoisonTipOrchestrator(object(), object(), formatter=object())

    with pytest.raises(ConfigurationError, match="get_tip"):
        orchestrator.get_tip()
