# topmark:header:start
#
#   project      : DailyTip
#   file         : test_default_orchestrator.py
#   file_relpath : tests/orchestrator/test_default_orchestrator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `DefaultTipOrchestrator`."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from dailytip.errors import ConfigurationError, SelectionError
from dailytip.formatters.markdown import MarkdownTipFormatter
from dailytip.loaders.poison import PoisonTipLoader
from dailytip.loaders.static import StaticTipLoader
from dailytip.model import Tip, TipCollection
from dailytip.orchestrator.default import DefaultTipOrchestrator
from dailytip.selectors.poison import PoisonTipSelector
from dailytip.selectors.random_tip import RandomTipSelector
from tests.conftest import make_tips


class CountingLoader:
    """Untitled loader that counts how often it is queried."""

    def __init__(self, tips: tuple[Tip, ...]) -> None:
        self.tips = tips
        self.calls = 0

    def get_tips(self) -> tuple[Tip, ...]:
        self.calls += 1
        return self.tips


class FirstTipSelector:
    """Deterministic selector recording what it was offered."""

    def __init__(self) -> None:
        self.offered: list[Sequence[Tip]] = []

    def get_tip(self, tips: Sequence[Tip]) -> Tip:
        self.offered.append(tips)
        return tips[0]


class RecordingFormatter:
    """Formatter returning its inputs so tests can inspect them."""

    def format_tip(self, tip: Tip, category_title: str | None = None) -> tuple[Tip, str | None]:
        return tip, category_title


class MutableListLoader:
    """Titled loader handing out the very list it keeps."""

    def __init__(self, title: str, tips: list[Tip]) -> None:
        self.title = title
        self.tips = tips

    def get_tips(self) -> list[Tip]:
        return self.tips

    def get_collection_title(self) -> str:
        return self.title


def test_loader_is_queried_once() -> None:
    """The loader should be read at construction only, not per tip."""
    loader = CountingLoader(make_tips(3))
    orchestrator = DefaultTipOrchestrator(loader, RandomTipSelector(), MarkdownTipFormatter())

    for _ in range(5):
        orchestrator.get_tip()

    assert loader.calls == 1


def test_tips_are_a_snapshot_of_the_loader_source() -> None:
    """Changing the loader's list after construction should not reach the orchestrator."""
    loader = MutableListLoader("X", [Tip("A", "a")])
    orchestrator = DefaultTipOrchestrator(loader, RandomTipSelector(), MarkdownTipFormatter())

    loader.tips[0] = Tip("B", "b")
    loader.tips.append(Tip("C", "c"))
    loader.title = "Y"

    assert orchestrator.tips == (Tip("A", "a"),)
    for _ in range(50):
        assert orchestrator.get_tip() == "## X\n\n### A\n\na"


def test_selector_receives_all_cached_tips() -> None:
    """The selector should be offered the full cached tip set every time."""
    tips = make_tips(3)
    selector = FirstTipSelector()
    orchestrator = DefaultTipOrchestrator(
        StaticTipLoader(TipCollection("C", tips)), selector, RecordingFormatter()
    )

    orchestrator.get_tip()
    orchestrator.get_tip()

    assert [tuple(o) for o in selector.offered] == [tips, tips]
    assert orchestrator.tips == tips


def test_collection_title_is_passed_as_category() -> None:
    """A titled loader's title should reach the formatter as category."""
    tips = make_tips(1)
    orchestrator = DefaultTipOrchestrator(
        StaticTipLoader(TipCollection("Leadership Tone", tips)),
        FirstTipSelector(),
        RecordingFormatter(),
    )

    assert orchestrator.get_tip() == (tips[0], "Leadership Tone")
    assert orchestrator.collection_title == "Leadership Tone"


def test_untitled_loader_gives_no_category() -> None:
    """Without a title the formatter should receive ``None``."""
    tips = make_tips(1)
    orchestrator = DefaultTipOrchestrator(
        CountingLoader(tips), FirstTipSelector(), RecordingFormatter()
    )

    assert orchestrator.get_tip() == (tips[0], None)
    assert orchestrator.collection_title is None


def test_formatter_output_is_returned_unchanged() -> None:
    """The orchestrator should return whatever the formatter produced."""
    orchestrator = DefaultTipOrchestrator(
        StaticTipLoader(TipCollection("Cat", (Tip("T", "B"),))),
        FirstTipSelector(),
        MarkdownTipFormatter(),
    )

    assert orchestrator.get_tip() == "## Cat\n\n### T\n\nB"


def test_empty_collection_fails_on_selection() -> None:
    """An empty tip set should surface the selector's error on `get_tip`."""
    orchestrator = DefaultTipOrchestrator(
        StaticTipLoader(TipCollection("Empty")), RandomTipSelector(), MarkdownTipFormatter()
    )

    with pytest.raises(SelectionError):
        orchestrator.get_tip()


def test_poison_loader_fails_at_construction() -> None:
    """A poison loader should fail while the orchestrator is built."""
    with pytest.raises(ConfigurationError, match="PoisonTipLoader"):
        DefaultTipOrchestrator(PoisonTipLoader(), RandomTipSelector(), MarkdownTipFormatter())


def test_poison_selector_fails_on_first_tip() -> None:
    """A poison selector should fail on the first `get_tip` call, not before."""
    orchestrator = DefaultTipOrchestrator(
        CountingLoader(make_tips(1)), PoisonTipSelector(), MarkdownTipFormatter()
    )

    with pytest.raises(ConfigurationError, match="PoisonTipSelector"):
        orchestrator.get_tip()
