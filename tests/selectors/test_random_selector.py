# topmark:header:start
#
#   project      : DailyTip
#   file         : test_random_selector.py
#   file_relpath : tests/selectors/test_random_selector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `RandomTipSelector`."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from dailytip.errors import SelectionError
from dailytip.selectors.random_tip import RandomTipSelector
from tests.conftest import make_tips


def test_single_tip_is_always_selected() -> None:
    """With one candidate the result is that candidate."""
    tips = make_tips(1)
    selector = RandomTipSelector()

    assert all(selector.get_tip(tips) is tips[0] for _ in range(20))


def test_result_is_a_member_of_the_input() -> None:
    """The selected tip should be one of the candidates (identity, not a copy)."""
    tips = make_tips(5)
    selector = RandomTipSelector()

    for _ in range(50):
        chosen = selector.get_tip(tips)
        assert any(chosen is t for t in tips)


def test_seeded_rng_is_reproducible() -> None:
    """Two selectors with the same seed should pick the same sequence."""
    tips = make_tips(10)
    first = RandomTipSelector(random.Random(1234))
    second = RandomTipSelector(random.Random(1234))

    assert [first.get_tip(tips).title for _ in range(25)] == [
        second.get_tip(tips).title for _ in range(25)
    ]


def test_selection_is_roughly_uniform() -> None:
    """Every tip should be chosen with probability close to 1/n."""
    tips = make_tips(4)
    selector = RandomTipSelector(random.Random(42))
    draws = 10_000

    counts = Counter(selector.get_tip(tips).title for _ in range(draws))

    assert set(counts) == {t.title for t in tips}
    for title, count in counts.items():
        # expected 2500 per tip; allow a generous margin
        assert 2200 < count < 2800, (title, count)


def test_does_not_mutate_input() -> None:
    """The candidate list should be left untouched."""
    tips = list(make_tips(3))
    snapshot = list(tips)

    RandomTipSelector().get_tip(tips)

    assert tips == snapshot


def test_empty_input_raises_selection_error() -> None:
    """Selecting from nothing is a precondition violation."""
    with pytest.raises(SelectionError):
        RandomTipSelector().get_tip([])
