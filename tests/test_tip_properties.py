# topmark:header:start
#
#   project      : DailyTip
#   file         : test_tip_properties.py
#   file_relpath : tests/test_tip_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for merging, selecting and formatting tips.

Generated collections and tips check that:
1) the composite loader concatenates in order and tags every titled tip,
2) the random selector only ever returns a tip from its input, and
3) the markdown and HTML formatters keep their fixed shapes for any text.
"""

from __future__ import annotations

import random

from hypothesis import given, settings
from hypothesis import strategies as st

from dailytip.formatters.html import COLLECTION_NAME_STYLE, style_collection_name
from dailytip.formatters.markdown import MarkdownTipFormatter
from dailytip.loaders.composite import CompositeTipLoader, tag_title
from dailytip.loaders.static import StaticTipLoader
from dailytip.model import Tip, TipCollection
from dailytip.selectors.random_tip import RandomTipSelector
from tests.strategies_dailytip import s_collection, s_collection_title, s_text, s_tip, s_tips


@settings(max_examples=50)
@given(collections=st.lists(s_collection, max_size=4))
def test_composite_concatenates_and_tags(collections: list[TipCollection]) -> None:
    """It should concatenate tips in loader order, each tagged with its collection."""
    composite = CompositeTipLoader([StaticTipLoader(c) for c in collections])

    expected: list[Tip] = [
        Tip(tag_title(t.title, c.title), t.tip) for c in collections for t in c.tips
    ]
    assert list(composite.get_tips()) == expected
    assert composite.get_collection_title() == ", ".join(c.title for c in collections)


@given(tips=s_tips.filter(bool), seed=st.integers(min_value=0))
def test_random_selector_returns_member(tips: tuple[Tip, ...], seed: int) -> None:
    """It should only ever return one of the given tips."""
    assert RandomTipSelector(random.Random(seed)).get_tip(tips) in tips


@given(tip=s_tip, category=s_text)
def test_markdown_shape(tip: Tip, category: str) -> None:
    """It should emit the heading layout verbatim, prefixed only for a category."""
    body: str = f"### {tip.title}\n\n{tip.tip}"
    formatter = MarkdownTipFormatter()

    assert formatter.format_tip(tip) == body
    expected: str = f"## {category}\n\n{body}" if category else body
    assert formatter.format_tip(tip, category) == expected


@given(title=s_text, collection=s_collection_title)
def test_tagged_title_demotes_collection_name(title: str, collection: str) -> None:
    """It should demote exactly the appended collection span, whatever the title holds."""
    styled: str = style_collection_name(tag_title(title, collection))

    assert styled == f'{title} <div style="{COLLECTION_NAME_STYLE}">{collection}</div>'
