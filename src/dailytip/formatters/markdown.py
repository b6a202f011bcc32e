# topmark:header:start
#
#   project      : DailyTip
#   file         : markdown.py
#   file_relpath : src/dailytip/formatters/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain markdown tip formatter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dailytip.model import Tip


class MarkdownTipFormatter:
    """Render a tip as markdown.

    The category title becomes a level 2 heading, the tip title a level 3
    heading, and the body is emitted verbatim (no escaping)::

        ## <category>

        ### <title>

        <tip>
    """

    def format_tip(self, tip: Tip, category_title: str | None = None) -> str:
        """Render ``tip`` as markdown."""
        body: str = f"### {tip.title}\n\n{tip.tip}"
        if category_title:
            return f"## {category_title}\n\n{body}"
        return body
