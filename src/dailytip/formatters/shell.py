# topmark:header:start
#
#   project      : DailyTip
#   file         : shell.py
#   file_relpath : src/dailytip/formatters/shell.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal tip formatter.

Produces a block framed by two horizontal rules::

    ────────────────────────── (80 columns)
    <category>                 (bold magenta, optional)

    <title>                    (bold cyan)

    <body>
    ──────────────────────────

The body's inline markdown is translated into terminal styles by a fixed
sequence of substitutions. The order matters: double-asterisk spans must be
consumed before single-asterisk ones, and bullet markers are handled last so
that a leading ``*`` is not mistaken for emphasis once styles are applied.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from dailytip.formatters.styles import ShellStyle

if TYPE_CHECKING:
    from dailytip.model import Tip

RULE_CHAR: Final[str] = "─"
RULE_WIDTH: Final[int] = 80
BULLET_GLYPH: Final[str] = "•"

_BOLD_RE: Final[re.Pattern[str]] = re.compile(r"\*\*(.+?)\*\*")
# An italic span opens on a non-space, non-asterisk character and stays on one line,
# so a "* item" bullet marker or a leftover "**" is never read as emphasis
_EMPHASIS_RE: Final[re.Pattern[str]] = re.compile(r"\*(?![\s*])([^*\n]+?)\*")
_CODE_RE: Final[re.Pattern[str]] = re.compile(r"`(.+?)`")
_BULLET_RE: Final[re.Pattern[str]] = re.compile(r"^[ \t]*[-*][ \t]+(.+)$", re.MULTILINE)


class ShellTipFormatter:
    """Render a tip with ANSI styling for terminal display.

    Args:
        color (bool): When False, the same layout is produced without any
            escape sequences (for pipes, ``NO_COLOR`` and tests).
    """

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def format_tip(self, tip: Tip, category_title: str | None = None) -> str:
        """Render ``tip`` for a terminal."""
        rule: str = self._style(ShellStyle.RULE, RULE_CHAR * RULE_WIDTH)
        title: str = self._style(ShellStyle.TITLE, tip.title)
        body: str = self.format_markdown(tip.tip)
        if category_title:
            category: str = self._style(ShellStyle.CATEGORY, category_title)
            return f"{rule}\n{category}\n\n{title}\n\n{body}\n{rule}"
        return f"{rule}\n{title}\n\n{body}\n{rule}"

    def format_markdown(self, text: str) -> str:
        """Translate inline markdown into terminal styles.

        Args:
            text (str): Tip body with inline markdown.

        Returns:
            str: The styled body.
        """
        text = _BOLD_RE.sub(lambda m: self._style(ShellStyle.BOLD, m.group(1)), text)
        text = _EMPHASIS_RE.sub(lambda m: self._style(ShellStyle.EMPHASIS, m.group(1)), text)
        text = _CODE_RE.sub(lambda m: self._style(ShellStyle.CODE, m.group(1)), text)
        text = _BULLET_RE.sub(
            lambda m: f"  {self._style(ShellStyle.BULLET, BULLET_GLYPH)} {m.group(1)}", text
        )
        return text

    def _style(self, style: ShellStyle, text: str) -> str:
        if not self.color:
            return text
        return style.color(text)
