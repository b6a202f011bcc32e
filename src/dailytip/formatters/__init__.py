# topmark:header:start
#
#   project      : DailyTip
#   file         : __init__.py
#   file_relpath : src/dailytip/formatters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tip formatters.

Public names:
    - `TipFormatter`: formatter contract.
    - `MarkdownTipFormatter`, `ShellTipFormatter`, `HtmlTipFormatter`: concrete formats.
    - `PoisonTipFormatter`: fail-fast builder default.
    - `OutputFormat`, `make_formatter`: format vocabulary and factory.
"""

from __future__ import annotations

from dailytip.formatters.base import TipFormatter
from dailytip.formatters.formats import OutputFormat, make_formatter, supports_color
from dailytip.formatters.html import HtmlTipFormatter, MarkdownRenderer, render_markdown
from dailytip.formatters.markdown import MarkdownTipFormatter
from dailytip.formatters.poison import PoisonTipFormatter
from dailytip.formatters.shell import ShellTipFormatter

__all__ = [
    "HtmlTipFormatter",
    "MarkdownRenderer",
    "MarkdownTipFormatter",
    "OutputFormat",
    "PoisonTipFormatter",
    "ShellTipFormatter",
    "TipFormatter",
    "make_formatter",
    "render_markdown",
    "supports_color",
]
