# topmark:header:start
#
#   project      : DailyTip
#   file         : formats.py
#   file_relpath : src/dailytip/formatters/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used across DailyTip frontends.

This module centralizes the `OutputFormat` enum so the CLI, the config layer
and the web bundler agree on the same format vocabulary without introducing
`Click` or console dependencies.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from dailytip.formatters.html import HtmlTipFormatter
from dailytip.formatters.markdown import MarkdownTipFormatter
from dailytip.formatters.shell import ShellTipFormatter

if TYPE_CHECKING:
    from dailytip.formatters.base import TipFormatter


class OutputFormat(str, Enum):
    """Output format for a rendered tip.

    Attributes:
        TEXT: Terminal text; may include ANSI color if enabled.
        MARKDOWN: A markdown document.
        HTML: An HTML fragment.

    Notes:
        Only ``TEXT`` ever carries color; see `supports_color`.
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    HTML = "html"


def supports_color(fmt: OutputFormat | None) -> bool:
    """Return True for formats that may include ANSI styling.

    Args:
        fmt: the output format to be checked; ``None`` means the default (text).

    Returns:
        `True` if the format may be colorized, else `False`.
    """
    return fmt in {None, OutputFormat.TEXT}


def make_formatter(fmt: OutputFormat, *, color: bool = True) -> TipFormatter[str]:
    """Return the formatter for ``fmt``.

    Args:
        fmt (OutputFormat): Requested output format.
        color (bool): Whether terminal output may use ANSI styling. Ignored for
            colorless formats.

    Returns:
        TipFormatter[str]: A formatter instance.
    """
    if fmt == OutputFormat.MARKDOWN:
        return MarkdownTipFormatter()
    if fmt == OutputFormat.HTML:
        return HtmlTipFormatter()
    return ShellTipFormatter(color=color)
