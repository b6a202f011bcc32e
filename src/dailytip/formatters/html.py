# topmark:header:start
#
#   project      : DailyTip
#   file         : html.py
#   file_relpath : src/dailytip/formatters/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML tip formatter.

The tip is first assembled as markdown and then converted with a markdown
renderer (Python-Markdown by default). Two HTML fragments are injected into the
markdown stream before conversion, so the renderer must pass raw HTML through:

- a collection name appended to the title by
  `dailytip.loaders.composite.CompositeTipLoader` (``"Title *Collection*"``)
  is demoted to a small gray caption;
- the category title becomes ``<p class="category-title">``.

Only the *last* italic span, and only when it ends the title, is treated as a
collection name: ``"Title with *emphasis* and *Collection*"`` keeps
``emphasis`` as ordinary ``<em>`` markup.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Final

import markdown

from dailytip.config.logging import get_logger

if TYPE_CHECKING:
    from dailytip.config.logging import DailyTipLogger
    from dailytip.model import Tip

MarkdownRenderer = Callable[[str], str]

logger: DailyTipLogger = get_logger(__name__)

MARKDOWN_EXTENSIONS: Final[tuple[str, ...]] = ("fenced_code",)

COLLECTION_NAME_STYLE: Final[str] = "font-size: 0.7em; color: #999; font-style: italic;"
CATEGORY_TITLE_CLASS: Final[str] = "category-title"

# A space followed by *text* at the very end of the title
_COLLECTION_SUFFIX_RE: Final[re.Pattern[str]] = re.compile(r"\s\*([^*]+)\*\Z")


def render_markdown(text: str) -> str:
    """Convert markdown to HTML with Python-Markdown.

    Args:
        text (str): Markdown source; raw HTML is passed through.

    Returns:
        str: The rendered HTML fragment.
    """
    return markdown.markdown(text, extensions=list(MARKDOWN_EXTENSIONS))


def style_collection_name(title: str) -> str:
    """Replace a trailing ``" *Collection*"`` span with a styled caption element.

    Args:
        title (str): Tip title, possibly tagged with a collection name.

    Returns:
        str: The title with the trailing span demoted, or ``title`` unchanged.
    """
    return _COLLECTION_SUFFIX_RE.sub(
        lambda m: f' <div style="{COLLECTION_NAME_STYLE}">{m.group(1)}</div>', title
    )


class HtmlTipFormatter:
    """Render a tip as an HTML fragment.

    Args:
        renderer (MarkdownRenderer | None): Markdown-to-HTML conversion callable.
            Defaults to `render_markdown`.

    Example:
        ```python
        HtmlTipFormatter().format_tip(Tip("Use const", "Prefer `const`."))
        # '<h3>Use const</h3>\\n<p>Prefer <code>const</code>.</p>'
        ```
    """

    def __init__(self, renderer: MarkdownRenderer | None = None) -> None:
        self._render: MarkdownRenderer = renderer if renderer is not None else render_markdown

    def format_tip(self, tip: Tip, category_title: str | None = None) -> str:
        """Render ``tip`` as HTML."""
        source: str = self.build_markdown(tip, category_title)
        logger.trace("HTML formatter markdown source: %r", source)
        return self._render(source)

    def build_markdown(self, tip: Tip, category_title: str | None = None) -> str:
        """Assemble the markdown document handed to the renderer.

        Args:
            tip (Tip): The tip to render.
            category_title (str | None): Optional category title.

        Returns:
            str: Markdown with embedded HTML fragments.
        """
        heading: str = f"### {style_collection_name(tip.title)}"
        if category_title:
            category: str = f'<p class="{CATEGORY_TITLE_CLASS}">{category_title}</p>'
            return f"{category}\n\n{heading}\n\n{tip.tip}"
        return f"{heading}\n\n{tip.tip}"
