# topmark:header:start
#
#   project      : DailyTip
#   file         : color.py
#   file_relpath : src/dailytip/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for DailyTip.

This module provides:

- the `ColorMode` enum, and
- color-mode resolution based on CLI flags, environment, and output format.

These helpers are kept Click-free so the config layer and tests can use them.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from dailytip.config.logging import get_logger
from dailytip.formatters.formats import supports_color

if TYPE_CHECKING:
    from dailytip.config.logging import DailyTipLogger
    from dailytip.formatters.formats import OutputFormat


logger: DailyTipLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Colorless formats**: markdown and HTML output → False.
        2. **CLI/config override**: ``ALWAYS`` → True; ``NEVER`` → False.
        3. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        4. **Auto**: `stdout.isatty()`.

    Args:
        color_mode_override: Resolved `ColorMode`; `None` means "not provided".
        output_format: Requested output format (`None` means text).
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if not supports_color(output_format):
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: stdout isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
