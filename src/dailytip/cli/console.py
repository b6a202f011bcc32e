# topmark:header:start
#
#   project      : DailyTip
#   file         : console.py
#   file_relpath : src/dailytip/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for the DailyTip commands.

The formatted tip already carries its own ANSI styling when color is on, so
`ClickConsole.print` only decides whether Click keeps or strips it. Warnings
and errors are tinted here.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click

from dailytip.cli.console_api import ConsoleLike

WARN_COLOR = "yellow"
ERROR_COLOR = "bright_red"


class ClickConsole(ConsoleLike):
    """Write tips to stdout and user-facing problems to stderr.

    Args:
        enable_color (bool): Keep ANSI codes in the output. When False, Click
            strips them, including those embedded in a pre-styled tip.
        out (TextIO | None): Program output stream; defaults to `sys.stdout`.
        err (TextIO | None): Stream for warnings and errors; defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in yellow."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg=WARN_COLOR)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in bright red."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg=ERROR_COLOR)
