# topmark:header:start
#
#   project      : DailyTip
#   file         : console_api.py
#   file_relpath : src/dailytip/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output surface shared by the ``dailytip`` and ``dailytip-web`` commands.

Tips, listings and file reports go to stdout; warnings and errors meant for
the user go to stderr. Diagnostics for developers use `logging` instead.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a command needs to talk to the user."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Emit program output (a tip, a collection name, a written file)."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Tell the user something was skipped or found missing."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Report a failure that ends the command."""
        ...
