# topmark:header:start
#
#   project      : DailyTip
#   file         : __main__.py
#   file_relpath : src/dailytip/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DailyTip via ``python -m dailytip``.

Equivalent to running the ``dailytip`` console script; it delegates directly
to :func:`dailytip.cli.main.cli`.

Examples:
    Show a tip from the bundled productivity collection::

        python -m dailytip productivity-hacks
"""

from __future__ import annotations

from dailytip.cli.main import cli

if __name__ == "__main__":
    cli()
