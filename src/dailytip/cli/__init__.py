# topmark:header:start
#
#   project      : DailyTip
#   file         : __init__.py
#   file_relpath : src/dailytip/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for DailyTip.

Entry points:
    - ``dailytip``: `dailytip.cli.main.cli`
    - ``dailytip-web``: `dailytip.cli.web.web`
"""
