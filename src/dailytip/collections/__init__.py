# topmark:header:start
#
#   project      : DailyTip
#   file         : __init__.py
#   file_relpath : src/dailytip/collections/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundled tip collections (``*.json`` package data)."""
