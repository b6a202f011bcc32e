# topmark:header:start
#
#   project      : DailyTip
#   file         : __init__.py
#   file_relpath : src/dailytip/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for DailyTip.

Submodules:
    logging: TRACE-aware logger setup.
    color: `ColorMode` and color resolution.
    io: TOML reading helpers built on `tomlkit`.
    model: the `Config` dataclass and its layered loader.

Import from the submodules directly; this package keeps no eager imports so
that `dailytip.config.logging` can be used from anywhere without cycles.
"""
