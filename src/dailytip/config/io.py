# topmark:header:start
#
#   project      : DailyTip
#   file         : io.py
#   file_relpath : src/dailytip/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for DailyTip configuration.

Pure helpers for reading TOML documents and extracting typed values from the
resulting plain-Python tables. TOML is parsed with `tomlkit` and unwrapped into
``dict``/``list`` values so callers never deal with tomlkit item types.

Errors while reading a file are logged and yield an empty table; a broken
config file must never prevent a tip from being shown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dailytip.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from dailytip.config.logging import DailyTipLogger

logger: DailyTipLogger = get_logger(__name__)

TomlTable = dict[str, Any]

__all__: list[str] = [
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "get_string_value_or_none",
    "load_toml_dict",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``val`` is a ``dict``.
    """
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Strings are returned as is; ``int``, ``float`` and ``bool`` values are
    coerced with ``str(...)``. Missing keys and other types yield ``None``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.debug("Cannot coerce %r for key '%s' to string, ignoring it", value, key)
    return None


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``dailytip.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content, or an empty dict on failure.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}
