# topmark:header:start
#
#   project      : DailyTip
#   file         : errors.py
#   file_relpath : src/dailytip/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core exceptions for DailyTip.

These exceptions are raised by the tip pipeline (loaders, selectors, formatters,
orchestrators) and are deliberately free of any Click dependency. The CLI maps
them to user-facing errors and exit codes in `dailytip.cli.errors`.

Hierarchy:
    - `DailyTipError`
        - `ConfigurationError`: a poison stand-in was exercised.
        - `LoadError`: a collection source could not be read or parsed.
            - `UnknownCollectionError`: one or more collection names do not exist.
        - `SelectionError`: selection was attempted on an empty tip list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class DailyTipError(Exception):
    """Base class for all DailyTip errors."""


class ConfigurationError(DailyTipError):
    """A poison implementation was invoked (a builder slot was never configured)."""

    def __init__(self, component: str, method: str) -> None:
        self.component = component
        self.method = method
        super().__init__(
            f"{component}: {method}() was called but this is a poison implementation "
            "(used before configured)"
        )


class LoadError(DailyTipError):
    """A tip collection could not be read or did not match the expected shape.

    Attributes:
        path (Path | None): The offending source file, if known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class UnknownCollectionError(LoadError):
    """One or more requested collection names have no matching source file."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names: tuple[str, ...] = tuple(names)
        quoted: str = ", ".join(f"'{n}'" for n in self.names)
        noun: str = "Collection" if len(self.names) == 1 else "Collections"
        super().__init__(f"{noun} {quoted} not found.")


class SelectionError(DailyTipError):
    """A selector was asked to choose from an empty tip list.

    Callers must guarantee a non-empty input; this is a precondition violation,
    not a recoverable condition.
    """
