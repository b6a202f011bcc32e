# topmark:header:start
#
#   project      : DailyTip
#   file         : styles.py
#   file_relpath : src/dailytip/formatters/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for terminal rendering.

This module provides a small base enum that stores a textual value while
attaching a colorizer (callable that decorates strings), plus the palette used
by the shell formatter.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer. The enum `.value` remains a plain string, while the colorizer
      is exposed via `.color`.
    - `ShellStyle`: the roles styled by `dailytip.formatters.shell.ShellTipFormatter`.

Design:
    `ColoredStrEnum` keeps `_value_` as the plain `str` and stores the
    color function separately (`_color`). This preserves Enum semantics
    (hashing, equality, `repr`) and keeps members with the same colorizer
    distinct.

Example:
    ```python
    print(ShellStyle.TITLE.value)                  # 'title'
    print(ShellStyle.TITLE.color("Lead by example"))  # bold cyan text
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Designed to be compatible with `yachalk.ChalkBuilder.__call__`, which
    accepts a variadic list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values
                are provided. Defaults to a single space.

        Returns:
            str: The colorized and concatenated output string.
        """
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color


class ShellStyle(ColoredStrEnum):
    """Terminal styles for the parts of a rendered tip."""

    RULE = ("rule", chalk.gray)
    CATEGORY = ("category", chalk.bold.magenta)
    TITLE = ("title", chalk.bold.cyan)
    BOLD = ("bold", chalk.bold)
    EMPHASIS = ("emphasis", chalk.gray)
    CODE = ("code", chalk.yellow)
    BULLET = ("bullet", chalk.cyan)
