# topmark:header:start
#
#   project      : DailyTip
#   file         : model.py
#   file_relpath : src/dailytip/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for the DailyTip command line tools.

Configuration is assembled in a mutable builder (`MutableConfig`) and frozen
into an immutable `Config` before use. Layers are merged from lowest to highest
precedence:

1. Built-in defaults (bundled collections, text output, automatic color).
2. ``pyproject.toml`` ``[tool.dailytip]`` in the working directory.
3. ``dailytip.toml`` in the working directory.
4. Files passed explicitly with ``--config``, in order.
5. The ``DAILYTIP_COLLECTIONS_DIR`` environment variable.
6. Command line options.

Recognized keys (in both ``dailytip.toml`` and ``[tool.dailytip]``):

```toml
collections_dir = "tips"   # relative to the config file
format = "markdown"        # text | markdown | html
color = "never"            # auto | always | never
```
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from dailytip.config.color import ColorMode
from dailytip.config.io import (
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from dailytip.config.logging import get_logger
from dailytip.constants import (
    COLLECTIONS_DIR_ENV,
    CONFIG_FILE_NAME,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)
from dailytip.formatters.formats import OutputFormat
from dailytip.registry import bundled_collections_dir

if TYPE_CHECKING:
    from collections.abc import Iterable
    from enum import Enum

    from dailytip.config.io import TomlTable
    from dailytip.config.logging import DailyTipLogger

# Generic mapping accepted by `MutableConfig.apply_cli_args` (CLI kwargs or plain dicts).
ArgsLike = Mapping[str, Any]

E = TypeVar("E", bound="Enum")

logger: DailyTipLogger = get_logger(__name__)

KEY_COLLECTIONS_DIR = "collections_dir"
KEY_FORMAT = "format"
KEY_COLOR = "color"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        collections_dir (Path | None): Directory holding ``*.json`` collections;
            ``None`` selects the bundled collections.
        output_format (OutputFormat | None): Output format; ``None`` means text.
        color_mode (ColorMode | None): Color intent; ``None`` means automatic.
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    collections_dir: Path | None = None
    output_format: OutputFormat | None = None
    color_mode: ColorMode | None = None
    config_files: tuple[Path, ...] = ()

    def resolved_collections_dir(self) -> Path:
        """Return the configured collections directory or the bundled one."""
        return self.collections_dir or bundled_collections_dir()

    def resolved_output_format(self) -> OutputFormat:
        """Return the configured output format, defaulting to text."""
        return self.output_format or OutputFormat.TEXT


def _parse_enum(enum_cls: type[E], value: str | None, *, source: str) -> E | None:
    """Parse ``value`` as a member of ``enum_cls``, logging and dropping bad values."""
    if value is None:
        return None
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        allowed: str = ", ".join(str(m.value) for m in enum_cls)
        logger.warning(
            "Ignoring invalid %s value %r in %s (expected one of: %s)",
            enum_cls.__name__,
            value,
            source,
            allowed,
        )
        return None


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Each field left at ``None`` means "not set by this layer" so that
    `merge_with` only overrides what a higher-precedence layer provides.
    """

    collections_dir: Path | None = None
    output_format: OutputFormat | None = None
    color_mode: ColorMode | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot."""
        return Config(
            collections_dir=self.collections_dir,
            output_format=self.output_format,
            color_mode=self.color_mode,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a config layer from a parsed ``dailytip`` table.

        Args:
            data (TomlTable): The ``dailytip`` table (top level of ``dailytip.toml``
                or ``[tool.dailytip]`` of ``pyproject.toml``).
            config_file (Path | None): The file the table came from; relative
                ``collections_dir`` values are resolved against its directory.

        Returns:
            MutableConfig: The layer.
        """
        source: str = str(config_file) if config_file else "<dict>"
        layer = cls()

        raw_dir: str | None = get_string_value_or_none(data, KEY_COLLECTIONS_DIR)
        if raw_dir:
            path = Path(raw_dir).expanduser()
            if not path.is_absolute() and config_file is not None:
                path = config_file.parent / path
            layer.collections_dir = path

        layer.output_format = _parse_enum(
            OutputFormat, get_string_value_or_none(data, KEY_FORMAT), source=source
        )
        layer.color_mode = _parse_enum(
            ColorMode, get_string_value_or_none(data, KEY_COLOR), source=source
        )

        if config_file is not None:
            layer.config_files.append(config_file)
        logger.trace("Config layer from %s: %s", source, layer)
        return layer

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a config layer from a TOML file.

        ``pyproject.toml`` files contribute their ``[tool.dailytip]`` table only.

        Args:
            path (Path): Path to ``dailytip.toml``, ``pyproject.toml`` or any
                TOML file with the ``dailytip`` keys at the top level.

        Returns:
            MutableConfig | None: The layer, or ``None`` when the file could not
            be read or holds no DailyTip settings.
        """
        data: TomlTable = load_toml_dict(path)
        if not data:
            return None
        if path.name == PYPROJECT_FILE_NAME:
            data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
            if not data:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
        logger.debug("Loaded config from %s", path)
        return cls.from_toml_dict(data, config_file=path.resolve())

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return the config files present in ``start``, lowest precedence first."""
        found: list[Path] = []
        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        return found

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` (higher precedence) onto this layer in place.

        Args:
            other (MutableConfig): The overriding layer.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if other.collections_dir is not None:
            self.collections_dir = other.collections_dir
        if other.output_format is not None:
            self.output_format = other.output_format
        if other.color_mode is not None:
            self.color_mode = other.color_mode
        self.config_files.extend(other.config_files)
        return self

    def apply_env(self, env: Mapping[str, str]) -> MutableConfig:
        """Apply environment overrides (``DAILYTIP_COLLECTIONS_DIR``)."""
        env_dir: str | None = env.get(COLLECTIONS_DIR_ENV)
        if env_dir:
            logger.debug("Collections directory from %s: %s", COLLECTIONS_DIR_ENV, env_dir)
            self.collections_dir = Path(env_dir).expanduser()
        return self

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply command line overrides.

        Recognized keys: ``collections_dir`` (str or Path), ``output_format``
        (`OutputFormat`) and ``color_mode`` (`ColorMode`). Missing or ``None``
        values leave the current setting untouched.

        Args:
            args (ArgsLike): Option values keyed by name.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        collections_dir: Any = args.get("collections_dir")
        if collections_dir is not None:
            self.collections_dir = Path(collections_dir).expanduser()
        output_format: Any = args.get("output_format")
        if output_format is not None:
            self.output_format = OutputFormat(output_format)
        color_mode: Any = args.get("color_mode")
        if color_mode is not None:
            self.color_mode = ColorMode(color_mode)
        return self

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        env: Mapping[str, str] | None = None,
    ) -> MutableConfig:
        """Merge discovered and explicit config files plus environment overrides.

        CLI overrides are applied separately by the caller with `apply_cli_args`.

        Args:
            cwd (Path | None): Directory searched for ``pyproject.toml`` and
                ``dailytip.toml``; defaults to the current working directory.
            extra_config_files (Iterable[Path]): Explicit ``--config`` files.
            env (Mapping[str, str] | None): Environment; defaults to ``os.environ``.

        Returns:
            MutableConfig: The merged configuration.
        """
        start: Path = cwd if cwd is not None else Path.cwd()
        merged = cls()
        for path in [*cls.discover_local_config_files(start), *extra_config_files]:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged.merge_with(layer)
        merged.apply_env(os.environ if env is None else env)
        logger.debug("Merged config: %s", merged)
        return merged
