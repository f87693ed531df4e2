# topmark:header:start
#
#   project      : CodeScrub
#   file         : model.py
#   file_relpath : src/codescrub/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for CodeScrub.

Two classes cover the configuration lifecycle:

- `MutableConfig` is a builder: it starts from defaults, merges TOML sources
  and CLI overrides, and validates values.
- `Config` is the frozen runtime snapshot handed to the scrubbing core.

Precedence is: defaults < config file < explicit CLI flags.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from codescrub.config.io import extract_codescrub_table, load_toml_dict
from codescrub.config.keys import Toml
from codescrub.config.logging import get_logger
from codescrub.constants import DEFAULT_ENCODING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from codescrub.config.io import TomlTable
    from codescrub.config.logging import ScrubLogger

logger: ScrubLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value has the wrong type or range."""


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for a scrub run.

    Attributes:
        header_lines (int): Number of leading physical lines copied verbatim.
        detect_header (bool): Whether to auto-detect a leading comment header when
            ``header_lines`` is not set explicitly.
        raw_strings (bool): Whether Rust-style raw string literals are recognized.
        keep_block_newlines (bool): Whether newlines inside removed block comments
            are kept so later lines keep their line numbers.
        encoding (str): Text encoding used to read and write files.
        config_files (tuple[Path, ...]): Configuration files merged into this snapshot.
        explicit (frozenset[str]): Keys set by a config file or a CLI option
            rather than taken from the defaults.
    """

    header_lines: int
    detect_header: bool
    raw_strings: bool
    keep_block_newlines: bool
    encoding: str
    config_files: tuple[Path, ...] = ()
    explicit: frozenset[str] = frozenset()


def _expect(key: str, value: Any, kind: type) -> Any:
    # bool is an int subclass; keep `header_lines = true` out
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"Config key '{key}' must be of type {kind.__name__}, got {value!r}")
    return value


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Use `from_defaults`, merge other layers with `merge_with` or
    `apply_overrides`, then call `freeze` to obtain a `Config`.
    """

    header_lines: int = 0
    detect_header: bool = False
    raw_strings: bool = False
    keep_block_newlines: bool = True
    encoding: str = DEFAULT_ENCODING
    config_files: list[Path] = field(default_factory=lambda: [])

    # Keys explicitly set by the layer this builder was created from
    explicit: set[str] = field(default_factory=lambda: set[str]())

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls()

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any], *, source: Path | None = None) -> MutableConfig:
        """Build a configuration layer from a flat TOML table.

        Unknown keys are logged and ignored.

        Args:
            data (Mapping[str, Any]): The ``codescrub`` settings table.
            source (Path | None): File the table was read from, if any.

        Returns:
            MutableConfig: A layer whose ``explicit`` set lists the keys present in ``data``.

        Raises:
            ConfigError: If a known key carries a value of the wrong type.
        """
        draft = cls()
        for key, value in data.items():
            if key not in Toml.ALL:
                logger.warning("Ignoring unknown config key '%s' (source: %s)", key, source)
                continue
            if key == Toml.KEY_HEADER_LINES:
                draft.header_lines = _expect(key, value, int)
            elif key == Toml.KEY_ENCODING:
                draft.encoding = _expect(key, value, str)
            else:
                setattr(draft, key, _expect(key, value, bool))
            draft.explicit.add(key)
        if source is not None:
            draft.config_files.append(source)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a configuration layer from ``codescrub.toml`` or ``pyproject.toml``.

        Args:
            path (Path): Configuration file to read.

        Returns:
            MutableConfig: The parsed layer (empty when the file is unreadable).
        """
        table: TomlTable = extract_codescrub_table(path, load_toml_dict(path))
        logger.debug("Loaded config table from %s: %s", path, table)
        return cls.from_toml_dict(table, source=path)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay the explicitly-set values of ``other`` onto this builder.

        Args:
            other (MutableConfig): Higher-precedence layer.

        Returns:
            MutableConfig: ``self``, updated in place.
        """
        for key in other.explicit:
            setattr(self, key, getattr(other, key))
        self.explicit |= other.explicit
        self.config_files.extend(other.config_files)
        return self

    def apply_overrides(self, **overrides: Any) -> MutableConfig:
        """Apply explicit overrides (typically CLI flags); ``None`` values are skipped.

        Args:
            **overrides (Any): Keyword overrides named after `Config` fields.

        Returns:
            MutableConfig: ``self``, updated in place.
        """
        layer: dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        return self.merge_with(MutableConfig.from_toml_dict(layer))

    def freeze(self) -> Config:
        """Validate and return an immutable `Config`.

        The header line count is range-checked later against the actual input
        (see `codescrub.scrub.header.split_header`).

        Raises:
            ConfigError: If ``encoding`` is empty.
        """
        if not self.encoding:
            raise ConfigError("encoding must not be empty")
        return Config(
            header_lines=self.header_lines,
            detect_header=self.detect_header,
            raw_strings=self.raw_strings,
            keep_block_newlines=self.keep_block_newlines,
            encoding=self.encoding,
            config_files=tuple(self.config_files),
            explicit=frozenset(self.explicit),
        )
