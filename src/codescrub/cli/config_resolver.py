# topmark:header:start
#
#   project      : CodeScrub
#   file         : config_resolver.py
#   file_relpath : src/codescrub/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the CodeScrub configuration from Click parameters.

Resolution order (lowest -> highest precedence):
  1. Runtime defaults.
  2. The config file: ``--config PATH`` if given, otherwise the nearest
     ``codescrub.toml`` / ``pyproject.toml`` (``[tool.codescrub]``) found by
     walking up from the input file. Skipped with ``--no-config``.
  3. CLI overrides: options the user actually passed (``None`` means unset).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codescrub.config.io import discover_config_file
from codescrub.config.logging import get_logger
from codescrub.config.model import Config, MutableConfig

if TYPE_CHECKING:
    from pathlib import Path

    from codescrub.config.logging import ScrubLogger

logger: ScrubLogger = get_logger(__name__)


def resolve_config(
    *,
    input_path: Path,
    config_path: Path | None,
    no_config: bool,
    header_lines: int | None,
    detect_header: bool | None,
    raw_strings: bool | None,
    keep_block_newlines: bool | None,
    encoding: str | None,
) -> Config:
    """Build a frozen `Config` from layered sources.

    Args:
        input_path (Path): Input file; anchors config discovery.
        config_path (Path | None): Explicit config file (``--config``).
        no_config (bool): Skip discovery (``--no-config``). An explicit ``--config``
            is still honored.
        header_lines (int | None): ``--header-lines`` override.
        detect_header (bool | None): ``--detect-header`` override.
        raw_strings (bool | None): ``--raw-strings`` override.
        keep_block_newlines (bool | None): ``--keep-block-newlines`` override.
        encoding (str | None): ``--encoding`` override.

    Returns:
        Config: The effective, immutable configuration.

    Raises:
        ConfigError: If a config file carries a value of the wrong type.
    """
    draft: MutableConfig = MutableConfig.from_defaults()

    source: Path | None = config_path
    if source is None and not no_config:
        source = discover_config_file(input_path)
    if source is not None:
        draft.merge_with(MutableConfig.from_toml_file(source))

    draft.apply_overrides(
        header_lines=header_lines,
        detect_header=detect_header,
        raw_strings=raw_strings,
        keep_block_newlines=keep_block_newlines,
        encoding=encoding,
    )
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
