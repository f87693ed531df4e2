# topmark:header:start
#
#   project      : CodeScrub
#   file         : io.py
#   file_relpath : src/codescrub/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and discover TOML configuration sources.

Configuration is read from either:
- ``codescrub.toml`` (top-level keys), or
- ``pyproject.toml`` (keys under ``[tool.codescrub]``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from codescrub.config.logging import get_logger
from codescrub.constants import CODESCRUB_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from codescrub.config.logging import ScrubLogger

TomlTable = dict[str, Any]

logger: ScrubLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content.

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


def extract_codescrub_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the CodeScrub settings contained in a parsed TOML document.

    For ``pyproject.toml`` the settings live under ``[tool.codescrub]``; for any
    other file name the document's top level is used.

    Args:
        path: Path the document was read from (used to pick the layout).
        data: Parsed TOML document.

    Returns:
        The CodeScrub settings table (possibly empty).
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return {}
    section: Any = cast("dict[str, Any]", tool).get(PYPROJECT_TOOL_SECTION, {})
    return cast("TomlTable", section) if isinstance(section, dict) else {}


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest configuration file, walking upward from ``start``.

    In each directory ``codescrub.toml`` is preferred; a ``pyproject.toml``
    only counts when it carries a ``[tool.codescrub]`` table.

    Args:
        start: File or directory to start from.

    Returns:
        The discovered configuration path, or ``None``.
    """
    here: Path = start.resolve()
    if not here.is_dir():
        here = here.parent
    for directory in (here, *here.parents):
        candidate: Path = directory / CODESCRUB_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file() and extract_codescrub_table(pyproject, load_toml_dict(pyproject)):
            logger.debug("Discovered [tool.%s] in %s", PYPROJECT_TOOL_SECTION, pyproject)
            return pyproject
    logger.debug("No config file found above %s", start)
    return None
