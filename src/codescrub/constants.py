# topmark:header:start
#
#   project      : CodeScrub
#   file         : constants.py
#   file_relpath : src/codescrub/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CodeScrub Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CODESCRUB_VERSION: str = get_version("codescrub")

# Config file names, in discovery priority order within one directory
CODESCRUB_TOML_NAME: str = "codescrub.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "codescrub"

LOG_LEVEL_ENV_VAR: str = "CODESCRUB_LOG_LEVEL"

DEFAULT_ENCODING: str = "utf-8"

# Header auto-detection limits
HEADER_PREVIEW_LINES: int = 10
HEADER_MAX_LINES: int = 50
