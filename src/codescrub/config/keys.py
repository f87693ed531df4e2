# topmark:header:start
#
#   project      : CodeScrub
#   file         : keys.py
#   file_relpath : src/codescrub/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for CodeScrub configuration.

These constants are the external configuration API as it appears in
``codescrub.toml`` and in ``[tool.codescrub]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by CodeScrub configuration (flat, section-less)."""

    KEY_HEADER_LINES: Final[str] = "header_lines"
    KEY_DETECT_HEADER: Final[str] = "detect_header"
    KEY_RAW_STRINGS: Final[str] = "raw_strings"
    KEY_KEEP_BLOCK_NEWLINES: Final[str] = "keep_block_newlines"
    KEY_ENCODING: Final[str] = "encoding"

    ALL: Final[frozenset[str]] = frozenset(
        {
            KEY_HEADER_LINES,
            KEY_DETECT_HEADER,
            KEY_RAW_STRINGS,
            KEY_KEEP_BLOCK_NEWLINES,
            KEY_ENCODING,
        }
    )
