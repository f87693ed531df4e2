# topmark:header:start
#
#   project      : CodeScrub
#   file         : __init__.py
#   file_relpath : src/codescrub/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for CodeScrub.

Exposes the immutable runtime `Config`, its mutable builder `MutableConfig`,
and the logging helpers used throughout the package.
"""

from __future__ import annotations

from codescrub.config.model import Config, ConfigError, MutableConfig

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
]
