# topmark:header:start
#
#   project      : CodeScrub
#   file         : __init__.py
#   file_relpath : src/codescrub/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for CodeScrub."""

from __future__ import annotations
