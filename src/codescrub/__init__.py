# topmark:header:start
#
#   project      : CodeScrub
#   file         : __init__.py
#   file_relpath : src/codescrub/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CodeScrub package.

CodeScrub removes ``//`` and ``/* ... */`` comments from C-like source files
while leaving string/character literals and a configurable number of leading
header lines untouched. It exposes both a CLI (``codescrub``) and a small typed
API for automation (see `codescrub.api`).
"""

from __future__ import annotations
