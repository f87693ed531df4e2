# topmark:header:start
#
#   project      : CodeScrub
#   file         : __main__.py
#   file_relpath : src/codescrub/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CodeScrub via ``python -m codescrub``.

Delegates directly to :func:`codescrub.cli.main.cli` so there is a single,
authoritative CLI entry point regardless of how CodeScrub is launched.

Examples:
    Scrub a file to stdout::

        python -m codescrub src/lib.rs
"""

from __future__ import annotations

from codescrub.cli.main import cli

if __name__ == "__main__":
    cli()
