# topmark:header:start
#
#   project      : CodeScrub
#   file         : errors.py
#   file_relpath : src/codescrub/scrub/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error kinds raised by the scrubbing core and its driver.

All errors derive from `ScrubError`. Lexical errors (`ScanError` subclasses)
carry the offset and the 1-based line/column where the unterminated construct
began. The CLI maps each kind onto an exit code (see `codescrub.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ScrubError(Exception):
    """Base class for all CodeScrub errors."""


class InputNotFoundError(ScrubError):
    """The input path does not exist or is not a regular file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file '{path}' does not exist or is not a file.")


class InputReadError(ScrubError):
    """The input file could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read input file '{path}': {reason}")


class OutputWriteError(ScrubError):
    """The scrubbed output could not be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write output '{path}': {reason}")


class InvalidHeaderLineCountError(ScrubError):
    """The header line count is negative or exceeds the number of lines."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Invalid header line count {requested}: "
            f"must be between 0 and {available} (the number of lines in the input)."
        )


class ScanError(ScrubError):
    """A lexical construct was still open when the input ended."""

    construct: str = "construct"

    def __init__(self, offset: int, line: int, column: int) -> None:
        self.offset = offset
        self.line = line
        self.column = column
        super().__init__(
            f"Unterminated {self.construct} starting at line {line}, column {column}."
        )


class UnterminatedBlockCommentError(ScanError):
    """End of input reached inside a ``/* ... */`` comment."""

    construct = "block comment"


class UnterminatedStringLiteralError(ScanError):
    """End of input reached inside a string, char or raw string literal."""

    construct = "literal"

    def __init__(self, offset: int, line: int, column: int, delimiter: str) -> None:
        self.delimiter = delimiter
        self.construct = "character literal" if delimiter == "'" else "string literal"
        super().__init__(offset, line, column)
