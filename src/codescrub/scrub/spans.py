# topmark:header:start
#
#   project      : CodeScrub
#   file         : spans.py
#   file_relpath : src/codescrub/scrub/spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Span data model shared by the scanner, assembler and report builder.

A `Span` is a half-open ``[start, end)`` range of character offsets into the
source buffer, tagged with a `SpanKind`. Spans produced by one scan are
contiguous, non-overlapping, and together reconstruct the scanned region.

`LINE_END_RE` is the single definition of a physical line break (``\\r\\n``,
``\\r`` or ``\\n``) used for header splitting, line numbering and the report.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum

LINE_END_RE: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


class SpanKind(str, Enum):
    """Classification of a span of source text."""

    CODE = "code"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"


@dataclass(frozen=True, slots=True)
class Span:
    """A contiguous run of input classified uniformly."""

    start: int
    end: int
    kind: SpanKind

    def text(self, source: str) -> str:
        """Return the slice of ``source`` covered by this span."""
        return source[self.start : self.end]


class LineIndex:
    """Map character offsets to 1-based ``(line, column)`` positions.

    Lines are delimited by `LINE_END_RE`, so CR-only, LF and CRLF files are
    numbered the same way as the dry-run report numbers them.
    """

    def __init__(self, source: str) -> None:
        self._starts: list[int] = [0] + [m.end() for m in LINE_END_RE.finditer(source)]

    def line_of(self, offset: int) -> int:
        """Return the 1-based line containing ``offset``."""
        return bisect_right(self._starts, offset)

    def position(self, offset: int) -> tuple[int, int]:
        """Return the 1-based ``(line, column)`` of ``offset``."""
        line: int = self.line_of(offset)
        return line, offset - self._starts[line - 1] + 1
