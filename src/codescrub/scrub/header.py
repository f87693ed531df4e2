# topmark:header:start
#
#   project      : CodeScrub
#   file         : header.py
#   file_relpath : src/codescrub/scrub/header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header region handling.

The header region is the first ``N`` physical lines of the buffer. It is copied
verbatim and never scanned for comments.

This module also offers `detect_header`, a heuristic that proposes ``N`` from
the leading comment block of a file (license banners, ``//!`` crate docs, ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codescrub.config.logging import get_logger
from codescrub.constants import HEADER_MAX_LINES, HEADER_PREVIEW_LINES
from codescrub.scrub.errors import InvalidHeaderLineCountError
from codescrub.scrub.spans import LINE_END_RE

if TYPE_CHECKING:
    from codescrub.config.logging import ScrubLogger

logger: ScrubLogger = get_logger(__name__)

# Lines that count as part of a leading comment header
_HEADER_COMMENT_PREFIXES: tuple[str, ...] = ("//", "#![")

# More consecutive blank lines than this end a detected header
_MAX_HEADER_BLANKS: int = 2


def physical_line_ends(source: str) -> list[int]:
    """Return the offset just past each physical line of ``source``.

    A final line without a terminator still counts as a line.
    """
    ends: list[int] = [m.end() for m in LINE_END_RE.finditer(source)]
    if source and (not ends or ends[-1] < len(source)):
        ends.append(len(source))
    return ends


def split_header(source: str, header_lines: int) -> int:
    """Return the offset where the scannable region begins.

    Args:
        source (str): The full source buffer.
        header_lines (int): Number of leading physical lines to preserve.

    Returns:
        int: Offset of the first character after the header region.

    Raises:
        InvalidHeaderLineCountError: If ``header_lines`` is negative or exceeds the
            number of physical lines in ``source``.
    """
    ends: list[int] = physical_line_ends(source)
    if header_lines < 0 or header_lines > len(ends):
        raise InvalidHeaderLineCountError(header_lines, len(ends))
    if header_lines == 0:
        return 0
    return ends[header_lines - 1]


@dataclass(frozen=True, slots=True)
class HeaderDetection:
    """Outcome of `detect_header`.

    Attributes:
        line_count (int): Proposed number of header lines (0 when none was found).
        preview (str): Up to the first ten header lines, followed by a
            ``... (N more lines)`` marker when the header is longer.
    """

    line_count: int
    preview: str


def detect_header(source: str) -> HeaderDetection:
    """Propose a header line count from the leading comment block of ``source``.

    Scanning stops at the first line that is neither blank nor part of a comment,
    after more than two consecutive blank lines following a comment, or after
    ``HEADER_MAX_LINES`` lines. The proposed header ends with the last comment
    line seen, so trailing blank lines are left to the scanner.

    Args:
        source (str): The full source buffer.

    Returns:
        HeaderDetection: Proposed line count and a preview of the header.
    """
    lines: list[str] = LINE_END_RE.split(source)[:HEADER_MAX_LINES]
    last_comment_line: int = 0
    blanks: int = 0
    in_block: bool = False

    for number, line in enumerate(lines, start=1):
        trimmed: str = line.strip()
        if in_block:
            last_comment_line = number
            in_block = "*/" not in trimmed
            continue
        if not trimmed:
            blanks += 1
            if blanks > _MAX_HEADER_BLANKS and last_comment_line:
                break
            continue
        blanks = 0
        if trimmed.startswith(_HEADER_COMMENT_PREFIXES):
            last_comment_line = number
            continue
        if trimmed.startswith("/*"):
            last_comment_line = number
            in_block = "*/" not in trimmed[2:]
            continue
        # First code line ends the header
        break

    if in_block:
        # The leading block comment never closes within the inspected window
        logger.debug("detect_header: leading block comment not closed within window")
        last_comment_line = 0

    shown: list[str] = lines[: min(last_comment_line, HEADER_PREVIEW_LINES)]
    preview: str = "\n".join(shown)
    if last_comment_line > len(shown):
        preview += f"\n... ({last_comment_line - len(shown)} more lines)"

    logger.debug("detect_header: proposing %d header line(s)", last_comment_line)
    return HeaderDetection(line_count=last_comment_line, preview=preview)


def split_lines(source: str) -> list[str]:
    """Split ``source`` into physical lines without their terminators."""
    lines: list[str] = []
    start: int = 0
    for end in physical_line_ends(source):
        lines.append(source[start:end].rstrip("\r\n"))
        start = end
    return lines
