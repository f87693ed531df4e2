# topmark:header:start
#
#   project      : CodeScrub
#   file         : assembler.py
#   file_relpath : src/codescrub/scrub/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output assembler: turn a span sequence back into text.

Policy:
  * The header region is copied verbatim.
  * Code spans are copied unchanged.
  * Comment spans are dropped, not replaced with whitespace.
  * A line comment that is the only content on its line also takes the
    whitespace before it, but the line's newline stays.
  * A removed multi-line block comment keeps its newline characters when
    ``keep_block_newlines`` is set (the default), so later lines keep their
    line numbers. Otherwise the whole block is excised.

The output never has more newlines than the input, and retained code keeps its
relative order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codescrub.config.logging import get_logger
from codescrub.scrub.report import diff_lines
from codescrub.scrub.scanner import NEWLINE_CHARS
from codescrub.scrub.spans import LineIndex, SpanKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codescrub.config.logging import ScrubLogger
    from codescrub.scrub.spans import Span

logger: ScrubLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RemovedComment:
    """One comment removed from the output.

    Attributes:
        kind (SpanKind): ``LINE_COMMENT`` or ``BLOCK_COMMENT``.
        start_line (int): 1-based line where the comment starts.
        end_line (int): 1-based line where the comment ends.
        byte_count (int): Size of the comment text in UTF-8 bytes.
    """

    kind: SpanKind
    start_line: int
    end_line: int
    byte_count: int


@dataclass(frozen=True, slots=True)
class ScrubResult:
    """Aggregate product of a scrub run.

    Attributes:
        output_text (str): The scrubbed text.
        comment_byte_count (int): Total UTF-8 bytes of removed comment text.
        comment_span_count (int): Number of removed comment spans.
        lines_changed (int): Number of lines that differ between input and output.
        removed (tuple[RemovedComment, ...]): Removed comments in source order.
        header_lines (int): Number of header lines preserved verbatim.
    """

    output_text: str
    comment_byte_count: int
    comment_span_count: int
    lines_changed: int
    removed: tuple[RemovedComment, ...] = ()
    header_lines: int = 0

    @property
    def line_comment_count(self) -> int:
        """Number of removed line comments."""
        return sum(1 for r in self.removed if r.kind is SpanKind.LINE_COMMENT)

    @property
    def block_comment_count(self) -> int:
        """Number of removed block comments."""
        return sum(1 for r in self.removed if r.kind is SpanKind.BLOCK_COMMENT)


class _LineBuffer:
    """Accumulates output while tracking the text emitted since the last newline."""

    def __init__(self) -> None:
        self.done: list[str] = []
        self.tail: str = ""

    def emit(self, text: str) -> None:
        cut: int = max(text.rfind("\n"), text.rfind("\r"))
        if cut < 0:
            self.tail += text
            return
        self.done.append(self.tail)
        self.done.append(text[: cut + 1])
        self.tail = text[cut + 1 :]

    def drop_blank_tail(self) -> None:
        # The line so far holds only whitespace: the comment owns the line
        if not self.tail.strip():
            self.tail = ""

    def getvalue(self) -> str:
        return "".join(self.done) + self.tail


def assemble(
    source: str,
    spans: Sequence[Span],
    header_end: int = 0,
    *,
    header_lines: int = 0,
    keep_block_newlines: bool = True,
) -> ScrubResult:
    """Build the scrubbed text from the header region and a span sequence.

    Args:
        source (str): The full source buffer.
        spans (Sequence[Span]): Spans covering ``source[header_end:]``, as produced by
            `codescrub.scrub.scanner.scan`.
        header_end (int): Offset where the header region ends.
        header_lines (int): Number of header lines (reported in the result only).
        keep_block_newlines (bool): Keep newline characters of removed block comments.

    Returns:
        ScrubResult: The scrubbed text and its statistics.
    """
    out = _LineBuffer()
    # The header region always ends at a line boundary
    out.emit(source[:header_end])

    index = LineIndex(source)
    removed: list[RemovedComment] = []

    for span in spans:
        text: str = span.text(source)
        if span.kind is SpanKind.CODE:
            out.emit(text)
            continue

        removed.append(
            RemovedComment(
                kind=span.kind,
                start_line=index.line_of(span.start),
                end_line=index.line_of(span.end - 1),
                byte_count=len(text.encode("utf-8")),
            )
        )
        if span.kind is SpanKind.LINE_COMMENT:
            out.drop_blank_tail()
        elif keep_block_newlines:
            newlines: str = "".join(ch for ch in text if ch in NEWLINE_CHARS)
            if newlines:
                out.emit(newlines)

    output_text: str = out.getvalue()
    result = ScrubResult(
        output_text=output_text,
        comment_byte_count=sum(r.byte_count for r in removed),
        comment_span_count=len(removed),
        lines_changed=len(diff_lines(source, output_text)),
        removed=tuple(removed),
        header_lines=header_lines,
    )
    logger.debug(
        "assemble: removed %d comment span(s), %d byte(s), %d line(s) changed",
        result.comment_span_count,
        result.comment_byte_count,
        result.lines_changed,
    )
    return result
