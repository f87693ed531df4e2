# topmark:header:start
#
#   project      : CodeScrub
#   file         : utils.py
#   file_relpath : src/codescrub/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI rendering and prompting helpers for CodeScrub.

- `render_verbose_summary` formats the per-comment summary shown with ``--verbose``.
- `confirm_detected_header` proposes a detected header and asks for confirmation.

All messages go through a `ConsoleLike` so that stdout only ever carries
scrubbed content or the dry-run report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from codescrub.config.logging import get_logger
from codescrub.scrub.header import detect_header
from codescrub.scrub.spans import SpanKind

if TYPE_CHECKING:
    from codescrub.cli.console_api import ConsoleLike
    from codescrub.config.logging import ScrubLogger
    from codescrub.scrub.assembler import RemovedComment, ScrubResult
    from codescrub.scrub.header import HeaderDetection

logger: ScrubLogger = get_logger(__name__)


def _describe(removed: RemovedComment) -> str:
    what: str = "line comment" if removed.kind is SpanKind.LINE_COMMENT else "block comment"
    if removed.start_line == removed.end_line:
        return f"Line {removed.start_line}: removed {what}"
    return f"Lines {removed.start_line}-{removed.end_line}: removed {what}"


def render_verbose_summary(result: ScrubResult) -> str:
    """Render the verbose summary of a scrub run.

    Args:
        result (ScrubResult): The scrub result to describe.

    Returns:
        str: One line per removed comment, followed by totals.
    """
    lines: list[str] = [_describe(r) for r in result.removed]
    if result.header_lines:
        lines.append(f"Header: {result.header_lines} line(s) preserved")
    lines.append(
        f"Removed {result.comment_span_count} comment(s) "
        f"({result.line_comment_count} line, {result.block_comment_count} block), "
        f"{result.comment_byte_count} byte(s), {result.lines_changed} line(s) changed"
    )
    return "\n".join(lines)


def confirm_detected_header(console: ConsoleLike, source: str, *, assume_yes: bool) -> int:
    """Detect a leading comment header and ask whether to preserve it.

    Args:
        console (ConsoleLike): Console used for the preview.
        source (str): The full source text.
        assume_yes (bool): Accept the proposal without prompting.

    Returns:
        int: The accepted header line count, or 0 when none was found or the
        proposal was declined.
    """
    detection: HeaderDetection = detect_header(source)
    if detection.line_count == 0:
        logger.info("No leading comment header detected")
        return 0

    console.info(
        console.styled(f"Detected a {detection.line_count}-line header:", bold=True)
    )
    console.info(detection.preview)
    if assume_yes:
        return detection.line_count
    if click.confirm("Preserve this header?", default=True, err=True):
        return detection.line_count
    return 0
