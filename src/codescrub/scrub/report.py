# topmark:header:start
#
#   project      : CodeScrub
#   file         : report.py
#   file_relpath : src/codescrub/scrub/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dry-run report builder.

Compares the original text with the would-be scrubbed output line by line and
summarizes the differences. This module performs no I/O and never raises on
valid scrub results: it only summarizes data already produced by the scanner
and assembler.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import TYPE_CHECKING

from yachalk import chalk

from codescrub.scrub.header import split_lines

if TYPE_CHECKING:
    from codescrub.scrub.assembler import ScrubResult


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """One line that differs between input and output.

    ``scrubbed_line`` is ``None`` when the output has fewer lines than the input
    (block comments joined with ``keep_block_newlines = false``).
    """

    line_number: int
    original_line: str
    scrubbed_line: str | None


@dataclass(frozen=True, slots=True)
class DryRunReport:
    """Line-level change report plus summary totals."""

    entries: tuple[ReportEntry, ...]
    comment_byte_count: int
    comment_span_count: int

    @property
    def lines_changed(self) -> int:
        """Total number of changed lines."""
        return len(self.entries)


def diff_lines(original: str, scrubbed: str) -> list[ReportEntry]:
    """Compare two texts line by line.

    Args:
        original (str): Input text.
        scrubbed (str): Assembled output text.

    Returns:
        list[ReportEntry]: One entry per differing line, in line order.
    """
    entries: list[ReportEntry] = []
    pairs = zip_longest(split_lines(original), split_lines(scrubbed))
    for number, (before, after) in enumerate(pairs, start=1):
        if before is None:
            # Output never has more lines than input
            break
        if before != after:
            entries.append(ReportEntry(number, before, after))
    return entries


def build_report(original: str, result: ScrubResult) -> DryRunReport:
    """Build the dry-run report for ``original`` and its scrub ``result``.

    Args:
        original (str): Input text.
        result (ScrubResult): Result of assembling ``original``.

    Returns:
        DryRunReport: Per-line entries and summary totals.
    """
    return DryRunReport(
        entries=tuple(diff_lines(original, result.output_text)),
        comment_byte_count=result.comment_byte_count,
        comment_span_count=result.comment_span_count,
    )


def render_report(report: DryRunReport, *, color: bool = False) -> str:
    """Render a dry-run report as human-readable text.

    Each changed line is shown as a ``-`` (original) / ``+`` (scrubbed) pair
    prefixed with its 4-digit line number, followed by a summary block.

    Args:
        report (DryRunReport): The report to render.
        color (bool): Colorize removed/added lines with chalk.

    Returns:
        str: The rendered report, newline-terminated.
    """

    def paint(text: str, style: str) -> str:
        if not color:
            return text
        match style:
            case "-":
                return chalk.bold.red(text)
            case "+":
                return chalk.bold.green(text)
            case _:
                return chalk.gray(text)

    out: list[str] = []
    for entry in report.entries:
        out.append(paint(f"{entry.line_number:04d}|- {entry.original_line}", "-"))
        if entry.scrubbed_line is None:
            out.append(paint(f"{entry.line_number:04d}|+ <line joined>", "+"))
        else:
            out.append(paint(f"{entry.line_number:04d}|+ {entry.scrubbed_line}", "+"))
    out.append(paint("---", "="))
    out.append(f"Lines changed: {report.lines_changed}")
    out.append(f"Comment bytes removed: {report.comment_byte_count}")
    out.append(f"Comment spans removed: {report.comment_span_count}")
    return "\n".join(out) + "\n"
