# topmark:header:start
#
#   project      : CodeScrub
#   file         : test_report.py
#   file_relpath : tests/scrub/test_report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the dry-run report builder and renderer."""

from __future__ import annotations

from codescrub.api import scrub_text
from codescrub.scrub.report import DryRunReport, ReportEntry, build_report, diff_lines, render_report
from tests.conftest import make_config


def test_diff_lines_lists_changed_lines_only() -> None:
    """Unchanged lines are not reported."""
    entries: list[ReportEntry] = diff_lines("a\nb // c\nd\n", "a\nb \nd\n")
    assert entries == [ReportEntry(2, "b // c", "b ")]


def test_diff_lines_marks_joined_lines() -> None:
    """Lines missing from the output are reported with no scrubbed text."""
    entries: list[ReportEntry] = diff_lines("a /* x\ny */ b\n", "a  b\n")
    assert entries == [ReportEntry(1, "a /* x", "a  b"), ReportEntry(2, "y */ b", None)]


def test_build_report_totals() -> None:
    """The report carries the byte and span totals of the scrub result."""
    source = "x = 1; // one\n/* two */\n"
    report: DryRunReport = build_report(source, scrub_text(source))
    assert report.lines_changed == 2
    assert report.comment_span_count == 2
    assert report.comment_byte_count == len("// one") + len("/* two */")


def test_render_report_plain() -> None:
    """The plain rendering shows -/+ pairs and a summary."""
    source = "keep\nx = 1; // one\n"
    text: str = render_report(build_report(source, scrub_text(source)))
    assert text == (
        "0002|- x = 1; // one\n"
        "0002|+ x = 1; \n"
        "---\n"
        "Lines changed: 1\n"
        "Comment bytes removed: 6\n"
        "Comment spans removed: 1\n"
    )


def test_render_report_joined_line_marker() -> None:
    """Joined lines are rendered with a marker."""
    source = "a /* x\ny */ b\n"
    result = scrub_text(source, make_config(keep_block_newlines=False))
    text: str = render_report(build_report(source, result))
    assert "0002|+ <line joined>" in text


def test_render_report_no_changes() -> None:
    """A file without comments still renders the summary."""
    source = "plain\n"
    text: str = render_report(build_report(source, scrub_text(source)))
    assert text.startswith("---\n")
    assert "Lines changed: 0" in text
