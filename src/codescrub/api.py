# topmark:header:start
#
#   project      : CodeScrub
#   file         : api.py
#   file_relpath : src/codescrub/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for CodeScrub.

This module is the driver core shared by the CLI and programmatic callers. It
does not depend on Click and never prints; callers decide what to show.

Examples:
    ```python
    from codescrub.api import scrub_text

    result = scrub_text('let s = "a // b"; // note\\n')
    assert result.output_text == 'let s = "a // b"; \\n'
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codescrub.config.logging import get_logger
from codescrub.config.model import Config, MutableConfig
from codescrub.io import read_source, select_sink
from codescrub.scrub.assembler import ScrubResult, assemble
from codescrub.scrub.header import split_header
from codescrub.scrub.report import DryRunReport, build_report
from codescrub.scrub.scanner import scan

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO

    from codescrub.config.logging import ScrubLogger
    from codescrub.scrub.spans import Span

logger: ScrubLogger = get_logger(__name__)


def _default_config() -> Config:
    return MutableConfig.from_defaults().freeze()


def scrub_text(
    source: str,
    config: Config | None = None,
    *,
    header_lines: int | None = None,
) -> ScrubResult:
    """Scrub comments from an in-memory source buffer.

    Args:
        source (str): The full source text.
        config (Config | None): Runtime configuration; defaults when ``None``.
        header_lines (int | None): Overrides ``config.header_lines`` when given.

    Returns:
        ScrubResult: The scrubbed text and its statistics.

    Raises:
        InvalidHeaderLineCountError: If the header count is negative or exceeds
            the number of lines in ``source``.
        UnterminatedBlockCommentError: If ``source`` ends inside a block comment.
        UnterminatedStringLiteralError: If ``source`` ends inside a literal.
    """
    cfg: Config = config or _default_config()
    n: int = cfg.header_lines if header_lines is None else header_lines
    header_end: int = split_header(source, n)
    spans: list[Span] = scan(source, header_end, raw_strings=cfg.raw_strings)
    return assemble(
        source,
        spans,
        header_end,
        header_lines=n,
        keep_block_newlines=cfg.keep_block_newlines,
    )


@dataclass(frozen=True, slots=True)
class ScrubOutcome:
    """Result of scrubbing one file.

    Attributes:
        path (Path): The input file.
        source (str): The original file content.
        result (ScrubResult): The scrub result.
        report (DryRunReport | None): The line-level report (dry runs only).
        written (bool): Whether output was written to a sink.
    """

    path: Path
    source: str
    result: ScrubResult
    report: DryRunReport | None
    written: bool


def scrub_file(
    path: Path,
    config: Config | None = None,
    *,
    output: Path | None = None,
    dry_run: bool = False,
    header_lines: int | None = None,
    source: str | None = None,
    stream: TextIO | None = None,
) -> ScrubOutcome:
    """Scrub one file and write the result (all-or-nothing).

    The file is read fully, scrubbed in memory, and only then handed to a sink:
    a scan failure never produces partial output. In dry-run mode nothing is
    written and a `DryRunReport` is attached instead.

    Args:
        path (Path): Input file.
        config (Config | None): Runtime configuration; defaults when ``None``.
        output (Path | None): Destination file; ``None`` writes to ``stream``/stdout.
        dry_run (bool): Compute and report, but write nothing.
        header_lines (int | None): Overrides ``config.header_lines`` when given.
        source (str | None): Content of ``path`` if the caller already read it.
        stream (TextIO | None): Stream used when writing to standard output.

    Returns:
        ScrubOutcome: The scrub result and what was done with it.

    Raises:
        InputNotFoundError: If ``path`` does not exist.
        InputReadError: If ``path`` cannot be read or decoded.
        OutputWriteError: If the output cannot be written.
        InvalidHeaderLineCountError: See `scrub_text`.
        UnterminatedBlockCommentError: See `scrub_text`.
        UnterminatedStringLiteralError: See `scrub_text`.
    """
    cfg: Config = config or _default_config()
    if source is None:
        source = read_source(path, cfg.encoding)
    result: ScrubResult = scrub_text(source, cfg, header_lines=header_lines)

    report: DryRunReport | None = build_report(source, result) if dry_run else None
    sink = select_sink(dry_run=dry_run, output=output, encoding=cfg.encoding, stream=stream)
    written: bool = sink.write(result.output_text).written
    logger.info(
        "%s: %d comment span(s) removed (%s)",
        path,
        result.comment_span_count,
        "dry run" if dry_run else ("written" if written else "not written"),
    )
    return ScrubOutcome(
        path=path, source=source, result=result, report=report, written=written
    )
