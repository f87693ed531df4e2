# topmark:header:start
#
#   project      : CodeScrub
#   file         : __init__.py
#   file_relpath : src/codescrub/scrub/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment-scrubbing core.

Data flow: raw text -> `scanner.scan` -> spans -> `assembler.assemble` -> scrubbed
text, or -> `report.build_report` for dry runs. Nothing in this package performs
I/O; the driver (`codescrub.api`, `codescrub.cli`) owns files and streams.
"""

from __future__ import annotations

from codescrub.scrub.assembler import ScrubResult, assemble
from codescrub.scrub.report import DryRunReport, ReportEntry, build_report
from codescrub.scrub.scanner import scan
from codescrub.scrub.spans import Span, SpanKind

__all__ = [
    "DryRunReport",
    "ReportEntry",
    "ScrubResult",
    "Span",
    "SpanKind",
    "assemble",
    "build_report",
    "scan",
]
