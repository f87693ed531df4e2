# topmark:header:start
#
#   project      : CodeScrub
#   file         : test_cli_errors.py
#   file_relpath : tests/cli/test_cli_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for mapping domain errors onto CLI exit codes."""

from __future__ import annotations

from pathlib import Path

import pytest

from codescrub.cli.errors import CodescrubError, to_cli_error
from codescrub.cli.exit_codes import ExitCode
from codescrub.config import ConfigError
from codescrub.scrub.errors import (
    InputNotFoundError,
    InputReadError,
    InvalidHeaderLineCountError,
    OutputWriteError,
    ScrubError,
    UnterminatedBlockCommentError,
    UnterminatedStringLiteralError,
)


def _read_error(cause: BaseException) -> InputReadError:
    try:
        raise InputReadError(Path("x.c"), "boom") from cause
    except InputReadError as e:
        return e


@pytest.mark.parametrize(
    "error, code",
    [
        (ConfigError("bad"), ExitCode.CONFIG_ERROR),
        (InputNotFoundError(Path("x.c")), ExitCode.FILE_NOT_FOUND),
        (_read_error(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad")), ExitCode.DATA_ERROR),
        (_read_error(PermissionError(13, "denied")), ExitCode.IO_ERROR),
        (OutputWriteError(Path("o.c"), "full"), ExitCode.IO_ERROR),
        (InvalidHeaderLineCountError(9, 2), ExitCode.USAGE_ERROR),
        (UnterminatedBlockCommentError(0, 1, 1), ExitCode.DATA_ERROR),
        (UnterminatedStringLiteralError(4, 1, 5, '"'), ExitCode.DATA_ERROR),
        (ScrubError("other"), ExitCode.FAILURE),
    ],
)
def test_error_exit_codes(error: ScrubError | ConfigError, code: ExitCode) -> None:
    """Each error kind maps onto its exit code."""
    cli_error: CodescrubError = to_cli_error(error)
    assert cli_error.exit_code == code


def test_scan_error_message_names_the_file() -> None:
    """Lexical errors are prefixed with the input path."""
    cli_error: CodescrubError = to_cli_error(UnterminatedBlockCommentError(3, 2, 1), Path("a.c"))
    assert cli_error.format_message() == (
        "a.c: Unterminated block comment starting at line 2, column 1."
    )
