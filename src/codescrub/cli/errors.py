# topmark:header:start
#
#   project      : CodeScrub
#   file         : errors.py
#   file_relpath : src/codescrub/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CodeScrub CLI.

Domain errors from `codescrub.scrub.errors` are translated into these
`click.ClickException` subclasses by `to_cli_error`, which fixes the process
exit code for each error kind.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from codescrub.cli.exit_codes import ExitCode
from codescrub.config.model import ConfigError
from codescrub.scrub.errors import (
    InputNotFoundError,
    InputReadError,
    InvalidHeaderLineCountError,
    OutputWriteError,
    ScanError,
    ScrubError,
)

if TYPE_CHECKING:
    from pathlib import Path


class CodescrubError(click.ClickException):
    """Base class for all CodeScrub CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class CodescrubUsageError(CodescrubError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CodescrubDataError(CodescrubError):
    """Error for malformed input (unterminated constructs, undecodable text)."""

    exit_code = ExitCode.DATA_ERROR


class CodescrubFileNotFoundError(CodescrubError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CodescrubIOError(CodescrubError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class CodescrubConfigError(CodescrubError):
    """Error for invalid configuration values."""

    exit_code = ExitCode.CONFIG_ERROR


def to_cli_error(error: ScrubError | ConfigError, path: Path | None = None) -> CodescrubError:
    """Translate a domain error into the matching CLI exception.

    Args:
        error (ScrubError | ConfigError): The error raised by the core or config layer.
        path (Path | None): Input file, prefixed to lexical error messages.

    Returns:
        CodescrubError: An exception carrying the right exit code.
    """
    message: str = str(error)
    if isinstance(error, ConfigError):
        return CodescrubConfigError(message)
    if isinstance(error, InputNotFoundError):
        return CodescrubFileNotFoundError(message)
    if isinstance(error, InputReadError):
        if isinstance(error.__cause__, (UnicodeDecodeError, LookupError)):
            return CodescrubDataError(message)
        return CodescrubIOError(message)
    if isinstance(error, OutputWriteError):
        return CodescrubIOError(message)
    if isinstance(error, InvalidHeaderLineCountError):
        return CodescrubUsageError(message)
    if isinstance(error, ScanError):
        return CodescrubDataError(f"{path}: {message}" if path else message)
    return CodescrubError(message)
