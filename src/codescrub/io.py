# topmark:header:start
#
#   project      : CodeScrub
#   file         : io.py
#   file_relpath : src/codescrub/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading sources and writing scrubbed content to a sink.

Both bounding I/O operations are scoped: the input is read fully and closed
before scanning starts, and output is only opened once the scrubbed text is
complete.

Sinks
-----
- FileSystemSink: atomic write to a path (temporary file + ``os.replace``).
- StdoutSink: writes the scrubbed text to standard output.
- NullSink: no-op (dry-run).
"""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO

from codescrub.config.logging import get_logger
from codescrub.scrub.errors import InputNotFoundError, InputReadError, OutputWriteError

if TYPE_CHECKING:
    from codescrub.config.logging import ScrubLogger

logger: ScrubLogger = get_logger(__name__)


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read the whole input file, preserving its native line endings.

    Args:
        path (Path): Input file path.
        encoding (str): Text encoding.

    Returns:
        str: The file content.

    Raises:
        InputNotFoundError: If ``path`` does not exist or is not a regular file.
        InputReadError: If the file cannot be read or decoded.
    """
    if not path.is_file():
        raise InputNotFoundError(path)
    try:
        with open(path, encoding=encoding, newline="") as f:
            text: str = f.read()
    except UnicodeDecodeError as e:
        raise InputReadError(path, f"not valid {encoding} text ({e.reason})") from e
    except LookupError as e:
        raise InputReadError(path, f"unknown encoding '{encoding}'") from e
    except OSError as e:
        raise InputReadError(path, e.strerror or str(e)) from e
    logger.debug("Read %d character(s) from %s", len(text), path)
    return text


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    written: bool
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for output sinks."""

    def write(self, text: str) -> WriteResult:
        """Write ``text`` to the sink.

        Args:
            text (str): Scrubbed content.

        Returns:
            WriteResult: Whether anything was written, and how many bytes.
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, text: str) -> WriteResult:
        """No-op write for dry-run mode."""
        return WriteResult(written=False)


class StdoutSink:
    """Standard-output sink."""

    def __init__(self, stream: TextIO | None = None, encoding: str = "utf-8") -> None:
        self.stream = stream
        self.encoding = encoding

    def write(self, text: str) -> WriteResult:
        """Emit the scrubbed text to standard output.

        Raises:
            OutputWriteError: If the stream cannot be written.
        """
        stream: TextIO = self.stream or sys.stdout
        try:
            stream.write(text)
            stream.flush()
        except OSError as e:
            raise OutputWriteError("<stdout>", e.strerror or str(e)) from e
        return WriteResult(written=True, bytes_written=len(text.encode(self.encoding)))


class FileSystemSink:
    """Filesystem sink that atomically replaces ``path``.

    The text is written to a temporary file in the destination directory, which
    is then renamed over ``path``: a failed write never leaves partial output.
    """

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self.path = path
        self.encoding = encoding

    def write(self, text: str) -> WriteResult:
        """Write ``text`` to ``self.path``.

        Raises:
            OutputWriteError: If the destination cannot be written.
        """
        directory: Path = self.path.parent
        tmp_name: str | None = None
        try:
            data: bytes = text.encode(self.encoding)
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, UnicodeEncodeError, LookupError) as e:
            reason: str = getattr(e, "strerror", None) or str(e)
            raise OutputWriteError(self.path, reason) from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
        logger.debug("FileSystemSink: wrote %d bytes to %s", len(data), self.path)
        return WriteResult(written=True, bytes_written=len(data))


def select_sink(
    *, dry_run: bool, output: Path | None, encoding: str = "utf-8", stream: TextIO | None = None
) -> WriteSink:
    """Return the sink matching the run mode.

    Args:
        dry_run (bool): Whether the run must not write anything.
        output (Path | None): Destination path; ``None`` selects standard output.
        encoding (str): Output text encoding.
        stream (TextIO | None): Stream used by the stdout sink (defaults to ``sys.stdout``).

    Returns:
        WriteSink: ``NullSink`` for dry runs, ``StdoutSink`` without ``output``,
        otherwise ``FileSystemSink``.
    """
    if dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    if output is None:
        logger.debug("Selected STDOUT sink (no output path)")
        return StdoutSink(stream=stream, encoding=encoding)
    logger.debug("Selected file system sink (%s)", output)
    return FileSystemSink(output, encoding=encoding)
