# topmark:header:start
#
#   project      : CodeScrub
#   file         : scanner.py
#   file_relpath : src/codescrub/scrub/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Lexical scanner: split source text into code and comment spans.

The scanner is a single forward pass over a fully materialized buffer, driven by
an explicit transition function over tagged scan states:

- `Normal`: plain code. ``//`` opens a line comment, ``/*`` a block comment,
  ``"`` a string literal and ``'`` a character literal.
- `InLineComment`: runs up to (not including) the next ``\n`` or ``\r``; the
  newline itself is code, so line structure is preserved. A lone ``\r`` is a
  physical line break here just as it is for header splitting, line numbers
  and the dry-run report, so it ends a line comment even in an LF file.
- `InBlockComment`: the first ``*/`` closes the comment (no nesting).
- `InString` / `InChar`: a backslash moves to `Escaped`; the unescaped delimiter
  returns to `Normal`.
- `Escaped`: consumes exactly one character and returns to the literal state it
  carries.
- `InRawString`: Rust-style ``r#"..."#`` literals, only when raw strings are
  enabled. Backslashes are literal; the closing quote must be followed by the
  same number of ``#``.

Every comment opener starts a new span, so two adjacent comments stay two spans.
The scan fails with `UnterminatedBlockCommentError` or
`UnterminatedStringLiteralError` when the input ends inside a construct.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from codescrub.config.logging import get_logger
from codescrub.scrub.errors import UnterminatedBlockCommentError, UnterminatedStringLiteralError
from codescrub.scrub.spans import LineIndex, Span, SpanKind

if TYPE_CHECKING:
    from codescrub.config.logging import ScrubLogger

logger: ScrubLogger = get_logger(__name__)

NEWLINE_CHARS: frozenset[str] = frozenset("\r\n")


@dataclass(frozen=True, slots=True)
class Normal:
    """Plain code."""


@dataclass(frozen=True, slots=True)
class InLineComment:
    """Inside a ``//`` comment."""


@dataclass(frozen=True, slots=True)
class InBlockComment:
    """Inside a ``/* ... */`` comment."""


@dataclass(frozen=True, slots=True)
class InString:
    """Inside a string literal closed by ``delimiter``."""

    delimiter: str = '"'


@dataclass(frozen=True, slots=True)
class InChar:
    """Inside a character literal."""

    delimiter: str = "'"


@dataclass(frozen=True, slots=True)
class Escaped:
    """After a backslash inside a literal; returns to ``previous``."""

    previous: InString | InChar


@dataclass(frozen=True, slots=True)
class InRawString:
    """Inside a raw string literal opened with ``hashes`` ``#`` characters."""

    hashes: int = 0


ScanState = Union[Normal, InLineComment, InBlockComment, InString, InChar, Escaped, InRawString]

NORMAL = Normal()
IN_LINE_COMMENT = InLineComment()
IN_BLOCK_COMMENT = InBlockComment()
IN_STRING = InString()
IN_CHAR = InChar()


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of feeding the scanner one step of input.

    Attributes:
        state (ScanState): State after the step.
        width (int): Number of characters consumed (at least 1).
        kind (SpanKind): Classification of the consumed characters.
        opens (bool): True if the consumed characters open a new comment span.
    """

    state: ScanState
    width: int
    kind: SpanKind
    opens: bool = False


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _raw_string_prefix(source: str, pos: int) -> int | None:
    """Return the number of ``#`` of a raw string opener at ``pos``, or None.

    ``pos`` points at an ``r``. The ``r`` must not continue an identifier; a
    byte-string ``br"..."`` prefix is accepted.
    """
    if pos > 0 and _is_ident_char(source[pos - 1]):
        if source[pos - 1] != "b" or (pos > 1 and _is_ident_char(source[pos - 2])):
            return None
    end: int = pos + 1
    while end < len(source) and source[end] == "#":
        end += 1
    if end < len(source) and source[end] == '"':
        return end - pos - 1
    return None


def transition(state: ScanState, source: str, pos: int, *, raw_strings: bool = False) -> Transition:
    """Compute the transition taken on ``source[pos]`` in ``state``.

    Uses one character of lookahead (``source[pos + 1]``); raw string openers
    and closers additionally peek across their ``#`` run.

    Args:
        state (ScanState): Current scan state.
        source (str): The full source buffer.
        pos (int): Offset of the character to consume.
        raw_strings (bool): Whether ``r"..."`` raw strings are recognized.

    Returns:
        Transition: The next state, the number of characters consumed and their kind.
    """
    ch: str = source[pos]
    nxt: str = source[pos + 1] if pos + 1 < len(source) else ""

    match state:
        case Normal():
            if ch == "/" and nxt == "/":
                return Transition(IN_LINE_COMMENT, 2, SpanKind.LINE_COMMENT, opens=True)
            if ch == "/" and nxt == "*":
                return Transition(IN_BLOCK_COMMENT, 2, SpanKind.BLOCK_COMMENT, opens=True)
            if ch == '"':
                return Transition(IN_STRING, 1, SpanKind.CODE)
            if ch == "'":
                return Transition(IN_CHAR, 1, SpanKind.CODE)
            if ch == "r" and raw_strings:
                hashes: int | None = _raw_string_prefix(source, pos)
                if hashes is not None:
                    return Transition(InRawString(hashes), hashes + 2, SpanKind.CODE)
            return Transition(NORMAL, 1, SpanKind.CODE)

        case InLineComment():
            if ch in NEWLINE_CHARS:
                return Transition(NORMAL, 1, SpanKind.CODE)
            return Transition(state, 1, SpanKind.LINE_COMMENT)

        case InBlockComment():
            if ch == "*" and nxt == "/":
                return Transition(NORMAL, 2, SpanKind.BLOCK_COMMENT)
            return Transition(state, 1, SpanKind.BLOCK_COMMENT)

        case InString() | InChar():
            if ch == "\\":
                return Transition(Escaped(state), 1, SpanKind.CODE)
            if ch == state.delimiter:
                return Transition(NORMAL, 1, SpanKind.CODE)
            return Transition(state, 1, SpanKind.CODE)

        case Escaped(previous=previous):
            return Transition(previous, 1, SpanKind.CODE)

        case InRawString(hashes=hashes):
            closer: str = '"' + "#" * hashes
            if source.startswith(closer, pos):
                return Transition(NORMAL, len(closer), SpanKind.CODE)
            return Transition(state, 1, SpanKind.CODE)

    raise TypeError(f"Unknown scan state: {state!r}")  # pragma: no cover


def scan(source: str, start: int = 0, *, raw_strings: bool = False) -> list[Span]:
    """Split ``source[start:]`` into an ordered list of spans.

    The spans are contiguous and non-overlapping: ``spans[i].end ==
    spans[i + 1].start``, the first span starts at ``start`` and the last one
    ends at ``len(source)``. The function is pure; identical input always yields
    identical spans.

    Args:
        source (str): The full source buffer.
        start (int): Offset where the scannable region begins (end of the header region).
        raw_strings (bool): Whether ``r"..."`` raw strings are recognized.

    Returns:
        list[Span]: The span sequence (empty if the scannable region is empty).

    Raises:
        UnterminatedBlockCommentError: If the input ends inside a block comment.
        UnterminatedStringLiteralError: If the input ends inside a string, char or
            raw string literal.
    """
    spans: list[Span] = []
    state: ScanState = NORMAL
    span_start: int = start
    span_kind: SpanKind = SpanKind.CODE
    construct_start: int = start
    pos: int = start
    end: int = len(source)

    while pos < end:
        t: Transition = transition(state, source, pos, raw_strings=raw_strings)
        if t.opens or t.kind is not span_kind:
            if pos > span_start:
                spans.append(Span(span_start, pos, span_kind))
            span_start, span_kind = pos, t.kind
        if isinstance(state, Normal) and not isinstance(t.state, Normal):
            construct_start = pos
        state = t.state
        pos += t.width

    if end > span_start:
        spans.append(Span(span_start, end, span_kind))

    logger.trace("scan: %d span(s), final state %s", len(spans), state)

    match state:
        case InBlockComment():
            line, column = LineIndex(source).position(construct_start)
            raise UnterminatedBlockCommentError(construct_start, line, column)
        case InString() | InChar() | Escaped() | InRawString():
            line, column = LineIndex(source).position(construct_start)
            delimiter: str = source[construct_start]
            if isinstance(state, InRawString):
                delimiter = '"'
            raise UnterminatedStringLiteralError(construct_start, line, column, delimiter)
        case _:
            return spans
