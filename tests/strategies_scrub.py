# topmark:header:start
#
#   project      : CodeScrub
#   file         : strategies_scrub.py
#   file_relpath : tests/strategies_scrub.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating C-like source text.

Sources are assembled from well-formed fragments (code, literals, comments and
line breaks) so that every generated buffer scans without error. Fragment text
deliberately includes comment markers and quotes in places where they must not
be taken literally.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

# Plain code: no quotes, no slashes, no line breaks
_CODE_ALPHABET: str = "abcxyz_019 ;(){}[]=+-*<>,.#!&|\t"

# Literal bodies may hold comment markers but no line breaks
_LITERAL_ALPHABET: str = "abc /*#;"

# Comment bodies may hold quotes and slashes but no line breaks
_COMMENT_ALPHABET: str = "abc \"'/#;"


def s_code() -> st.SearchStrategy[str]:
    """Return a strategy for plain code fragments."""
    return st.text(alphabet=_CODE_ALPHABET, min_size=1, max_size=12)


def s_division() -> st.SearchStrategy[str]:
    """Return a strategy for a division operator surrounded by spaces."""
    return st.just(" / ")


@st.composite
def s_string_literal(draw: Draw) -> str:
    """Return a double-quoted string, possibly with escapes and comment markers."""
    parts: list[str] = draw(
        st.lists(
            st.one_of(
                st.text(alphabet=_LITERAL_ALPHABET, min_size=1, max_size=6),
                st.sampled_from(['\\"', "\\\\", "\\n", "//", "/*", "*/"]),
            ),
            max_size=4,
        )
    )
    return '"' + "".join(parts) + '"'


def s_char_literal() -> st.SearchStrategy[str]:
    """Return a character literal, including quote and slash characters."""
    return st.sampled_from(["'a'", "'/'", "'\"'", "'\\''", "'\\\\'", "'*'"])


@st.composite
def s_line_comment(draw: Draw) -> str:
    """Return a `//` comment (without its line break)."""
    body: str = draw(st.text(alphabet=_COMMENT_ALPHABET + "*", max_size=12))
    return "//" + body


@st.composite
def s_block_comment(draw: Draw) -> str:
    """Return a `/* */` comment, possibly spanning several lines."""
    chunks: list[str] = draw(
        st.lists(st.text(alphabet=_COMMENT_ALPHABET, max_size=8), min_size=1, max_size=3)
    )
    le: str = draw(st.sampled_from(LINE_ENDINGS))
    return "/*" + le.join(chunks) + "*/"


def s_fragment() -> st.SearchStrategy[str]:
    """Return a strategy for one source fragment."""
    return st.one_of(
        s_code(),
        s_division(),
        s_string_literal(),
        s_char_literal(),
        s_block_comment(),
        st.sampled_from(LINE_ENDINGS),
    )


@st.composite
def s_source(draw: Draw) -> str:
    """Return a well-formed source buffer.

    Line comments are always followed by a line ending so they cannot swallow
    the next fragment.
    """
    pieces: list[str] = []
    for _ in range(draw(st.integers(min_value=0, max_value=20))):
        if draw(st.integers(min_value=0, max_value=5)) == 0:
            pieces.append(draw(s_line_comment()))
            pieces.append(draw(st.sampled_from(LINE_ENDINGS)))
        else:
            pieces.append(draw(s_fragment()))
    # Space-joined, so no fragment boundary forms `//` or `/*`
    return " ".join(pieces)


@st.composite
def s_source_with_header(draw: Draw) -> tuple[str, int]:
    """Return a source buffer and a valid header line count for it."""
    header_lines: list[str] = draw(
        st.lists(
            st.one_of(s_line_comment(), st.just("/* banner */"), s_code()),
            min_size=1,
            max_size=4,
        )
    )
    le: str = draw(st.sampled_from(LINE_ENDINGS))
    head: str = le.join(header_lines) + le
    body: str = draw(s_source())
    n: int = draw(st.integers(min_value=0, max_value=len(header_lines)))
    return head + body, n
