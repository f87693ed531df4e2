# topmark:header:start
#
#   project      : CodeScrub
#   file         : console.py
#   file_relpath : src/codescrub/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

``ClickConsole`` separates CLI output from internal logging. Scrubbed content
and dry-run reports go to stdout; verbose summaries, prompts and errors go to
stderr so they never mix with scrubbed content.
"""

from __future__ import annotations

from typing import Any, TextIO

import click

from codescrub.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to Click's stdout.
        err (TextIO | None): Stream for error output. Defaults to Click's stderr.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def info(self, text: str, *, nl: bool = True) -> None:
        """Write an informational message to stderr."""
        click.echo(text, nl=nl, file=self.err, err=True, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by click.style.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
