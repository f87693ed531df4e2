# topmark:header:start
#
#   project      : CodeScrub
#   file         : main.py
#   file_relpath : src/codescrub/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``codescrub`` command.

Reads one input file, removes ``//`` and ``/* */`` comments, and writes the
result to ``--output`` or stdout. With ``--dry-run`` nothing is written and a
line-by-line change report is printed instead.

Exit Status:
  SUCCESS (0): Output written, or dry-run report printed.
  USAGE_ERROR (64): Invalid header line count.
  DATA_ERROR (65): Unterminated block comment or literal; undecodable input.
  FILE_NOT_FOUND (66): The input file does not exist.
  IO_ERROR (74): Reading or writing failed.
  CONFIG_ERROR (78): Invalid configuration value.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from codescrub.api import ScrubOutcome, scrub_file
from codescrub.cli.config_resolver import resolve_config
from codescrub.cli.console import ClickConsole
from codescrub.cli.errors import to_cli_error
from codescrub.cli.utils import confirm_detected_header, render_verbose_summary
from codescrub.config.keys import Toml
from codescrub.config.logging import get_logger, resolve_env_log_level, setup_logging
from codescrub.config.model import ConfigError
from codescrub.constants import CODESCRUB_VERSION
from codescrub.io import read_source
from codescrub.scrub.errors import ScrubError
from codescrub.scrub.report import render_report

if TYPE_CHECKING:
    from codescrub.cli.console_api import ConsoleLike
    from codescrub.config.logging import ScrubLogger
    from codescrub.config.model import Config

logger: ScrubLogger = get_logger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def init_common_state(ctx: click.Context, *, no_color: bool) -> ConsoleLike:
    """Initialize logging and the program-output console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` will hold the console.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        ConsoleLike: The console stored in ``ctx.obj["console"]``.
    """
    ctx.ensure_object(dict)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    console = ClickConsole(enable_color=not no_color)
    ctx.obj["console"] = console
    ctx.color = not no_color
    return console


@click.command(
    name="codescrub",
    context_settings=CONTEXT_SETTINGS,
    help="Remove // and /* */ comments from INPUT, keeping string literals and header lines.",
    epilog="""\
Examples:

  # Scrub to stdout
  codescrub src/lib.rs

  # Keep a 6-line license header, write to a file
  codescrub -H 6 -o lib.clean.rs src/lib.rs

  # Preview what would change
  codescrub --dry-run src/lib.rs
""",
)
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write scrubbed text to this file instead of stdout.",
)
@click.option(
    "-H",
    "--header-lines",
    type=int,
    default=None,
    help="Number of leading lines copied verbatim (default: 0).",
)
@click.option("-v", "--verbose", is_flag=True, help="Print a summary of removed comments to stderr.")
@click.option(
    "-d",
    "--dry-run",
    is_flag=True,
    help="Write nothing; print a line-by-line change report instead.",
)
@click.option(
    "--detect-header/--no-detect-header",
    default=None,
    help="Propose a header from the leading comment block (when no header count is set).",
)
@click.option(
    "-y", "--yes", "assume_yes", is_flag=True, help="Accept a detected header without asking."
)
@click.option(
    "--raw-strings/--no-raw-strings",
    default=None,
    help='Recognize Rust raw strings (r"...", r#"..."#).',
)
@click.option(
    "--keep-block-newlines/--join-block-lines",
    default=None,
    help="Keep the newlines of removed multi-line block comments (default: keep).",
)
@click.option("--encoding", default=None, help="Text encoding of input and output (default: utf-8).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help="Read settings from this TOML file.",
)
@click.option("--no-config", is_flag=True, help="Do not discover codescrub.toml / pyproject.toml.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.version_option(CODESCRUB_VERSION, "--version", prog_name="codescrub")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    input_path: Path,
    output: Path | None,
    header_lines: int | None,
    verbose: bool,
    dry_run: bool,
    detect_header: bool | None,
    assume_yes: bool,
    raw_strings: bool | None,
    keep_block_newlines: bool | None,
    encoding: str | None,
    config_path: Path | None,
    no_config: bool,
    no_color: bool,
) -> None:
    """Entry point for the CodeScrub CLI.

    Raises:
        CodescrubError: Any domain failure, carrying its exit code.
    """
    console: ConsoleLike = init_common_state(ctx, no_color=no_color)

    try:
        config: Config = resolve_config(
            input_path=input_path,
            config_path=config_path,
            no_config=no_config,
            header_lines=header_lines,
            detect_header=detect_header,
            raw_strings=raw_strings,
            keep_block_newlines=keep_block_newlines,
            encoding=encoding,
        )
    except ConfigError as e:
        raise to_cli_error(e) from e

    logger.debug("Scrubbing %s (output=%s, dry_run=%s)", input_path, output, dry_run)
    if verbose and config.config_files:
        console.info(f"Config: {', '.join(str(p) for p in config.config_files)}")

    try:
        source: str = read_source(input_path, config.encoding)

        effective_header_lines: int = config.header_lines
        if config.detect_header and Toml.KEY_HEADER_LINES not in config.explicit:
            effective_header_lines = confirm_detected_header(
                console, source, assume_yes=assume_yes
            )

        outcome: ScrubOutcome = scrub_file(
            input_path,
            config,
            output=output,
            dry_run=dry_run,
            header_lines=effective_header_lines,
            source=source,
        )
    except ScrubError as e:
        raise to_cli_error(e, input_path) from e

    if verbose:
        console.info(render_verbose_summary(outcome.result))

    if outcome.report is not None:
        console.print(render_report(outcome.report, color=not no_color), nl=False)
        if verbose:
            console.info("Dry run complete. No output written.")
    elif output is not None and verbose:
        console.info(f"Output written to {output}")


if __name__ == "__main__":
    cli()
