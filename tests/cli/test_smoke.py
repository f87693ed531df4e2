# topmark:header:start
#
#   project      : CodeScrub
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for CodeScrub.

Provides minimal coverage that the CLI entry point is callable and that
`--help` and `--version` succeed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codescrub.constants import CODESCRUB_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_cli_entry() -> None:
    """It should show usage information and exit code SUCCESS when `--help` is passed."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)

    assert "Usage" in result.output
    assert "--header-lines" in result.output


def test_short_help_flag() -> None:
    """`-h` is an alias for `--help`."""
    assert_SUCCESS(run_cli(["-h"]))


def test_version() -> None:
    """It should show version information and exit code SUCCESS."""
    result: Result = run_cli(["--version"])

    assert_SUCCESS(result)

    assert CODESCRUB_VERSION in result.output


def test_missing_argument_is_usage_error() -> None:
    """Omitting INPUT is a Click usage error."""
    result: Result = run_cli([])
    assert result.exit_code == 2
    assert "INPUT" in result.output
