# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/codescrub/cli/exit_codes.py
#   project      : CodeScrub
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CodeScrub CLI.

CodeScrub aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CodeScrub CLI.

    Attributes:
        SUCCESS: Successful execution (including dry runs that would change files).
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid invocation, including an invalid header line count.
            Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed input: unterminated comment/literal or undecodable text.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration value. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
