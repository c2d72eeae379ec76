# topmark:header:start
#
#   project      : Hydrant
#   file         : exit_codes.py
#   file_relpath : src/hydrant/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the Hydrant CLI application."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for Hydrant CLI.

    Hydrant follows the BSD `sysexits` convention where practical so other
    tooling can interpret failures consistently.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input could not be decoded or parsed (bad JSON/TOML, bad
            encoding). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort). Mirrors BSD
            ``EX_SOFTWARE (70)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNEXPECTED_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
