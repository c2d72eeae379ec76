# topmark:header:start
#
#   project      : Hydrant
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Hydrant through Click's test runner.

`run_cli()` invokes the root `cli` group. The group reconfigures logging to write to
the runner's captured stderr; the helper restores the suite-wide TRACE setup
afterwards so later tests do not log into a closed stream.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from hydrant.cli.exit_codes import ExitCode
from hydrant.cli.main import cli
from hydrant.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with colors disabled.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["serialize", "-"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["serialize"], input_text='{"a": 1}')
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    args: list[str] = [argv] if isinstance(argv, str) else list(argv or [])
    try:
        return runner.invoke(cli, ["--no-color", *args], input=input_text)
    finally:
        setup_logging(level=TRACE_LEVEL)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): The expected exit code.
    """
    assert result.exit_code == code, result.output
