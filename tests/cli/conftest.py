# topmark:header:start
#
#   project      : DailyTip
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running the DailyTip commands in a controlled working directory.

`run_cli_in()` changes the working directory to the given ``tmp_path`` before
invoking the command, so config discovery (``dailytip.toml``,
``pyproject.toml``) only sees files the test created.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TYPE_CHECKING, Sequence

import click
import pytest
from click.testing import CliRunner, Result

from dailytip.cli.exit_codes import ExitCode
from dailytip.cli.main import cli
from dailytip.config import logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall the suite's TRACE logging after a CLI run replaced it."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    command: click.Command = cli,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke a DailyTip command with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        command (click.Command): The command to run (``dailytip`` by default).
        env (dict[str, str | None] | None): Extra environment for the run.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(command, argv, env=env)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    command: click.Command = cli,
) -> Result:
    """Invoke a DailyTip command without changing the working directory.

    Use for invocations that do not depend on config discovery, such as
    ``--version``.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.
        command (click.Command): The command to run (``dailytip`` by default).

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    return CliRunner().invoke(command, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output
