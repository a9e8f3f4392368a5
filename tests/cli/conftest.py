# topmark:header:start
#
#   project      : Akaer
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""CLI test helpers for running Akaer through Click's `CliRunner`.

Logging is configured by the CLI itself (``--log-file`` defaults to STDOUT),
so alias progress and failures show up in ``result.output``. Pass
``--no-color`` to get plain text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from akaer.cli.main import cli
from akaer.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from akaer.core import CommandRunner


def run_cli(argv: str | Sequence[str] | None, *, runner: CommandRunner | None = None) -> Result:
    """Invoke the CLI.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--dry-run", "add"]``.
        runner (CommandRunner | None): Replaces the shell command runner, so no
            real ``ifconfig``/``launchctl`` is ever executed.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    obj: dict[str, object] = {}
    if runner is not None:
        obj["runner"] = runner  # inject test override into Click's context object
    # The CLI replaces the root handlers; put back the ones pytest relies on
    root: logging.Logger = logging.getLogger()
    handlers: list[logging.Handler] = root.handlers[:]
    level: int = root.level
    try:
        return CliRunner().invoke(cli, argv, obj=obj)
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            if handler not in handlers:
                handler.close()
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
