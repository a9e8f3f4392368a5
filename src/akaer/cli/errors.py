# topmark:header:start
#
#   project      : Akaer
#   file         : errors.py
#   file_relpath : src/akaer/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Exceptions for the Akaer CLI.

Raise these from the group callback or commands to abort with a message and
a standardized exit code. Alias and launch agent failures are not exceptions:
they are logged by the core and mapped to `ExitCode.FAILURE`.
"""

from __future__ import annotations

from typing import IO, Any

import click

from akaer.cli_shared.exit_codes import ExitCode


class AkaerError(click.ClickException):
    """Base class for all Akaer CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class AkaerUsageError(AkaerError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AkaerConfigError(AkaerError):
    """Error for configuration errors (unreadable/malformed file, unusable log file)."""

    exit_code = ExitCode.CONFIG_ERROR
