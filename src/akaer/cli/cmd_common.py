# topmark:header:start
#
#   project      : Akaer
#   file         : cmd_common.py
#   file_relpath : src/akaer/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Helpers shared by the Akaer subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import click

from akaer.cli_shared.exit_codes import ExitCode
from akaer.config.logging import get_logger
from akaer.core import Application, execute_command

if TYPE_CHECKING:
    from akaer.config import Config
    from akaer.config.logging import AkaerLogger
    from akaer.core import CommandRunner

logger: AkaerLogger = get_logger(__name__)


def get_config(ctx: click.Context) -> Config:
    """Return the runtime configuration built by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["config"]


def build_application(ctx: click.Context) -> Application:
    """Create the application for this invocation.

    A ``runner`` stored in ``ctx.obj`` replaces the shell command runner.
    """
    ctx.ensure_object(dict)
    runner: CommandRunner = ctx.obj.get("runner") or execute_command
    return Application(get_config(ctx), runner=runner)


def run_action(ctx: click.Context, action: Callable[[Application], bool]) -> None:
    """Run an application action and exit with its status.

    Args:
        ctx (click.Context): The current Click context.
        action (Callable[[Application], bool]): The action to run.
    """
    app: Application = build_application(ctx)
    succeeded: bool = action(app)
    logger.debug("Action %s returned %s", getattr(action, "__name__", action), succeeded)
    ctx.exit(ExitCode.from_result(succeeded))
