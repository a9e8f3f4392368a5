# topmark:header:start
#
#   project      : Akaer
#   file         : install.py
#   file_relpath : src/akaer/cli/commands/install.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer `install` command.

Registers a launchd agent that re-runs the current invocation, minus the
``install`` verb, at every login. The agent therefore keeps the options given
here: ``akaer -i en0 -n 3 install`` re-adds three aliases on ``en0``.
"""

from __future__ import annotations

import click

from akaer.cli.cmd_common import run_action
from akaer.core import Application


@click.command(
    name="install",
    help="Install akaer as a launch agent adding the aliases at login (macOS only).",
)
@click.pass_context
def install_command(ctx: click.Context) -> None:
    """Create and load the launch agent.

    Exits with FAILURE (1) on other platforms or when the agent cannot be
    created or loaded.
    """
    run_action(ctx, Application.action_install)
