# topmark:header:start
#
#   project      : Akaer
#   file         : uninstall.py
#   file_relpath : src/akaer/cli/commands/uninstall.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer `uninstall` command."""

from __future__ import annotations

import click

from akaer.cli.cmd_common import run_action
from akaer.core import Application


@click.command(
    name="uninstall",
    help="Uninstall the akaer launch agent (macOS only).",
)
@click.pass_context
def uninstall_command(ctx: click.Context) -> None:
    """Unload and delete the launch agent."""
    run_action(ctx, Application.action_uninstall)
