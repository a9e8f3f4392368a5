# topmark:header:start
#
#   project      : Akaer
#   file         : remove.py
#   file_relpath : src/akaer/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer `remove` command."""

from __future__ import annotations

import click

from akaer.cli.cmd_common import run_action
from akaer.core import Application


@click.command(
    name="remove",
    help="Remove the aliases from the interface.",
)
@click.pass_context
def remove_command(ctx: click.Context) -> None:
    """Remove every configured alias, stopping at the first failure.

    Exits with SUCCESS (0) or FAILURE (1).
    """
    run_action(ctx, Application.action_remove)
