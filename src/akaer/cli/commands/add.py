# topmark:header:start
#
#   project      : Akaer
#   file         : add.py
#   file_relpath : src/akaer/cli/commands/add.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer `add` command."""

from __future__ import annotations

import click

from akaer.cli.cmd_common import run_action
from akaer.core import Application


@click.command(
    name="add",
    help="Add the aliases to the interface.",
)
@click.pass_context
def add_command(ctx: click.Context) -> None:
    """Add every configured alias, stopping at the first failure.

    Exits with SUCCESS (0) or FAILURE (1).
    """
    run_action(ctx, Application.action_add)
