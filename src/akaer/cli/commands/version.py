# topmark:header:start
#
#   project      : Akaer
#   file         : version.py
#   file_relpath : src/akaer/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer `version` command.

Prints the current Akaer version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from akaer.constants import AKAER_VERSION

if TYPE_CHECKING:
    from akaer.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Akaer.",
)
def version_command() -> None:
    """Show the current version of Akaer."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(console.styled(AKAER_VERSION, bold=True))
