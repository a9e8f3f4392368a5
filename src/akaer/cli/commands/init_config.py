# topmark:header:start
#
#   project      : Akaer
#   file         : init_config.py
#   file_relpath : src/akaer/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer `init-config` command.

Prints the annotated default configuration, as a starting point for
``~/.akaer.toml``::

    akaer init-config > ~/.akaer.toml
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from akaer.config.io import load_default_config_template_toml_text

if TYPE_CHECKING:
    from akaer.cli_shared.console_api import ConsoleLike


@click.command(
    name="init-config",
    help="Display an initial Akaer configuration file.",
)
def init_config_command() -> None:
    """Print a starter config file to stdout."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(load_default_config_template_toml_text().rstrip("\n"))
