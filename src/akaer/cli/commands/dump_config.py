# topmark:header:start
#
#   project      : Akaer
#   file         : dump_config.py
#   file_relpath : src/akaer/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer `dump-config` command.

Emits the effective configuration as TOML after applying defaults, the
configuration file and any CLI overrides. The output is wrapped between
``# === BEGIN ===`` and ``# === END ===`` markers for easy parsing in tests or
tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from akaer.cli.cmd_common import get_config
from akaer.config.io import to_toml
from akaer.config.logging import get_logger

if TYPE_CHECKING:
    from akaer.cli_shared.console_api import ConsoleLike
    from akaer.config import Config
    from akaer.config.logging import AkaerLogger

logger: AkaerLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the effective Akaer configuration as TOML.",
)
@click.pass_context
def dump_config_command(ctx: click.Context) -> None:
    """Print the merged configuration as TOML between BEGIN/END markers."""
    config: Config = get_config(ctx)
    console: ConsoleLike = ctx.obj["console"]

    logger.trace("Config after merging CLI and configuration file: %s", config)

    sources: str = ", ".join(str(s) for s in config.config_files) or "defaults"
    console.print(console.styled(f"# Merged Akaer config (TOML) from: {sources}", bold=True))
    console.print()
    console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))
    console.print(console.styled(to_toml(config.to_toml_dict()).rstrip("\n"), fg="cyan"))
    console.print(console.styled("# === END ===", fg="cyan", dim=True))
