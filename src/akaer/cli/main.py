# topmark:header:start
#
#   project      : Akaer
#   file         : main.py
#   file_relpath : src/akaer/cli/main.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer CLI entry point.

Key ideas:
- Global options are parsed once by the group and turned into a frozen
  `Config` (defaults, then the configuration file, then the options the user
  passed), stored in ``ctx.obj`` together with the console.
- Logging is configured from that `Config` before any subcommand runs.
- Without a subcommand the aliases are added, which is what the launch agent
  runs at login.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from akaer.cli.commands.add import add_command
from akaer.cli.commands.dump_config import dump_config_command
from akaer.cli.commands.init_config import init_config_command
from akaer.cli.commands.install import install_command
from akaer.cli.commands.remove import remove_command
from akaer.cli.commands.uninstall import uninstall_command
from akaer.cli.commands.version import version_command
from akaer.cli.console import ClickConsole
from akaer.cli.errors import AkaerConfigError, AkaerUsageError
from akaer.cli.options import (
    CONTEXT_SETTINGS,
    collect_config_overrides,
    common_alias_options,
    common_color_options,
    common_config_options,
    common_logging_options,
)
from akaer.cli_shared.color import ColorMode, resolve_color_mode
from akaer.config import ConfigLoadError, MutableConfig
from akaer.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from akaer.config import Config
    from akaer.config.logging import AkaerLogger

logger: AkaerLogger = get_logger(__name__)


def build_config(ctx: click.Context, *, config_path: str | None) -> Config:
    """Build the runtime configuration from defaults, file and CLI overrides.

    Args:
        ctx (click.Context): The group context, used to tell passed options from defaults.
        config_path (str | None): Explicit configuration file from ``--config``.

    Returns:
        Config: The frozen runtime configuration.

    Raises:
        AkaerConfigError: If the configuration file cannot be loaded.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            Path(config_path) if config_path else None
        )
    except ConfigLoadError as e:
        raise AkaerConfigError(str(e)) from e

    draft.apply_cli_args(collect_config_overrides(ctx, ctx.params))
    return draft.freeze()


def init_common_state(
    ctx: click.Context,
    *,
    config: Config,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize logging, color and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        config (Config): The runtime configuration.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Raises:
        AkaerUsageError: If ``--no-color`` is combined with ``--color=always``.
        AkaerConfigError: If the log file cannot be opened.
    """
    ctx.obj = ctx.obj or {}

    if no_color and color_mode == ColorMode.ALWAYS:
        raise AkaerUsageError(
            "The '--no-color' and '--color=always' options are mutually exclusive."
        )

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    # AKAER_LOG_LEVEL wins over the configuration
    level: int = resolve_env_log_level() or config.log_level
    try:
        setup_logging(level, config.log_file, enable_color=enable_color)
    except OSError as e:
        raise AkaerConfigError(f"Cannot open the log file {config.log_file}: {e}") from e

    ctx.obj["config"] = config
    logger.debug("Effective configuration: %s", config)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Manage IP aliases on a network interface. Without a command, the aliases are added.",
)
@common_alias_options
@common_logging_options
@common_config_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    color_mode: str | None,
    no_color: bool,
    **_overrides: Any,
) -> None:
    """Entry point for the Akaer CLI."""
    config: Config = build_config(ctx, config_path=config_path)
    init_common_state(
        ctx,
        config=config,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(add_command)


cli.add_command(add_command)

cli.add_command(remove_command)

cli.add_command(install_command)

cli.add_command(uninstall_command)

cli.add_command(dump_config_command)

cli.add_command(init_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
