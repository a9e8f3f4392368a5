# topmark:header:start
#
#   project      : Akaer
#   file         : options.py
#   file_relpath : src/akaer/cli/options.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Global CLI options for Akaer.

The options mirror the configuration fields one to one. Only options the
user actually passed override the configuration file; options left at their
default are ignored (see `collect_config_overrides`).
"""

from __future__ import annotations

from typing import Any, Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from akaer.cli_shared.color import ColorMode
from akaer.config.logging import parse_log_level

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its subcommands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}

# Click parameter name -> configuration field name.
CONFIG_OVERRIDE_PARAMS: dict[str, str] = {
    "interface": "interface",
    "addresses": "addresses",
    "start_address": "start_address",
    "aliases": "aliases",
    "add_command": "add_command",
    "remove_command": "remove_command",
    "log_file": "log_file",
    "log_level": "log_level",
    "dry_run": "dry_run",
    "quiet": "quiet",
}


def validate_log_level(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str | None:
    """Reject log levels that are neither a known name nor a number."""
    if value is not None and parse_log_level(value) is None:
        raise click.BadParameter(
            f"{value!r} is not a log level; expected TRACE, DEBUG, INFO, WARN, ERROR, FATAL "
            "or a number.",
            ctx=ctx,
            param=param,
        )
    return value


def common_alias_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the options selecting the interface, the addresses and the commands."""
    f = click.option(
        "-i",
        "--interface",
        "interface",
        default=None,
        help="The interface to manage (default: lo0).",
    )(f)
    f = click.option(
        "-a",
        "--address",
        "addresses",
        multiple=True,
        help="An address to manage. Repeat for more; overrides --start-address/--aliases.",
    )(f)
    f = click.option(
        "-s",
        "--start-address",
        "start_address",
        default=None,
        help="The first address of the generated sequence (default: 10.0.0.1).",
    )(f)
    f = click.option(
        "-n",
        "--aliases",
        "aliases",
        type=int,
        default=None,
        help="The number of addresses to generate (default: 5).",
    )(f)
    f = click.option(
        "-A",
        "--add-command",
        "add_command",
        default=None,
        help="The command adding an alias; @INTERFACE@ and @ALIAS@ are replaced.",
    )(f)
    f = click.option(
        "-R",
        "--remove-command",
        "remove_command",
        default=None,
        help="The command removing an alias; @INTERFACE@ and @ALIAS@ are replaced.",
    )(f)
    f = click.option(
        "-d",
        "--dry-run",
        "dry_run",
        is_flag=True,
        default=False,
        help="Only show which commands would be executed.",
    )(f)
    return f


def common_logging_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --log-file, --log-level and --quiet."""
    f = click.option(
        "-l",
        "--log-file",
        "log_file",
        default=None,
        help="Where to log: STDOUT (default), STDERR or a file path.",
    )(f)
    f = click.option(
        "-L",
        "--log-level",
        "log_level",
        default=None,
        callback=validate_log_level,
        help="Minimum log level: TRACE, DEBUG, INFO (default), WARN, ERROR, FATAL or a number.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        "quiet",
        is_flag=True,
        default=False,
        help="Suppress progress, warning and error messages.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Configuration file to use instead of ~/.akaer.toml.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def collect_config_overrides(ctx: click.Context, params: dict[str, Any]) -> dict[str, Any]:
    """Return the configuration overrides the user passed on the command line.

    Options whose value comes from their default are left out, so they do not
    mask the configuration file.

    Args:
        ctx (click.Context): The current Click context.
        params (dict[str, Any]): The parsed parameters of the group.

    Returns:
        dict[str, Any]: Configuration field name to value.
    """
    overrides: dict[str, Any] = {}
    for param_name, field_name in CONFIG_OVERRIDE_PARAMS.items():
        source: ParameterSource | None = ctx.get_parameter_source(param_name)
        if source is None or source is ParameterSource.DEFAULT:
            continue
        value: Any = params.get(param_name)
        if param_name == "addresses":
            value = list(value or ())
        overrides[field_name] = value
    return overrides
