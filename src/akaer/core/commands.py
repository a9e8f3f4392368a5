# topmark:header:start
#
#   project      : Akaer
#   file         : commands.py
#   file_relpath : src/akaer/core/commands.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Shell command rendering and execution."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Callable

from akaer.config.logging import get_logger
from akaer.constants import ADDRESS_PLACEHOLDER, INTERFACE_PLACEHOLDER, NULL_OUTPUT_SUFFIX

if TYPE_CHECKING:
    from akaer.config.logging import AkaerLogger

logger: AkaerLogger = get_logger(__name__)

# Runs a shell command line and reports whether it succeeded.
CommandRunner = Callable[[str], bool]


def render_command(template: str, interface: str, address: str) -> str:
    """Render an alias command from its template.

    Every ``@INTERFACE@`` and ``@ALIAS@`` placeholder is replaced, and the
    command output is redirected to the null device. A template without
    placeholders is used as is.

    Args:
        template (str): The add or remove command template.
        interface (str): The network interface.
        address (str): The address to add or remove.

    Returns:
        str: The shell command line.
    """
    command: str = template.replace(INTERFACE_PLACEHOLDER, interface).replace(
        ADDRESS_PLACEHOLDER, address
    )
    return command + NULL_OUTPUT_SUFFIX


def execute_command(command: str) -> bool:
    """Run a shell command line and wait for it.

    Args:
        command (str): The command line, interpreted by the shell.

    Returns:
        bool: True if the command exited with status 0, False otherwise
            (including when the shell cannot be started or the command line
            contains a NUL byte).
    """
    logger.debug("Executing: %s", command)
    try:
        completed = subprocess.run(command, shell=True, check=False)
    except (OSError, ValueError) as e:
        logger.debug("Cannot execute %r: %s", command, e)
        return False

    logger.trace("Command %r exited with status %d", command, completed.returncode)
    return completed.returncode == 0
