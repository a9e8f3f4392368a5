# topmark:header:start
#
#   project      : Akaer
#   file         : aliases.py
#   file_relpath : src/akaer/core/aliases.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Adding and removing interface aliases.

`AliasManager.manage` applies one operation to one address: it renders the
configured command, logs what it is doing with a ``[position/total]`` progress
prefix and runs the command (or only logs it in dry-run mode).

`AliasManager.run_batch` resolves the addresses once and applies the
operation to each of them in order, stopping at the first failure. Addresses
after a failed one are never touched.

Neither operation raises: failures are reported through the logger and the
boolean result. Informational and error messages are suppressed in quiet mode.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from akaer.config.logging import get_logger
from akaer.core.addresses import AddressType, resolve_addresses
from akaer.core.commands import execute_command, render_command

if TYPE_CHECKING:
    from collections.abc import Sequence

    from akaer.config import Config
    from akaer.config.logging import AkaerLogger
    from akaer.core.commands import CommandRunner

logger: AkaerLogger = get_logger(__name__)


class AliasOperation(str, Enum):
    """The two alias operations.

    Attributes:
        ADD: Add the address to the interface.
        REMOVE: Remove the address from the interface.
    """

    ADD = "add"
    REMOVE = "remove"

    @property
    def preposition(self) -> str:
        """Return "to" or "from", as in "add address A to interface I"."""
        return "to" if self is AliasOperation.ADD else "from"

    @property
    def progressive(self) -> str:
        """Return "Adding" or "Removing"."""
        return "Adding" if self is AliasOperation.ADD else "Removing"


EMPTY_BATCH_MESSAGES: Final[dict[AliasOperation, str]] = {
    AliasOperation.ADD: "No valid addresses to add to the interface found.",
    AliasOperation.REMOVE: "No valid addresses to remove from the interface found.",
}


def _to_int(value: object) -> int:
    """Coerce ``value`` to an int, with 0 for anything that is not a number."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def pad_number(num: object, length: object = None) -> str:
    """Zero-pad a number to at least ``length`` digits, and never fewer than 2.

    Values that are not numbers count as 0, so ``pad_number(None) == "00"``.

    Args:
        num (object): The number to pad.
        length (object): The minimum width; invalid or lower than 2 means 2.

    Returns:
        str: The padded number.
    """
    return str(_to_int(num)).rjust(max(_to_int(length), 2), "0")


def progress_prefix(address: str, addresses: Sequence[str]) -> str:
    """Return the ``[position/total]`` prefix for ``address``.

    The position is 1-based; an address missing from ``addresses`` is shown
    at position 1.
    """
    total: int = len(addresses)
    try:
        position: int = addresses.index(address) + 1
    except ValueError:
        position = 1

    width: int = len(str(total))
    return f"[{pad_number(position, width)}/{pad_number(total, width)}]"


class AliasManager:
    """Apply alias operations as described by a configuration.

    Args:
        config (Config): The runtime configuration.
        runner (CommandRunner): Runs a rendered command and reports success.
    """

    config: Config
    runner: CommandRunner

    def __init__(self, config: Config, *, runner: CommandRunner = execute_command) -> None:
        self.config = config
        self.runner = runner

    def command_for(self, operation: AliasOperation, address: str) -> str:
        """Return the shell command performing ``operation`` on ``address``."""
        template: str = (
            self.config.add_command
            if operation is AliasOperation.ADD
            else self.config.remove_command
        )
        return render_command(template, self.config.interface, address)

    def manage(
        self,
        operation: AliasOperation | str,
        address: str,
        addresses: Sequence[str],
    ) -> bool:
        """Add or remove one alias.

        Args:
            operation (AliasOperation | str): ``add`` or ``remove``.
            address (str): The address to add or remove.
            addresses (Sequence[str]): The resolved batch, used for the progress prefix.

        Returns:
            bool: True if the command succeeded (always True in dry-run mode).
        """
        operation = AliasOperation(operation)
        config: Config = self.config
        command: str = self.command_for(operation, address)
        prefix: str = progress_prefix(address, addresses)

        if config.dry_run:
            if not config.quiet:
                logger.info(
                    "%s I will %s address %s %s interface %s.",
                    prefix,
                    operation.value,
                    address,
                    operation.preposition,
                    config.interface,
                )
            return True

        if not config.quiet:
            logger.info(
                "%s %s address %s %s interface %s.",
                prefix,
                operation.progressive,
                address,
                operation.preposition,
                config.interface,
            )

        succeeded: bool = self.runner(command)
        if not succeeded and not config.quiet:
            logger.error(
                "Cannot %s address %s %s interface %s.",
                operation.value,
                address,
                operation.preposition,
                config.interface,
            )
        return succeeded

    def run_batch(self, operation: AliasOperation | str, empty_message: str | None = None) -> bool:
        """Apply ``operation`` to every resolved address, stopping at the first failure.

        Args:
            operation (AliasOperation | str): ``add`` or ``remove``.
            empty_message (str | None): Error logged when there is no address to
                manage; defaults to the operation's standard message.

        Returns:
            bool: True if every operation succeeded, False on the first failure
                or when there is nothing to do.
        """
        operation = AliasOperation(operation)
        addresses: list[str] = resolve_addresses(self.config, AddressType.ALL)

        if not addresses:
            if not self.config.quiet:
                logger.error(empty_message or EMPTY_BATCH_MESSAGES[operation])
            return False

        for address in addresses:
            if not self.manage(operation, address, addresses):
                return False
        return True
