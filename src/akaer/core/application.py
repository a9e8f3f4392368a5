# topmark:header:start
#
#   project      : Akaer
#   file         : application.py
#   file_relpath : src/akaer/core/application.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer application context.

`Application` binds a frozen `Config` to the alias and launch agent managers
and exposes the public operations. It is constructed explicitly by its caller
(the CLI, or a test with a fake command runner); there is no shared instance.

Every operation returns a boolean and reports failures through logging.

Examples:
    ```python
    from akaer.config import MutableConfig
    from akaer.core import Application

    config = MutableConfig.from_defaults().apply_cli_args({"dry_run": True}).freeze()
    Application(config).action_add()
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from akaer.config.logging import get_logger
from akaer.core.addresses import AddressType, resolve_addresses
from akaer.core.agent import LaunchAgentManager
from akaer.core.aliases import EMPTY_BATCH_MESSAGES, AliasManager, AliasOperation
from akaer.core.commands import execute_command

if TYPE_CHECKING:
    from collections.abc import Sequence

    from akaer.config import Config
    from akaer.config.logging import AkaerLogger
    from akaer.core.commands import CommandRunner

logger: AkaerLogger = get_logger(__name__)


class Application:
    """Public operations of Akaer over one configuration.

    Args:
        config (Config): The runtime configuration.
        runner (CommandRunner): Runs rendered shell commands.
        argv (Sequence[str] | None): Invocation recorded by the launch agent;
            defaults to ``sys.argv``.
        platform (str | None): Platform name; defaults to ``sys.platform``.
    """

    def __init__(
        self,
        config: Config,
        *,
        runner: CommandRunner = execute_command,
        argv: Sequence[str] | None = None,
        platform: str | None = None,
    ) -> None:
        self.config: Config = config
        self.aliases: AliasManager = AliasManager(config, runner=runner)
        self.agent: LaunchAgentManager = LaunchAgentManager(
            config, runner=runner, argv=argv, platform=platform
        )

    def resolve(self, address_type: AddressType = AddressType.ALL) -> list[str]:
        """Return the addresses the configuration describes."""
        return resolve_addresses(self.config, address_type)

    def manage(
        self,
        operation: AliasOperation | str,
        address: str,
        addresses: Sequence[str] | None = None,
    ) -> bool:
        """Add or remove a single alias.

        When ``addresses`` is None the batch is resolved here, only for the
        progress prefix.
        """
        if addresses is None:
            addresses = self.resolve(AddressType.ALL)
        return self.aliases.manage(operation, address, addresses)

    def action_add(self) -> bool:
        """Add every resolved alias, stopping at the first failure."""
        logger.debug("Adding aliases on %s", self.config.interface)
        return self.aliases.run_batch(
            AliasOperation.ADD, EMPTY_BATCH_MESSAGES[AliasOperation.ADD]
        )

    def action_remove(self) -> bool:
        """Remove every resolved alias, stopping at the first failure."""
        logger.debug("Removing aliases from %s", self.config.interface)
        return self.aliases.run_batch(
            AliasOperation.REMOVE, EMPTY_BATCH_MESSAGES[AliasOperation.REMOVE]
        )

    def action_install(self) -> bool:
        """Install the launch agent."""
        return self.agent.install()

    def action_uninstall(self) -> bool:
        """Uninstall the launch agent."""
        return self.agent.uninstall()
