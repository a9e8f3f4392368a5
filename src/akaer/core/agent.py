# topmark:header:start
#
#   project      : Akaer
#   file         : agent.py
#   file_relpath : src/akaer/core/agent.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""launchd agent installation (macOS only).

Installing writes a property list describing the current invocation to
``~/Library/LaunchAgents/<label>.plist``, converts it to the binary format and
loads it with ``launchctl``, so the aliases are re-applied at every login.
Uninstalling unloads the agent and deletes the descriptor.

On any other platform both operations log a fatal message and return False.
That message is shown even in quiet mode; all other messages are not.
"""

from __future__ import annotations

import os
import plistlib
import shlex
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from akaer.config.logging import get_logger
from akaer.constants import (
    LAUNCH_AGENT_LABEL,
    LAUNCH_AGENT_PLATFORM,
    LAUNCH_AGENTS_DIR,
    NULL_OUTPUT_SUFFIX,
)
from akaer.core.commands import execute_command

if TYPE_CHECKING:
    from collections.abc import Sequence

    from akaer.config import Config
    from akaer.config.logging import AkaerLogger
    from akaer.core.commands import CommandRunner

logger: AkaerLogger = get_logger(__name__)

UNSUPPORTED_PLATFORM_MESSAGE: str = "Install akaer on autolaunch is only available on MacOSX."


def launch_agent_path(name: str = LAUNCH_AGENT_LABEL) -> Path:
    """Return the path of the launch agent descriptor called ``name``."""
    return Path.home() / LAUNCH_AGENTS_DIR / f"{name}.plist"


def is_supported_platform(platform: str | None = None) -> bool:
    """Return True if launch agents can be managed on ``platform`` (default: this one)."""
    return (platform if platform is not None else sys.platform) == LAUNCH_AGENT_PLATFORM


@dataclass(frozen=True)
class LaunchAgent:
    """A launchd agent descriptor.

    Attributes:
        label (str): The launchd job label.
        program (str): Absolute path of the executable to run.
        program_arguments (tuple[str, ...]): Arguments passed to the program.
        run_at_load (bool): Start the job as soon as it is loaded.
        keep_alive (bool): Restart the job when it exits.
    """

    label: str
    program: str
    program_arguments: tuple[str, ...] = field(default_factory=tuple)
    run_at_load: bool = True
    keep_alive: bool = False

    @classmethod
    def for_invocation(cls, argv: Sequence[str], label: str = LAUNCH_AGENT_LABEL) -> LaunchAgent:
        """Describe a re-run of ``argv`` without its trailing action verb.

        ``akaer -i lo0 install`` yields an agent running ``akaer -i lo0``, whose
        default action is adding the aliases. Under ``python -m akaer`` the
        interpreter is recorded instead, with ``-m akaer`` leading the arguments.
        """
        arguments: tuple[str, ...] = tuple(argv[1:-1])
        if not argv or os.path.basename(argv[0]) == "__main__.py":
            return cls(
                label=label,
                program=sys.executable,
                program_arguments=("-m", "akaer", *arguments),
            )
        return cls(label=label, program=os.path.abspath(argv[0]), program_arguments=arguments)

    def to_plist(self) -> dict[str, Any]:
        """Return the launchd property list of this agent."""
        return {
            "KeepAlive": self.keep_alive,
            "Label": self.label,
            "Program": self.program,
            "ProgramArguments": list(self.program_arguments),
            "RunAtLoad": self.run_at_load,
        }


class LaunchAgentManager:
    """Install and uninstall the Akaer launch agent.

    Args:
        config (Config): The runtime configuration (for ``quiet``).
        runner (CommandRunner): Runs ``plutil`` and ``launchctl``.
        argv (Sequence[str] | None): The invocation to re-run; defaults to ``sys.argv``.
        platform (str | None): The platform name; defaults to ``sys.platform``.
        path (Path | None): The descriptor path; defaults to `launch_agent_path`.
    """

    def __init__(
        self,
        config: Config,
        *,
        runner: CommandRunner = execute_command,
        argv: Sequence[str] | None = None,
        platform: str | None = None,
        path: Path | None = None,
    ) -> None:
        self.config = config
        self.runner = runner
        self.argv: list[str] = list(argv if argv is not None else sys.argv)
        self.platform: str = platform if platform is not None else sys.platform
        self.path: Path = path if path is not None else launch_agent_path()

    # ------------------------------ Logging -------------------------------
    def _info(self, msg: str, *args: object) -> None:
        if not self.config.quiet:
            logger.info(msg, *args)

    def _warning(self, msg: str, *args: object) -> None:
        if not self.config.quiet:
            logger.warning(msg, *args)

    def _error(self, msg: str, *args: object) -> None:
        if not self.config.quiet:
            logger.error(msg, *args)

    def _check_platform(self) -> bool:
        if is_supported_platform(self.platform):
            return True
        logger.critical(UNSUPPORTED_PLATFORM_MESSAGE)
        return False

    # ------------------------------ Install -------------------------------
    def write_descriptor(self) -> None:
        """Write the XML property list of the current invocation.

        Raises:
            OSError: If the descriptor cannot be written.
            ValueError: If an argument cannot be stored in a property list.
        """
        agent: LaunchAgent = LaunchAgent.for_invocation(self.argv)
        logger.debug("Launch agent: %s", agent)

        data: bytes = plistlib.dumps(agent.to_plist(), fmt=plistlib.FMT_XML)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(data)

    def install(self) -> bool:
        """Create and load the launch agent.

        Returns:
            bool: True if the agent was created and loaded.
        """
        if not self._check_platform():
            return False

        quoted: str = shlex.quote(str(self.path))

        self._info("Creating the launch agent in %s ...", self.path)
        try:
            self.write_descriptor()
        except (OSError, ValueError, TypeError) as e:
            logger.debug("Cannot write %s: %s", self.path, e)
            self._error("Cannot create the launch agent.")
            return False

        if not self.runner(f"plutil -convert binary1 {quoted}"):
            self._error("Cannot create the launch agent.")
            return False

        self._info("Loading the launch agent ...")
        if not self.runner(f"launchctl load -w {quoted}{NULL_OUTPUT_SUFFIX}"):
            self._error("Cannot load the launch agent.")
            return False

        return True

    # ----------------------------- Uninstall ------------------------------
    def uninstall(self) -> bool:
        """Unload and delete the launch agent.

        A failed unload is only a warning; the descriptor is deleted anyway.

        Returns:
            bool: True if the descriptor was deleted.
        """
        if not self._check_platform():
            return False

        quoted: str = shlex.quote(str(self.path))

        if not self.runner(f"launchctl unload -w {quoted}{NULL_OUTPUT_SUFFIX}"):
            self._warning("Cannot unload the launch agent.")

        self._info("Deleting the launch agent %s ...", self.path)
        try:
            self.path.unlink()
        except OSError as e:
            logger.debug("Cannot delete %s: %s", self.path, e)
            self._warning("Cannot delete the launch agent.")
            return False

        return True
