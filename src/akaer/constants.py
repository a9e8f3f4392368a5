# topmark:header:start
#
#   project      : Akaer
#   file         : constants.py
#   file_relpath : src/akaer/constants.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

AKAER_VERSION: str = get_version("akaer")

# Name of the bundled default config inside the package `akaer.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "akaer.config"
DEFAULT_TOML_CONFIG_NAME: str = "akaer-default.toml"

# User configuration file, used when no explicit --config is given.
USER_CONFIG_FILE_NAME: str = ".akaer.toml"

# Placeholders substituted in the add/remove command templates.
INTERFACE_PLACEHOLDER: Final[str] = "@INTERFACE@"
ADDRESS_PLACEHOLDER: Final[str] = "@ALIAS@"

# Appended to every rendered alias command so only our own log output is visible.
NULL_OUTPUT_SUFFIX: Final[str] = " > /dev/null 2>&1"

DEFAULT_INTERFACE: Final[str] = "lo0"
DEFAULT_START_ADDRESS: Final[str] = "10.0.0.1"
DEFAULT_ALIAS_COUNT: Final[int] = 5
DEFAULT_ADD_COMMAND: Final[str] = "sudo ifconfig @INTERFACE@ alias @ALIAS@"
DEFAULT_REMOVE_COMMAND: Final[str] = "sudo ifconfig @INTERFACE@ -alias @ALIAS@"
DEFAULT_LOG_FILE: Final[str] = "STDOUT"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

# launchd agent
LAUNCH_AGENT_LABEL: Final[str] = "it.cowtech.akaer"
LAUNCH_AGENTS_DIR: Final[str] = "Library/LaunchAgents"
LAUNCH_AGENT_PLATFORM: Final[str] = "darwin"
