# topmark:header:start
#
#   project      : Akaer
#   file         : keys.py
#   file_relpath : src/akaer/config/keys.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Canonical TOML key names for Akaer configuration.

This module defines the authoritative string constants used when reading and
writing Akaer configuration from TOML sources (``~/.akaer.toml`` or a file
given with ``--config``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - CLI option names are intentionally kept separate (see `akaer.cli.options`).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by Akaer configuration.

    The configuration is a single flat table; the ordering of constants mirrors
    `akaer-default.toml`.
    """

    KEY_INTERFACE: Final[str] = "interface"
    KEY_ADDRESSES: Final[str] = "addresses"
    KEY_START_ADDRESS: Final[str] = "start_address"
    KEY_ALIASES: Final[str] = "aliases"
    KEY_ADD_COMMAND: Final[str] = "add_command"
    KEY_REMOVE_COMMAND: Final[str] = "remove_command"
    KEY_LOG_FILE: Final[str] = "log_file"
    KEY_LOG_LEVEL: Final[str] = "log_level"
    KEY_DRY_RUN: Final[str] = "dry_run"
    KEY_QUIET: Final[str] = "quiet"
