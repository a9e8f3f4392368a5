# topmark:header:start
#
#   project      : Akaer
#   file         : loaders.py
#   file_relpath : src/akaer/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading Akaer configuration from:
- the packaged default TOML template, and
- on-disk TOML files (``~/.akaer.toml`` or an explicit ``--config`` file).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from akaer.config.io.render import to_toml
from akaer.config.keys import Toml
from akaer.config.logging import get_logger
from akaer.constants import (
    DEFAULT_ADD_COMMAND,
    DEFAULT_ALIAS_COUNT,
    DEFAULT_INTERFACE,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REMOVE_COMMAND,
    DEFAULT_START_ADDRESS,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
)

if TYPE_CHECKING:
    from pathlib import Path

    from akaer.config.logging import AkaerLogger

    from .types import TomlTable

logger: AkaerLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Akaer's **runtime defaults** as a Python dict.

    This function performs no I/O. The bundled ``akaer-default.toml`` is an
    annotated template for human-facing output (``akaer init-config``);
    runtime defaults are defined in code so Akaer works even if the packaged
    template is missing.

    Returns:
        A new TOML-table-compatible dict containing the runtime defaults.
    """
    return {
        Toml.KEY_INTERFACE: DEFAULT_INTERFACE,
        Toml.KEY_ADDRESSES: [],
        Toml.KEY_START_ADDRESS: DEFAULT_START_ADDRESS,
        Toml.KEY_ALIASES: DEFAULT_ALIAS_COUNT,
        Toml.KEY_ADD_COMMAND: DEFAULT_ADD_COMMAND,
        Toml.KEY_REMOVE_COMMAND: DEFAULT_REMOVE_COMMAND,
        Toml.KEY_LOG_FILE: DEFAULT_LOG_FILE,
        Toml.KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
        Toml.KEY_DRY_RUN: False,
        Toml.KEY_QUIET: False,
    }


def load_default_config_template_toml_text() -> str:
    """Load the bundled default TOML config *template* as text.

    Falls back to rendering the runtime defaults when the packaged template
    cannot be read.

    Returns:
        The TOML document text.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        return resource.read_text(encoding="utf8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return to_toml(load_defaults_dict())


def load_toml_dict(path: Path) -> TomlTable | None:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content, or ``None`` when the file cannot be read or parsed.

    Notes:
        - Errors are logged; callers decide whether a failure is fatal.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return None
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return None
