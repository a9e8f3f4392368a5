# topmark:header:start
#
#   project      : Akaer
#   file         : getters.py
#   file_relpath : src/akaer/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Value getters for TOML config tables.

These helpers extract optional values from a parsed TOML table. A missing key
yields ``None`` (meaning "not set, inherit from the layer below"). A value of
the wrong shape is logged as a **warning** and also yields ``None``, so user
mistakes are surfaced without crashing or changing defaulting behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from akaer.config.logging import get_logger

if TYPE_CHECKING:
    from akaer.config.logging import AkaerLogger

    from .types import TomlTable

logger: AkaerLogger = get_logger(__name__)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    If the value is a ``str``, it is returned as is. If the value is of type
    ``int`` or ``float``, it is coerced to a string using ``str(...)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The extracted or coerced string value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    logger.warning("Expected string for '%s', got %s: %r", key, type(value).__name__, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    If the value is a ``bool``, it is returned as is. If the value is an integer,
    it is coerced via ``bool(value)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Expected bool for '%s', got %s: %r", key, type(value).__name__, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Integers are returned as is and numeric strings (``"3"``, ``"-1"``) are
    converted. ``bool`` is rejected since it is a subclass of ``int``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The integer value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning("Expected int for '%s', got bool: %r", key, value)
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    logger.warning("Expected int for '%s', got %s: %r", key, type(value).__name__, value)
    return None


def get_string_list_value_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    A single string is accepted and wrapped into a one-element list. Non-string
    list items are dropped with a warning.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str] | None: The list of strings, or ``None`` when absent or not a list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected list for '%s', got %s: %r", key, type(value).__name__, value)
        return None

    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string item in '%s': %r", key, item)
    return out
