# topmark:header:start
#
#   project      : Akaer
#   file         : __init__.py
#   file_relpath : src/akaer/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""TOML I/O helpers for Akaer configuration.

Typical flow:
    1. Load runtime defaults (``load_defaults_dict``).
    2. Load the user or explicit TOML file (``load_toml_dict``).
    3. Read values with the typed getters.
    4. Serialize back to TOML when needed (``to_toml``).

Akaer uses `tomlkit` for both parsing and rendering.
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value_or_none,
    get_string_value_or_none,
)
from .loaders import (
    load_default_config_template_toml_text,
    load_defaults_dict,
    load_toml_dict,
)
from .render import to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_string_list_value_or_none",
    "get_string_value_or_none",
    "load_default_config_template_toml_text",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
