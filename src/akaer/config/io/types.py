# topmark:header:start
#
#   project      : Akaer
#   file         : types.py
#   file_relpath : src/akaer/config/io/types.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Shared TOML-related type aliases for the config I/O package."""

from __future__ import annotations

from typing import Any

TomlTable = dict[str, Any]
