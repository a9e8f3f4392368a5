# topmark:header:start
#
#   project      : Akaer
#   file         : __init__.py
#   file_relpath : src/akaer/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Configuration handling for Akaer.

Re-exports the configuration model so callers can write
``from akaer.config import Config, MutableConfig``.
"""

from __future__ import annotations

from akaer.config.model import ArgsLike, Config, ConfigLoadError, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "ConfigLoadError",
    "MutableConfig",
]
