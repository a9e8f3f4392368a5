# topmark:header:start
#
#   project      : Akaer
#   file         : __init__.py
#   file_relpath : src/akaer/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer alias engine: address resolution, alias commands and the launch agent."""

from __future__ import annotations

from akaer.core.addresses import AddressType, is_ipv4, is_ipv6, resolve_addresses
from akaer.core.agent import LaunchAgent, LaunchAgentManager, launch_agent_path
from akaer.core.aliases import AliasManager, AliasOperation, pad_number
from akaer.core.application import Application
from akaer.core.commands import CommandRunner, execute_command, render_command

__all__ = [
    "AddressType",
    "AliasManager",
    "AliasOperation",
    "Application",
    "CommandRunner",
    "LaunchAgent",
    "LaunchAgentManager",
    "execute_command",
    "is_ipv4",
    "is_ipv6",
    "launch_agent_path",
    "pad_number",
    "render_command",
]
