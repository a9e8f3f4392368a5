# topmark:header:start
#
#   project      : Akaer
#   file         : __init__.py
#   file_relpath : src/akaer/__init__.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer package.

Akaer manages IP address aliases on a network interface: it adds or removes a
list of addresses (explicit, or generated from a start address) by running a
configurable shell command for each of them, and on macOS can install itself
as a launch agent so the aliases come back at every login.
"""

from __future__ import annotations
