# topmark:header:start
#
#   project      : Akaer
#   file         : __init__.py
#   file_relpath : src/akaer/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer command line interface (Click)."""
