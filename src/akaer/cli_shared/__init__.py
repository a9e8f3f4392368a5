# topmark:header:start
#
#   project      : Akaer
#   file         : __init__.py
#   file_relpath : src/akaer/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Click-independent helpers shared by the Akaer command line."""
