# topmark:header:start
#
#   project      : Akaer
#   file         : __main__.py
#   file_relpath : src/akaer/__main__.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Module entry point for running Akaer via ``python -m akaer``.

Equivalent to running the ``akaer`` console script.

Examples:
    Show which aliases would be added::

        python -m akaer --dry-run add
"""

from __future__ import annotations

from akaer.cli.main import cli

if __name__ == "__main__":
    cli()
