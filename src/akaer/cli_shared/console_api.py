# topmark:header:start
#
#   project      : Akaer
#   file         : console_api.py
#   file_relpath : src/akaer/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

Program output (``version``, ``dump-config``, ``init-config``) goes through a
console; alias progress and failures go through logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
