# topmark:header:start
#
#   project      : Akaer
#   file         : color.py
#   file_relpath : src/akaer/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Color mode resolution for console and log output.

Kept free of Click so the same decision applies to the console and to the
coloured log formatter.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when the output is a terminal.
        ALWAYS: Force-enable color.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        3. **Auto**: ``stdout.isatty()``.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value;
            ``None`` (or ``AUTO``) defers to the environment.
        stdout_isatty (bool | None): Override for TTY detection.

    Returns:
        bool: True if ANSI color should be enabled.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
