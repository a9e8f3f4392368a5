# topmark:header:start
#
#   project      : Akaer
#   file         : exit_codes.py
#   file_relpath : src/akaer/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Exit codes for the Akaer CLI.

Akaer follows the BSD `sysexits` convention where practical, so that scripts
and launchd can tell a failed alias command from a bad invocation or a broken
configuration file.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Akaer CLI.

    Attributes:
        SUCCESS: Every requested operation succeeded.
        FAILURE: An operation failed (a command exited non-zero, nothing to
            manage, or an unsupported platform).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (unreadable or malformed file, unusable
            log file). Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    @classmethod
    def from_result(cls, succeeded: bool) -> ExitCode:
        """Map an operation result to SUCCESS or FAILURE."""
        return cls.SUCCESS if succeeded else cls.FAILURE
