# topmark:header:start
#
#   project      : Akaer
#   file         : logging.py
#   file_relpath : src/akaer/config/logging.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Custom Akaer logging with TRACE logging.

This module extends the standard logging module with Akaer-specific features,
including a custom TRACE level, a specialized logger class, colored output
formatting and the log destinations understood by the configuration
(``STDOUT``, ``STDERR`` or a file path).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class AkaerLogger(logging.Logger):
    """Custom logger class for Akaer with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    # Expose TRACE_LEVEL as logging.TRACE
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(AkaerLogger)


LOG_FORMAT = "[%(asctime)s T+%(elapsed)0.5f] %(levelname)8s: %(message)s"
DEBUG_LOG_FORMAT = (
    "[%(asctime)s T+%(elapsed)0.5f] %(levelname)8s: [%(filename)s:%(lineno)d] %(message)s"
)
DATE_FORMAT = "%Y/%b/%d %H:%M:%S"

# Special log destinations; any other value is a file path.
LOG_FILE_STDOUT: Final[str] = "STDOUT"
LOG_FILE_STDERR: Final[str] = "STDERR"

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ElapsedFormatter(logging.Formatter):
    """Formatter that exposes the seconds elapsed since startup as ``%(elapsed)``."""

    def __init__(self, fmt: str | None = None) -> None:
        super().__init__(fmt, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record after attaching its elapsed time."""
        record.elapsed = max(record.relativeCreated / 1000.0, 0.0)
        return super().format(record)


class ChalkFormatter(ElapsedFormatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        result: str = ""

        # Apply color styles to the message depending on the log severity
        if level >= logging.CRITICAL:
            result = chalk.magenta_bright(message)
        elif level >= logging.ERROR:
            result = chalk.red(message)
        elif level >= logging.WARNING:
            result = chalk.yellow(message)
        elif level >= logging.INFO:
            result = chalk.green(message)
        elif level >= logging.DEBUG:
            result = chalk.cyan(message)
        elif level >= TRACE_LEVEL:
            result = chalk.blue(message)
        else:
            result = chalk.dim.red(message)

        return result


def parse_log_level(value: object) -> int | None:
    """Return a logging level for a level name or number, or None if unrecognized.

    Accepts names such as ``"TRACE"``, ``"info"`` or ``"FATAL"``, integers and
    numeric strings (e.g. ``"10"``).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        v = value.strip().upper()
        if v.isdigit():
            return int(v)
        return LEVEL_NAMES.get(v)
    return None


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors AKAER_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get("AKAER_LOG_LEVEL")
    if val:
        return parse_log_level(val)
    return None


def _make_handler(log_file: str) -> tuple[logging.Handler, bool]:
    """Return the handler for a log destination and whether it writes to a console stream."""
    if log_file.upper() == LOG_FILE_STDERR:
        return logging.StreamHandler(sys.stderr), True
    if log_file.upper() == LOG_FILE_STDOUT or not log_file:
        return logging.StreamHandler(sys.stdout), True
    return logging.FileHandler(log_file, encoding="utf-8"), False


def setup_logging(
    level: int | None = None,
    log_file: str = LOG_FILE_STDOUT,
    *,
    enable_color: bool = True,
) -> None:
    """Configure the root logger with a specified log level and destination.

    If ``level`` is None, environment variables are consulted via
    `resolve_env_log_level`. Default is INFO when unspecified.

    Args:
        level (int | None): Minimum severity to emit.
        log_file (str): ``"STDOUT"``, ``"STDERR"`` or the path of a file to append to.
        enable_color (bool): Whether stream output is colored.

    Raises:
        OSError: When ``log_file`` is a path that cannot be opened.
    """
    if level is None:
        level = resolve_env_log_level() or logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Open the new destination first, so a bad path leaves logging untouched
    handler, is_stream = _make_handler(log_file)
    # Use detailed logging format below INFO, simpler otherwise
    fmt = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    # Files always get plain text
    if is_stream and enable_color:
        handler.setFormatter(ChalkFormatter(fmt))
    else:
        handler.setFormatter(ElapsedFormatter(fmt))

    # Remove all existing handlers to prevent duplicate log messages
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)

    root_logger.addHandler(handler)


def get_logger(name: str) -> AkaerLogger:
    """Retrieve an AkaerLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        AkaerLogger: An AkaerLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("AkaerLogger", logger)
