"""
Logging for repro.

Extends Python's standard logging with:
- A TRACE level below DEBUG for per-route diagnostics
- Structured extra fields rendered as "[key:value]" after the message

Library classes take an optional ``lg`` argument and stay silent without one:

    from repro import RouteTable
    from repro.log import create_lg

    table = RouteTable(lg=create_lg("repro", "debug"))
"""

import logging
import sys
from typing import TextIO

from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .formatters import LogFormatter
from .logger import Logger

logging.addLevelName(LogConstants.TRACE, "TRACE")


def resolve_level(level: str | int) -> int:
    """
    Resolve log level from a name or numeric value.

    Args:
        level: Level name ("trace", "debug", ...) or number

    Returns:
        int: Numeric log level

    Raises:
        InvalidLogLevelError: If the log level is invalid
    """
    if isinstance(level, bool):
        raise InvalidLogLevelError(level)
    if isinstance(level, int):
        return level
    if level.isnumeric():
        return int(level)
    try:
        return LogConstants.LEVEL_NAMES[level.lower()]
    except KeyError:
        raise InvalidLogLevelError(level) from None


def create_lg(
    name: str, level: str | int = "info", stream: TextIO | None = None
) -> Logger:
    """
    Create a standalone logger writing formatted records to a stream.

    The logger is not registered with logging.getLogger(), so creating one
    never touches global logging state.

    Args:
        name: Logger name
        level: Log level name or number
        stream: Output stream (defaults to sys.stderr)

    Returns:
        Logger: Configured logger instance

    Example:
        >>> lg = create_lg("repro", "debug")
    """
    lg = Logger(name, resolve_level(level))
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(LogFormatter())
    lg.addHandler(handler)
    lg.propagate = False
    return lg


__all__ = [
    "Logger",
    "LogFormatter",
    "LogConstants",
    "LogError",
    "InvalidLogLevelError",
    "resolve_level",
    "create_lg",
]
