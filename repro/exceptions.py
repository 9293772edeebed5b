"""
Exception hierarchy for the repro package.

Route-table operations never raise these at their public boundary: invalid
routes degrade to no-ops and lookup misses. The exceptions exist for the
explicit code paths (RouteTable.canonicalize, config loading, the CLI) where
a caller wants to know why something was rejected.
"""

from typing import Any


class ReproError(Exception):
    """
    Base exception for all repro errors.

    Example:
        try:
            table = load_table("routes.yaml")
        except ReproError as e:
            lg.error(f"cannot load routes: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidRouteError(ReproError):
    """
    Raised when a route or target string cannot be canonicalized.

    Examples:
        - Not shaped like a port, a host or host:port
        - Port outside 0-65535
        - Non-text input
    """

    pass


class ConfigError(ReproError):
    """
    Route configuration file errors.

    Examples:
        - Config file not found or too large
        - Invalid YAML syntax
        - Top-level document or a section is not a mapping
    """

    pass
