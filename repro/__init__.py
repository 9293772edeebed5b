"""
repro - route table for reverse proxies.

Maps routes (a host, port or host:port a request arrives on) to canonical
target URLs a reverse proxy forwards to.
"""

from .config import RouteConfig, load_table
from .exceptions import ConfigError, InvalidRouteError, ReproError
from .grammar import is_host, is_host_port, is_port, is_scheme
from .table import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    Canonicalizer,
    RouteTable,
)
from .url import canonicalize_url, format_url, normalize_port
from .version import __version__

__all__ = [
    # Version
    "__version__",
    # Core classes
    "RouteTable",
    "Canonicalizer",
    "DEFAULT_SCHEME",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    # Canonicalization
    "canonicalize_url",
    "format_url",
    "normalize_port",
    "is_scheme",
    "is_host",
    "is_port",
    "is_host_port",
    # Config
    "RouteConfig",
    "load_table",
    # Exceptions
    "ReproError",
    "InvalidRouteError",
    "ConfigError",
]
