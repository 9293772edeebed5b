"""
Canonical URL construction for routes and targets.

A route or target is expanded into "scheme://host:port" using a default
triple for whatever the input leaves out:

    8080               -> http://127.0.0.1:8080
    api.example.com    -> http://api.example.com:80
    api.example.com:81 -> http://api.example.com:81

Scheme and host come out lowercase since both are case-insensitive. Path,
query and fragment never appear in the canonical form.
"""

from typing import Any
from urllib.parse import urlsplit

from .exceptions import InvalidRouteError
from .grammar import as_text, is_host_port, is_port

MAX_PORT = 65535


def normalize_port(value: Any) -> str:
    """
    Render a port in canonical decimal form.

    Leading zeros are dropped so "0080" and "80" name the same port.

    Args:
        value: Port as decimal text or int

    Returns:
        The port without leading zeros

    Raises:
        InvalidRouteError: If value is not a decimal port in 0-65535
    """
    if not is_port(value):
        raise InvalidRouteError("expected a port", port=repr(value))
    number = int(as_text(value))  # type: ignore[arg-type]
    if number > MAX_PORT:
        raise InvalidRouteError("port out of range 0-65535", port=value)
    return str(number)


def _probe(raw: str, scheme: str, host: str) -> str:
    """Build the URL string that is parsed to canonicalize raw."""
    if is_port(raw):
        return f"{scheme}://{host}:{raw}"
    if is_host_port(raw):
        return f"{scheme}://{raw}"
    raise InvalidRouteError("expected a port, host or host:port", route=raw)


def canonicalize_url(raw: Any, scheme: str, host: str, port: str) -> str:
    """
    Canonicalize a route or target string.

    Args:
        raw: Port, host or host:port (ints are treated as ports)
        scheme: Default scheme
        host: Default host, used when raw is a bare port
        port: Default port, used when raw carries none; normalized the same
            way as a port written in raw

    Returns:
        Canonical "scheme://host:port" URL

    Raises:
        InvalidRouteError: If raw is not a supported shape, or its port or the
            default port is out of range
    """
    text = as_text(raw)
    if text is None:
        raise InvalidRouteError("route must be a string", route=repr(raw))

    parts = urlsplit(_probe(text, scheme, host))
    try:
        parsed_port = parts.port
    except ValueError as e:
        raise InvalidRouteError("port out of range 0-65535", route=text) from e

    return "{}://{}:{}".format(
        parts.scheme or scheme,
        parts.hostname or host,
        parsed_port if parsed_port is not None else normalize_port(port),
    )


def format_url(raw: Any, scheme: str, host: str, port: str) -> str:
    """
    Canonicalize a route or target, returning "" if it is invalid.

    Same as canonicalize_url() but with the empty string as the invalid
    sentinel, which is what route-table callers and custom canonicalizers
    work with.
    """
    try:
        return canonicalize_url(raw, scheme, host, port)
    except InvalidRouteError:
        return ""
