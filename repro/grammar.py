"""
Input grammars for route and target strings.

Routes and targets are written loosely in config files and on the command
line, so every accepted shape is checked here before it is turned into a URL:

- Scheme: "http", "https", "svn+ssh" (RFC 2396 scheme characters)
- Host: "api.example.com", "localhost", "example.com." or a dotted quad
- Port: decimal digits only
- HostPort: a host optionally followed by ":<port>"

All patterns are matched with fullmatch() so a trailing newline is rejected.
"""

import re
from re import Pattern
from typing import Any

_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9\-]*[a-zA-Z0-9])?"
_TOP_LABEL = r"[a-zA-Z](?:[a-zA-Z0-9\-]*[a-zA-Z0-9])?"
_DOTTED_QUAD = r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+"
_HOST = rf"(?:(?:{_LABEL}\.)*{_TOP_LABEL}\.?|{_DOTTED_QUAD})"

SCHEME_RE: Pattern[str] = re.compile(r"[a-zA-Z][a-zA-Z0-9+\-.]*")
HOST_RE: Pattern[str] = re.compile(_HOST)
PORT_RE: Pattern[str] = re.compile(r"[0-9]+")
HOST_PORT_RE: Pattern[str] = re.compile(rf"{_HOST}(?::[0-9]+)?")


def as_text(value: Any) -> str | None:
    """
    Coerce a route component to text.

    YAML loads bare ports as integers, so ints are accepted and rendered in
    decimal. Booleans are ints in Python but never a port.

    Args:
        value: Candidate route, target or default value

    Returns:
        The text form, or None if the value cannot be a route component
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    return None


def _matches(pattern: Pattern[str], value: Any) -> bool:
    text = as_text(value)
    return text is not None and pattern.fullmatch(text) is not None


def is_scheme(value: Any) -> bool:
    """Check whether value is a valid URL scheme."""
    return _matches(SCHEME_RE, value)


def is_host(value: Any) -> bool:
    """Check whether value is a hostname or dotted-quad address."""
    return _matches(HOST_RE, value)


def is_port(value: Any) -> bool:
    """Check whether value is a bare decimal port."""
    return _matches(PORT_RE, value)


def is_host_port(value: Any) -> bool:
    """Check whether value is a host with an optional ":<port>" suffix."""
    return _matches(HOST_PORT_RE, value)
