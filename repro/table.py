"""
Reverse proxy route table.

Maps routes (the host, port or host:port a request arrived on) to targets (the
backend URL it should be forwarded to). Both sides are canonicalized to
"scheme://host:port" before they are stored, so "api.example.com",
"api.example.com:80" and "API.example.com" all address the same entry under
the default triple.

The public operations never raise on bad input. An invalid default is kept
unchanged, an invalid route or target makes add/remove a no-op, and an
invalid lookup is a miss. Use RouteTable.canonicalize() to find out why a
string is rejected.

Example:
    table = (
        RouteTable()
        .set_port("8000")
        .add_routes({
            "api.example.com": "127.0.0.1:8080",
            "www.example.com": "127.0.0.1:8081",
        })
    )
    table.get_target("api.example.com:8000")  # "http://127.0.0.1:8080"

The table is not synchronized. Owners that share it across threads must
serialize mutations themselves.
"""

from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import InvalidRouteError
from .grammar import is_host, is_scheme
from .url import canonicalize_url, normalize_port

DEFAULT_SCHEME = "http"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = "80"

# Takes a raw route or target, returns its canonical URL or "" if invalid
Canonicalizer = Callable[[str], str]


class RouteTable:
    """
    Route table keyed by canonical route URL.

    Every setter and mutation returns the table so calls can be chained.
    """

    def __init__(self, lg: Any | None = None) -> None:
        """
        Initialize an empty table with the default triple.

        Args:
            lg: Logger for table operations (optional)
        """
        self._scheme = DEFAULT_SCHEME
        self._host = DEFAULT_HOST
        self._port = DEFAULT_PORT
        self._routes: dict[str, str] = {}
        self._canonicalizer: Canonicalizer = self.format_url
        self._lg = lg

    def __repr__(self) -> str:
        return (
            f"RouteTable(scheme={self._scheme!r}, host={self._host!r}, "
            f"port={self._port!r}, routes={len(self._routes)})"
        )

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, route: Any) -> bool:
        return self.has_target(route)

    @property
    def scheme(self) -> str:
        """Default scheme."""
        return self._scheme

    @property
    def host(self) -> str:
        """Default host."""
        return self._host

    @property
    def port(self) -> str:
        """Default port."""
        return self._port

    @property
    def routes(self) -> dict[str, str]:
        """Copy of the canonical route -> target mapping."""
        return dict(self._routes)

    # -------------------------------------------------------------------------
    # Defaults
    # -------------------------------------------------------------------------

    def set_scheme(self, scheme: Any) -> "RouteTable":
        """
        Set the default scheme, i.e. HOW to connect.

        Ignored unless scheme is a valid RFC 2396 scheme.

        Args:
            scheme: Scheme such as "http" or "https"

        Returns:
            RouteTable: self for chaining
        """
        if is_scheme(scheme):
            self._scheme = scheme
        else:
            self._reject("scheme", scheme)
        return self

    def set_host(self, host: Any) -> "RouteTable":
        """
        Set the default host used for routes and targets given as bare ports.

        Ignored unless host is a hostname or dotted-quad address.

        Args:
            host: Hostname or IPv4 address

        Returns:
            RouteTable: self for chaining
        """
        if is_host(host):
            self._host = host
        else:
            self._reject("host", host)
        return self

    def set_port(self, port: Any) -> "RouteTable":
        """
        Set the default port used for routes and targets given without one.

        Ignored unless port is a decimal number in 0-65535. Integers are
        accepted and leading zeros are dropped, so the default port and a port
        written in a route share one canonical spelling.

        Args:
            port: Port number

        Returns:
            RouteTable: self for chaining
        """
        try:
            self._port = normalize_port(port)
        except InvalidRouteError:
            self._reject("port", port)
        return self

    def set_canonicalizer(self, canonicalizer: Any) -> "RouteTable":
        """
        Replace the canonicalization strategy.

        The callable takes one raw route or target and returns its canonical
        URL, or an empty string if the input is invalid. It is used for every
        subsequent add, remove and lookup. Non-callables are ignored.

        Args:
            canonicalizer: Callable with the Canonicalizer contract

        Returns:
            RouteTable: self for chaining
        """
        if callable(canonicalizer):
            self._canonicalizer = canonicalizer
        return self

    # -------------------------------------------------------------------------
    # Canonicalization
    # -------------------------------------------------------------------------

    def canonicalize(self, raw: Any) -> str:
        """
        Canonicalize a route or target using the current defaults.

        Args:
            raw: Port, host or host:port

        Returns:
            Canonical "scheme://host:port" URL

        Raises:
            InvalidRouteError: If raw cannot be canonicalized
        """
        return canonicalize_url(raw, self._scheme, self._host, self._port)

    def format_url(self, raw: Any) -> str:
        """
        Default canonicalizer: canonical URL, or "" if raw is invalid.

        Args:
            raw: Port, host or host:port

        Returns:
            Canonical URL or empty string
        """
        try:
            return self.canonicalize(raw)
        except InvalidRouteError as e:
            if self._lg:
                self._lg.trace(
                    "invalid route", extra={"reason": e.message, **e.context}
                )
            return ""

    def _resolve(self, raw: Any) -> str:
        return self._canonicalizer(raw) or ""

    def _reject(self, name: str, value: Any) -> None:
        if self._lg:
            self._lg.trace(f"ignoring invalid default {name}", extra={name: value})

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_route(self, route: Any, target: Any) -> "RouteTable":
        """
        Add a route, replacing any target already stored for it.

        Nothing is stored unless both route and target canonicalize.

        Args:
            route: Port, host or host:port a request arrives on
            target: Port, host or host:port to forward to

        Returns:
            RouteTable: self for chaining
        """
        route_url = self._resolve(route)
        target_url = self._resolve(target)
        if route_url and target_url:
            self._routes[route_url] = target_url
            if self._lg:
                self._lg.debug(
                    "route added", extra={"route": route_url, "target": target_url}
                )
        elif self._lg:
            self._lg.trace("route rejected", extra={"route": route, "target": target})
        return self

    def add_routes(self, routes: Any) -> "RouteTable":
        """
        Add every route -> target pair of a mapping.

        Pairs are added in iteration order, so a later key that canonicalizes
        to the same route wins. Ignored if routes is not a mapping.

        Args:
            routes: Mapping such as {"api.example.com": "127.0.0.1:8080"}

        Returns:
            RouteTable: self for chaining
        """
        if isinstance(routes, Mapping):
            for route, target in routes.items():
                self.add_route(route, target)
        return self

    def remove_route(self, route: Any) -> "RouteTable":
        """
        Remove the entry for a route, if any.

        Args:
            route: Port, host or host:port

        Returns:
            RouteTable: self for chaining
        """
        route_url = self._resolve(route)
        if route_url and self._routes.pop(route_url, None) is not None:
            if self._lg:
                self._lg.debug("route removed", extra={"route": route_url})
        return self

    def remove_routes(self) -> "RouteTable":
        """Remove every route. Returns self for chaining."""
        self._routes = {}
        return self

    def replace_routes(self, routes: Any) -> "RouteTable":
        """
        Replace the whole table with a new mapping.

        Ignored if routes is not a mapping, leaving the table untouched.

        Args:
            routes: Mapping of route -> target

        Returns:
            RouteTable: self for chaining
        """
        if isinstance(routes, Mapping):
            self.remove_routes().add_routes(routes)
            if self._lg:
                self._lg.debug("routes replaced", extra={"count": len(self._routes)})
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_target(self, route: Any) -> str | None:
        """
        Get the target URL a route forwards to.

        Args:
            route: Port, host or host:port

        Returns:
            Canonical target URL, or None if the route has no target or is
            invalid
        """
        route_url = self._resolve(route)
        if not route_url:
            return None
        return self._routes.get(route_url)

    def has_target(self, route: Any) -> bool:
        """Check whether a route has a target."""
        return bool(self.get_target(route))
