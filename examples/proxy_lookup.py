#!/usr/bin/env python3
"""
Route Lookup Example

Shows how a reverse proxy consults the route table for each request: the
Host header (or listening port) is the route, the returned URL is where the
request is forwarded.

Running the Example:
    python examples/proxy_lookup.py

Expected Output:
    One line per simulated request with its forwarding target, plus the
    requests that have no route.
"""

import pathlib
import sys

project_root = str(pathlib.Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from repro import RouteConfig
from repro.log import create_lg

ROUTES_FILE = pathlib.Path(__file__).parent / "routes.yaml"

REQUESTS = [
    "api.example.com",
    "WWW.Example.com:80",
    "8443",
    "unknown.example.com",
    "not a host!",
]


def main() -> None:
    config = RouteConfig.from_file(ROUTES_FILE)
    lg = create_lg("proxy", config.log_level or "info")
    table = config.build(lg=lg)

    for host_header in REQUESTS:
        target = table.get_target(host_header)
        if target is None:
            lg.warning("no route", extra={"host": host_header})
        else:
            print(f"{host_header:<22} -> {target}")

    # Routes can be swapped at runtime without touching the defaults
    table.replace_routes({"api.example.com": "127.0.0.1:9090"})
    print(f"after replace: api.example.com -> {table.get_target('api.example.com')}")


if __name__ == "__main__":
    main()
