"""
repro CLI - inspect route tables from the command line.

Usage:
    repro format 8080 api.example.com api.example.com:81
    repro -c routes.yaml resolve api.example.com 8443
    repro -c routes.yaml list
    repro -c routes.yaml check
"""

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any

from ..config import RouteConfig
from ..exceptions import ConfigError, InvalidRouteError
from ..log import InvalidLogLevelError, LogConstants, create_lg
from ..table import RouteTable
from ..version import version_string
from .output import ConsoleOutput, OutputWriter

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def _cmd_format(
    args: argparse.Namespace, config: RouteConfig, table: RouteTable, out: OutputWriter
) -> int:
    """Print the canonical URL for each raw input."""
    status = EXIT_OK
    for raw in args.raw:
        try:
            out.write(table.canonicalize(raw))
        except InvalidRouteError as e:
            out.write(f"invalid: {e}")
            status = EXIT_FAILED
    return status


def _cmd_resolve(
    args: argparse.Namespace, config: RouteConfig, table: RouteTable, out: OutputWriter
) -> int:
    """Print the target for each route."""
    status = EXIT_OK
    for route in args.route:
        target = table.get_target(route)
        if target is None:
            out.write(f"{route} -> (no target)")
            status = EXIT_FAILED
        else:
            out.write(f"{route} -> {target}")
    return status


def _cmd_list(
    args: argparse.Namespace, config: RouteConfig, table: RouteTable, out: OutputWriter
) -> int:
    """Print every stored route."""
    routes = table.routes
    if not routes:
        out.write("no routes")
        return EXIT_OK
    width = max(len(route) for route in routes)
    for route in sorted(routes):
        out.write(f"{route.ljust(width)} -> {routes[route]}")
    return EXIT_OK


def _cmd_check(
    args: argparse.Namespace, config: RouteConfig, table: RouteTable, out: OutputWriter
) -> int:
    """Report config entries that are not added to the table."""
    rejected = config.rejected()
    for route, target in rejected:
        out.write(f"rejected: {route!r} -> {target!r}")
    out.write(f"{len(table)} routes, {len(rejected)} rejected")
    return EXIT_FAILED if rejected else EXIT_OK


Command = Callable[[argparse.Namespace, RouteConfig, RouteTable, OutputWriter], int]

_COMMANDS: dict[str, Command] = {
    "format": _cmd_format,
    "resolve": _cmd_resolve,
    "list": _cmd_list,
    "check": _cmd_check,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repro", description="Reverse proxy route table utility"
    )
    parser.add_argument("--version", action="version", version=version_string())
    parser.add_argument(
        "-c", "--config", metavar="PATH", help="route table definition (YAML)"
    )
    parser.add_argument("--scheme", help="default scheme")
    parser.add_argument("--host", help="default host")
    parser.add_argument("--port", help="default port")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=sorted(LogConstants.LEVEL_NAMES),
        help="log level (default: config file level, else warning)",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    fmt = sub.add_parser("format", help="print canonical URLs")
    fmt.add_argument("raw", nargs="+", help="port, host or host:port")
    resolve = sub.add_parser("resolve", help="print route targets")
    resolve.add_argument("route", nargs="+", help="port, host or host:port")
    sub.add_parser("list", help="print all routes")
    sub.add_parser("check", help="report invalid routes in the config file")
    return parser


def _load_config(args: argparse.Namespace) -> RouteConfig:
    if args.config:
        config = RouteConfig.from_file(args.config)
    else:
        config = RouteConfig.from_dict({})
    for key in ("scheme", "host", "port"):
        value = getattr(args, key)
        if value is not None:
            config.defaults[key] = value
    return config


def _create_logger(args: argparse.Namespace, config: RouteConfig) -> Any:
    level = args.log_level or config.log_level or "warning"
    return create_lg("repro", level)


def main(argv: Sequence[str] | None = None, out: OutputWriter | None = None) -> int:
    """Main entry point for the repro CLI."""
    args = _build_parser().parse_args(argv)
    if out is None:
        out = ConsoleOutput()

    try:
        config = _load_config(args)
        lg = _create_logger(args, config)
    except (ConfigError, InvalidLogLevelError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    table = config.build(lg=lg)
    return _COMMANDS[args.command](args, config, table, out)


if __name__ == "__main__":
    sys.exit(main())
