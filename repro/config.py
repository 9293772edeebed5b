"""
Route table definitions loaded from YAML files.

A definition sets the default triple and the routes to add:

    defaults:
      scheme: http
      host: 127.0.0.1
      port: 80
    routes:
      api.example.com: 127.0.0.1:8080
      www.example.com: 127.0.0.1:8081
      8443: 10.0.0.5:443
    logging:
      level: info

Defaults may be overridden from the environment with REPRO_SCHEME,
REPRO_HOST and REPRO_PORT.

Problems with the file itself (missing, too large, bad YAML, wrong section
types) raise ConfigError. Individual routes keep the table's silent contract:
an invalid default is ignored and an invalid route is skipped with a warning.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigError
from .table import RouteTable

# Route files are small; anything bigger is almost certainly not one
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

ENV_PREFIX = "REPRO_"
DEFAULT_KEYS = ("scheme", "host", "port")


def _check_file_size(path: Path) -> None:
    """Check file size limit before parsing."""
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            "configuration file too large",
            path=path,
            size=file_size,
            max_size=MAX_CONFIG_SIZE_BYTES,
        )


def _read_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigError("configuration file not found", path=path)
    _check_file_size(path)
    with open(path) as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", path=path) from e


def _section(data: Mapping[str, Any], name: str) -> dict[Any, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(
            f"'{name}' must be a mapping", section=name, type=type(value).__name__
        )
    return dict(value)


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """
    Collect default overrides from the environment.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        dict: Overrides keyed by "scheme", "host" or "port"
    """
    if environ is None:
        environ = os.environ
    overrides = {}
    for key in DEFAULT_KEYS:
        value = environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            overrides[key] = value
    return overrides


@dataclass
class RouteConfig:
    """
    Route table definition.

    Attributes:
        defaults: Default triple overrides keyed by "scheme", "host", "port"
        routes: Raw route -> target mapping, in file order
        log_level: Log level name from the "logging" section (optional)
    """

    defaults: dict[str, Any] = field(default_factory=dict)
    routes: dict[Any, Any] = field(default_factory=dict)
    log_level: str | None = None

    @classmethod
    def from_dict(
        cls, data: Any, environ: Mapping[str, str] | None = None
    ) -> "RouteConfig":
        """
        Build a definition from parsed YAML data.

        Args:
            data: Parsed document (None for an empty file)
            environ: Environment for REPRO_* overrides (defaults to os.environ)

        Returns:
            RouteConfig: The definition

        Raises:
            ConfigError: If the document or one of its sections is not a mapping
        """
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError(
                "configuration must be a mapping", type=type(data).__name__
            )

        defaults = _section(data, "defaults")
        unknown = sorted(str(k) for k in defaults if k not in DEFAULT_KEYS)
        if unknown:
            raise ConfigError("unknown defaults", keys=",".join(unknown))
        defaults.update(env_overrides(environ))

        level = _section(data, "logging").get("level")
        return cls(
            defaults=defaults,
            routes=_section(data, "routes"),
            log_level=str(level) if level is not None else None,
        )

    @classmethod
    def from_file(
        cls, fname: str | Path, environ: Mapping[str, str] | None = None
    ) -> "RouteConfig":
        """
        Load a definition from a YAML file.

        Args:
            fname: Path to the YAML file
            environ: Environment for REPRO_* overrides (defaults to os.environ)

        Returns:
            RouteConfig: The definition

        Raises:
            ConfigError: If the file cannot be read or is malformed
        """
        return cls.from_dict(_read_yaml(Path(fname)), environ)

    def apply_defaults(self, table: RouteTable) -> RouteTable:
        """Apply the configured defaults through the table's setters."""
        if "scheme" in self.defaults:
            table.set_scheme(self.defaults["scheme"])
        if "host" in self.defaults:
            table.set_host(self.defaults["host"])
        if "port" in self.defaults:
            table.set_port(self.defaults["port"])
        return table

    def rejected(self) -> list[tuple[Any, Any]]:
        """
        List the route -> target pairs that would not be added.

        Returns:
            list: (route, target) pairs where either side is invalid under the
            configured defaults
        """
        table = self.apply_defaults(RouteTable())
        return [
            (route, target)
            for route, target in self.routes.items()
            if not (table.format_url(route) and table.format_url(target))
        ]

    def build(self, lg: Any | None = None) -> RouteTable:
        """
        Build a route table from this definition.

        Args:
            lg: Logger passed to the table; rejected routes are logged as warnings

        Returns:
            RouteTable: Table with defaults applied and routes added
        """
        table = self.apply_defaults(RouteTable(lg=lg))
        table.add_routes(self.routes)
        if lg:
            for route, target in self.rejected():
                lg.warning(
                    "skipping invalid route", extra={"route": route, "target": target}
                )
            lg.debug("route table loaded", extra={"count": len(table)})
        return table


def load_table(fname: str | Path, lg: Any | None = None) -> RouteTable:
    """
    Load a route table from a YAML definition file.

    Args:
        fname: Path to the YAML file
        lg: Logger for the table (optional)

    Returns:
        RouteTable: Populated table

    Raises:
        ConfigError: If the file cannot be read or is malformed
    """
    return RouteConfig.from_file(fname).build(lg=lg)
