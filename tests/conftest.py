"""
Pytest configuration and shared fixtures.

This module provides custom markers and shared fixtures for the repro test
suite.
"""

from collections.abc import Generator
from io import StringIO
from pathlib import Path

import pytest

from repro.log import Logger, create_lg

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (filesystem, subprocess)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


def pytest_collection_modifyitems(config, items):
    """Add 'unit' marker to tests without other markers."""
    for item in items:
        if not any(
            mark.name in ["integration", "property"] for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_repro_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove REPRO_* default overrides so the host environment cannot leak in."""
    for key in ("REPRO_SCHEME", "REPRO_HOST", "REPRO_PORT"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def log_stream() -> StringIO:
    """Stream that trace_lg writes to."""
    return StringIO()


@pytest.fixture
def trace_lg(log_stream: StringIO) -> Generator[Logger, None, None]:
    """
    Provide a logger at TRACE level writing to log_stream.

    Yields:
        Logger: Logger instance
    """
    lg = create_lg("test-repro", "trace", stream=log_stream)
    yield lg
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()


@pytest.fixture
def routes_yaml(tmp_path: Path) -> Path:
    """
    Provide a route table definition with one invalid route.

    Returns:
        Path: Path to the YAML file
    """
    path = tmp_path / "routes.yaml"
    path.write_text(
        """
defaults:
  scheme: https
  host: backend.local
  port: 8443

routes:
  api.example.com: 127.0.0.1:8080
  9000: 9001
  "bad route!": 127.0.0.1

logging:
  level: debug
"""
    )
    return path
