"""Tests for version and build information."""

import sys
import types

import pytest

import repro
from repro import version


@pytest.mark.unit
class TestVersion:
    """Test version reporting."""

    def test_package_version(self):
        assert repro.__version__ == version.__version__
        assert version.__version__

    def test_no_build_info(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "repro._build_info", None)
        assert version.build_info() is None
        assert version.version_string() == f"repro {version.__version__}"

    def test_with_build_info(self, monkeypatch):
        module = types.ModuleType("repro._build_info")
        module.COMMIT_HASH = "abcdef1234567890"
        module.COMMIT_SHORT = "abcdef1"
        module.COMMIT_MESSAGE = "Add routes"
        module.BUILD_TIME = "2026-01-01T00:00:00Z"
        module.MODIFIED = True
        monkeypatch.setitem(sys.modules, "repro._build_info", module)
        monkeypatch.setattr(repro, "_build_info", module, raising=False)

        assert version.build_info() == {
            "commit": "abcdef1",
            "message": "Add routes",
            "build_time": "2026-01-01T00:00:00Z",
            "modified": True,
        }
        expected = "(abcdef1-modified, built 2026-01-01T00:00:00Z)"
        assert version.version_string() == f"repro {version.__version__} {expected}"

    def test_clean_build_info(self, monkeypatch):
        module = types.ModuleType("repro._build_info")
        module.COMMIT_HASH = "abcdef1234567890"
        module.COMMIT_SHORT = "abcdef1"
        module.COMMIT_MESSAGE = "Add routes"
        module.BUILD_TIME = "2026-01-01T00:00:00Z"
        module.MODIFIED = False
        monkeypatch.setitem(sys.modules, "repro._build_info", module)
        monkeypatch.setattr(repro, "_build_info", module, raising=False)

        assert version.build_info()["modified"] is False
        expected = "(abcdef1, built 2026-01-01T00:00:00Z)"
        assert version.version_string() == f"repro {version.__version__} {expected}"
