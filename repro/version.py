"""
Package version and build information.

setup.py writes _build_info.py into the built package when git metadata is
available. Source checkouts and sdists built outside git have no such file.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

try:
    __version__ = version("repro")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.1.0-dev"


def build_info() -> dict[str, Any] | None:
    """
    Read the build-time commit information.

    Returns:
        dict with "commit", "message", "build_time" and "modified" (True if
        the working tree had uncommitted changes), or None if the package was
        not built from a git checkout
    """
    try:
        from . import _build_info  # type: ignore[attr-defined]
    except ImportError:
        return None
    return {
        "commit": _build_info.COMMIT_SHORT,
        "message": _build_info.COMMIT_MESSAGE,
        "build_time": _build_info.BUILD_TIME,
        "modified": bool(_build_info.MODIFIED),
    }


def version_string() -> str:
    """Version line shown by `repro --version`."""
    info = build_info()
    if info is None:
        return f"repro {__version__}"
    dirty = "-modified" if info["modified"] else ""
    return f"repro {__version__} ({info['commit']}{dirty}, built {info['build_time']})"
