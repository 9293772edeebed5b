"""Custom setup.py to generate _build_info.py during build.

Works alongside pyproject.toml - pyproject.toml provides the configuration,
this script adds the build-time hook that records the git commit the package
was built from. `repro --version` reports it.
"""

import subprocess
import sys
from datetime import UTC, datetime
from pathlib import Path

from setuptools import setup
from setuptools.command.build_py import build_py

_BUILD_INFO_TEMPLATE = '''\
"""Build information - auto-generated during install, do not edit."""

COMMIT_HASH = "{commit_full}"
COMMIT_SHORT = "{commit_short}"
COMMIT_MESSAGE = "{commit_message}"
BUILD_TIME = "{build_time}"
MODIFIED = {modified}
'''


def _git(*args: str) -> str | None:
    """Run git and return stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=Path(__file__).parent,
        )
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return None
    return result.stdout.strip() if result.returncode == 0 else None


def _write_build_info(package_dir: Path) -> None:
    commit = _git("rev-parse", "HEAD")
    if not commit:
        print("repro: no git metadata, skipping _build_info.py", file=sys.stderr)
        return

    message = (_git("log", "-1", "--format=%s") or "").replace("\\", "\\\\")
    status = _git("status", "--porcelain")
    (package_dir / "_build_info.py").write_text(
        _BUILD_INFO_TEMPLATE.format(
            commit_full=commit,
            commit_short=commit[:7],
            commit_message=message.replace('"', '\\"'),
            build_time=datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ"),
            modified=bool(status),
        )
    )
    print(f"repro: generated _build_info.py ({commit[:7]})", file=sys.stderr)


class BuildPyWithBuildInfo(build_py):
    """build_py that writes _build_info.py into the build directory."""

    def run(self):
        super().run()
        # Written to build_lib so the source tree stays untouched
        package_dir = Path(self.build_lib) / "repro"
        if package_dir.is_dir():
            _write_build_info(package_dir)


setup(cmdclass={"build_py": BuildPyWithBuildInfo})
