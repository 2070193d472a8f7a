"""
Shared test fixtures for cs01.

CLI tests run `python -m cs01` in a subprocess against a temporary
directory; unit tests import the package directly.
"""

import os
import subprocess
import sys
import tempfile
import shutil
from pathlib import Path
from typing import Optional
import pytest


PY_DIR = Path(__file__).parent.parent / 'py'


def get_cs01_command() -> list[str]:
    """Get the command to run cs01."""
    return [sys.executable, '-m', 'cs01']


class Cs01:
    """Helper class to run cs01 commands."""

    def __init__(self, work_dir: Path):
        self.work_dir = work_dir
        self.cmd_prefix = get_cs01_command()

    def run(self, *args: str, check: bool = True, cwd: Optional[Path] = None,
            env: Optional[dict] = None) -> subprocess.CompletedProcess:
        """Run a cs01 command."""
        cmd = self.cmd_prefix + list(args)
        pythonpath = os.pathsep.join(filter(None, [str(PY_DIR), os.environ.get('PYTHONPATH')]))
        result = subprocess.run(
            cmd,
            cwd=cwd or self.work_dir,
            capture_output=True,
            text=True,
            env={**os.environ, 'PYTHONPATH': pythonpath, **(env or {})},
        )
        if check and result.returncode != 0:
            raise subprocess.CalledProcessError(
                result.returncode, cmd, result.stdout, result.stderr
            )
        return result

    def init(self, *args: str, **kwargs) -> subprocess.CompletedProcess:
        return self.run('init', *args, **kwargs)


def snapshot(root: Path) -> dict:
    """Map every path under root to its mtime (ns); directories map to None."""
    entries = {}
    for path in root.rglob('*'):
        stat = path.stat()
        entries[path.relative_to(root).as_posix()] = None if path.is_dir() else stat.st_mtime_ns
    return entries


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    d = tempfile.mkdtemp(prefix='cs01_test_')
    yield Path(d).resolve()
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def cs01(temp_dir) -> Cs01:
    """Create a Cs01 helper for the temp directory."""
    return Cs01(temp_dir)


@pytest.fixture
def repo(cs01, temp_dir) -> tuple[Cs01, Path]:
    """Create an initialized standard repository."""
    cs01.init()
    return cs01, temp_dir
