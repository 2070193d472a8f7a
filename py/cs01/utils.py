"""Repository root discovery and path utilities for cs01."""

from pathlib import Path
from typing import Optional, Union

from .types import METADATA_DIR


PathLike = Union[str, Path]


def is_bare_root(directory: Path) -> bool:
    """Check for a `config` file whose content starts with [core]."""
    config_path = directory / 'config'
    try:
        if not config_path.is_file():
            return False
        content = config_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError):
        # Unreadable config counts as no match
        return False
    return content.strip().startswith('[core]')


def is_standard_root(directory: Path) -> bool:
    """Check for a metadata folder directly inside directory."""
    return (directory / METADATA_DIR).is_dir()


def locate(start_dir: PathLike) -> Optional[Path]:
    """Find the repository root enclosing start_dir.

    Each level is tested for a bare marker first, then for the metadata
    folder, before moving up. Nothing is cached.
    """
    current = Path(start_dir).resolve()
    while True:
        if is_bare_root(current) or is_standard_root(current):
            return current
        if current.parent == current:
            return None
        current = current.parent


def repo_path(relative_path: str = '', start_dir: Optional[PathLike] = None) -> Optional[Path]:
    """Resolve a path relative to the enclosing repository root."""
    if start_dir is None:
        start_dir = Path.cwd()

    root = locate(start_dir)
    if root is None:
        return None
    return root / relative_path if relative_path else root


def in_repo(start_dir: Optional[PathLike] = None) -> bool:
    """Check if start_dir (default: cwd) is inside a repository."""
    return repo_path(start_dir=start_dir) is not None


def metadata_dir(target: Path, bare: bool) -> Path:
    """Get the directory that holds HEAD, config and refs."""
    return target if bare else target / METADATA_DIR
