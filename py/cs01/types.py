"""Type definitions for cs01 repository initialization."""

from pathlib import Path
from typing import Dict, List, Literal, Optional, Union
from dataclasses import dataclass, field


# Name of the metadata folder of a standard (non-bare) repository
METADATA_DIR = '.cs01-root'

DEFAULT_BRANCH = 'main'
DEFAULT_DIR_PERMS = 0o755


@dataclass(frozen=True)
class File:
    """A file leaf holding its full text content."""
    content: str = ''


@dataclass(frozen=True)
class Directory:
    """A directory mapping path segment names to child nodes."""
    children: Dict[str, 'FileTreeNode'] = field(default_factory=dict)


FileTreeNode = Union[File, Directory]


@dataclass
class WriteOptions:
    """Options for materializing a tree on disk.

    With overwrite disabled, any path that already exists is left untouched.
    """
    dir_perms: int = DEFAULT_DIR_PERMS
    overwrite: bool = True
    dry_run: bool = False


ActionKind = Literal['mkdir', 'write', 'skip']


@dataclass
class WriteAction:
    """A single decision taken while writing a tree."""
    kind: ActionKind
    path: Path
    size: Optional[int] = None  # bytes, only set for 'write'

    def describe(self) -> str:
        if self.kind == 'mkdir':
            return f"create dir {self.path}"
        if self.kind == 'write':
            return f"write file {self.path} ({self.size} bytes)"
        return f"skip existing {self.path}"


@dataclass
class InitResult:
    """Outcome of initializing (or repairing) a repository."""
    target: Path
    metadata_dir: Path
    bare: bool
    reinitialized: bool
    actions: List[WriteAction] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return 'bare' if self.bare else 'standard'

    def message(self) -> str:
        if self.reinitialized:
            prefix = 'Reinitialized existing'
        else:
            prefix = 'Initialized empty'
        return f"{prefix} {self.kind} CS01 repository in {self.metadata_dir}"


class Cs01Error(Exception):
    """Base error for cs01 operations."""
    pass


class InvalidConfigError(Cs01Error):
    """Config structure cannot be serialized."""
    pass


class NestedRepositoryError(Cs01Error):
    """Target lies inside a different, already-rooted repository."""

    def __init__(self, root: Path):
        self.root = root
        super().__init__(
            f"Refusing to create nested repository inside existing "
            f"CS01 repository at {root}"
        )


class RepositoryIOError(Cs01Error):
    """Filesystem failure while writing a repository tree."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"{path}: {reason}")
