"""CS01 repository initialization: locate, lay out and write repositories."""

from .config import serialize
from .utils import locate, repo_path, in_repo, metadata_dir
from .layout import build_repo_tree, default_config
from .files import write_tree
from .commands.init import init_repository
from .types import (
    METADATA_DIR, DEFAULT_BRANCH, DEFAULT_DIR_PERMS,
    File, Directory, FileTreeNode, WriteOptions, WriteAction, InitResult,
    Cs01Error, InvalidConfigError, NestedRepositoryError, RepositoryIOError,
)

__all__ = [
    # Operations
    "serialize", "locate", "repo_path", "in_repo", "metadata_dir",
    "build_repo_tree", "default_config", "write_tree", "init_repository",
    # Types
    "METADATA_DIR", "DEFAULT_BRANCH", "DEFAULT_DIR_PERMS",
    "File", "Directory", "FileTreeNode", "WriteOptions", "WriteAction", "InitResult",
    # Errors
    "Cs01Error", "InvalidConfigError", "NestedRepositoryError", "RepositoryIOError",
]
