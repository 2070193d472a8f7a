"""Materialize an in-memory file tree on disk."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from .types import (
    Directory, File, FileTreeNode, RepositoryIOError, WriteAction, WriteOptions,
)


logger = logging.getLogger(__name__)


def write_tree(tree: FileTreeNode, base_path: Path,
               options: Optional[WriteOptions] = None) -> List[WriteAction]:
    """Write tree at base_path and return the actions taken, in order.

    Directories are created before their children. With overwrite off,
    existing paths are skipped without looking at their content. With
    dry_run on, nothing is touched and the returned actions describe what
    would happen. The first OSError aborts the write; anything already
    written stays on disk.
    """
    if options is None:
        options = WriteOptions()

    actions: List[WriteAction] = []
    _write_node(tree, Path(base_path), options, actions)
    return actions


def _write_node(node: FileTreeNode, path: Path, options: WriteOptions,
                actions: List[WriteAction]):
    if isinstance(node, Directory):
        _write_directory(node, path, options, actions)
    elif isinstance(node, File):
        _write_file(node, path, options, actions)
    else:
        raise TypeError(f"Unknown tree node at {path}: {node!r}")


def _write_directory(node: Directory, path: Path, options: WriteOptions,
                     actions: List[WriteAction]):
    if os.path.lexists(path):
        # Children cannot be written under a non-directory, dry run or not
        if not path.is_dir():
            raise RepositoryIOError(path, "exists and is not a directory")
    else:
        _record(actions, WriteAction('mkdir', path), options)
        if not options.dry_run:
            try:
                path.mkdir(mode=options.dir_perms, parents=True, exist_ok=True)
            except OSError as e:
                raise RepositoryIOError(path, f"failed to create directory: {_reason(e)}") from e

    for name, child in node.children.items():
        _write_node(child, path / name, options, actions)


def _write_file(node: File, path: Path, options: WriteOptions,
                actions: List[WriteAction]):
    # lexists: a dangling symlink is an existing entry, never written through
    if not options.overwrite and os.path.lexists(path):
        _record(actions, WriteAction('skip', path), options)
        return

    data = node.content.encode('utf-8')
    _record(actions, WriteAction('write', path, len(data)), options)
    if options.dry_run:
        return

    try:
        path.parent.mkdir(mode=options.dir_perms, parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise RepositoryIOError(path, f"failed to write file: {_reason(e)}") from e


def _record(actions: List[WriteAction], action: WriteAction, options: WriteOptions):
    actions.append(action)
    if options.dry_run:
        logger.info("[dry-run] %s", action.describe())
    else:
        logger.info("%s", action.describe())


def _reason(e: OSError) -> str:
    return e.strerror or str(e)
