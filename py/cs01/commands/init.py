"""init command - Initialize or repair a repository."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Union

from ..files import write_tree
from ..layout import build_repo_tree
from ..types import (
    DEFAULT_BRANCH, DEFAULT_DIR_PERMS, Cs01Error, InitResult, NestedRepositoryError,
    WriteOptions,
)
from ..utils import locate, metadata_dir


logger = logging.getLogger(__name__)


def init_repository(target: Union[str, Path], bare: bool = False,
                    initial_branch: str = DEFAULT_BRANCH,
                    dry_run: bool = False) -> InitResult:
    """Initialize a repository at target, or repair the one already there.

    Existing files are never overwritten. If target sits inside another
    repository, NestedRepositoryError is raised before anything is written.
    """
    target = Path(target).resolve()

    existing = locate(target)
    if existing is not None and existing != target:
        raise NestedRepositoryError(existing)
    reinitialized = existing is not None
    if reinitialized:
        logger.info("found existing repository at %s, repairing", existing)

    tree = build_repo_tree(bare, initial_branch)
    options = WriteOptions(dir_perms=DEFAULT_DIR_PERMS, overwrite=False, dry_run=dry_run)
    actions = write_tree(tree, target, options)

    return InitResult(
        target=target,
        metadata_dir=metadata_dir(target, bare),
        bare=bare,
        reinitialized=reinitialized,
        actions=actions,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cs01 init', description='Create an empty CS01 repository or reinitialize an existing one')
    parser.add_argument('path', nargs='?', help='Directory to initialize (default: current directory)')
    parser.add_argument('--bare', action='store_true', help='Create a bare repository')
    parser.add_argument('--initial-branch', '-b', help='Name of the initial branch')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be created without writing')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every filesystem action')
    return parser


def run(args: list[str]) -> int:
    """Initialize a new cs01 repository."""
    opts = build_parser().parse_args(args)

    # Planned dry-run actions reach the user through the action log only
    if opts.verbose or opts.dry_run:
        logging.basicConfig(level=logging.INFO, format='%(message)s', stream=sys.stdout)

    # Command line, then environment, then default
    branch = opts.initial_branch or os.environ.get('CS01_INITIAL_BRANCH', DEFAULT_BRANCH)
    target = Path(opts.path) if opts.path else Path.cwd()

    try:
        result = init_repository(target, bare=opts.bare, initial_branch=branch, dry_run=opts.dry_run)
    except (Cs01Error, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        return 1

    if opts.dry_run:
        print(f"[dry-run] {result.message()}")
    else:
        print(result.message())
    return 0
