"""Canonical in-memory layout of a cs01 repository."""

from .config import serialize
from .types import METADATA_DIR, Directory, File


DESCRIPTION = "Unnamed repository; edit this file 'description' to name the repository.\n"

INFO_EXCLUDE = (
    "# cs01 ls-files --others --exclude-from=.cs01-root/info/exclude\n"
    "# Lines that start with '#' are comments.\n"
    "# For a project mostly in C, the following would be a good set of\n"
    "# exclude patterns (uncomment them if you want to use them):\n"
    "# *.[oa]\n"
    "# *~\n"
)

SAMPLE_HOOKS = [
    'applypatch-msg',
    'commit-msg',
    'fsmonitor-watchman',
    'post-update',
    'pre-applypatch',
    'pre-commit',
    'pre-merge-commit',
    'prepare-commit-msg',
    'pre-push',
    'pre-rebase',
    'pre-receive',
    'push-to-checkout',
    'sendemail-validate',
    'update',
]


def validate_branch_name(name: str) -> None:
    """Reject branch names that cannot be used as a single ref file."""
    if not name or not name.strip():
        raise ValueError("branch name must not be empty")
    if '/' in name or '\\' in name or '\x00' in name or name in ('.', '..'):
        raise ValueError(f"invalid branch name: {name!r}")


def default_config(bare: bool) -> dict:
    """Config written on init."""
    return {
        'core': {
            '': {
                'bare': bare,
                'repositoryformatversion': 0,
                'filemode': True,
                'logallrefupdates': True,
            }
        }
    }


def build_repo_tree(bare: bool, initial_branch: str) -> Directory:
    """Build the full repository layout.

    Bare repositories get the metadata entries at the top level; standard
    ones get them nested under the metadata folder. The result is the same
    on every call, which is what lets re-init repair a damaged repository.
    """
    validate_branch_name(initial_branch)
    branch_ref = f"ref: refs/heads/{initial_branch}"

    hooks = {f"{hook}.sample": File('') for hook in SAMPLE_HOOKS}

    metadata = Directory({
        'HEAD': File(branch_ref + '\n'),
        'config': File(serialize(default_config(bare))),
        'description': File(DESCRIPTION),
        'hooks': Directory(hooks),
        'info': Directory({'exclude': File(INFO_EXCLUDE)}),
        'objects': Directory({
            'info': Directory(),
            'pack': Directory(),
        }),
        'refs': Directory({
            # Unborn branch points at itself until the first commit
            'heads': Directory({initial_branch: File(branch_ref)}),
            'tags': Directory(),
        }),
    })

    if bare:
        return metadata
    return Directory({METADATA_DIR: metadata})
