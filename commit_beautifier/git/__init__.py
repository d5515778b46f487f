"""Git integration for commit-beautifier.

This package provides:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, get_repo_root
- adapter: VersionControl, GitAdapter, has_staged_changes,
           get_current_branch, create_commit
"""

# Exceptions
from commit_beautifier.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from commit_beautifier.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Version-control operations
from commit_beautifier.git.adapter import (
    GitAdapter,
    VersionControl,
    create_commit,
    get_current_branch,
    has_staged_changes,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Adapter
    "GitAdapter",
    "VersionControl",
    "create_commit",
    "get_current_branch",
    "has_staged_changes",
]
