"""Version-control operations used by the commit workflow.

Contains:
- VersionControl: Protocol with the three operations the workflow needs
- has_staged_changes: Check for a work tree with staged changes
- get_current_branch: Abbreviated current branch name, or None
- create_commit: Commit using a message written to a temporary file
- GitAdapter: VersionControl implementation backed by the git CLI
"""

import logging
import os
import tempfile
from typing import Optional, Protocol

from commit_beautifier.git.exceptions import GitError
from commit_beautifier.git.runner import _run_git_attached, _run_git_command

logger = logging.getLogger(__name__)

TEMP_FILE_PREFIX = "commit-beautifier-msg-"


class VersionControl(Protocol):
    """Operations the commit workflow performs against version control."""

    def has_staged_changes(self) -> bool:
        ...

    def get_current_branch(self) -> Optional[str]:
        ...

    def create_commit(self, message: str) -> None:
        ...


def has_staged_changes() -> bool:
    """Check whether the current directory is a work tree with staged changes.

    Any git failure (not a repository, git missing) counts as "nothing staged".

    Returns:
        True if at least one file is staged.
    """
    try:
        if _run_git_command(["rev-parse", "--is-inside-work-tree"]) != "true":
            return False
        staged = _run_git_command(["diff", "--cached", "--name-only"])
    except GitError as e:
        logger.debug("Staged changes check failed: %s", e)
        return False
    return bool(staged)


def get_current_branch() -> Optional[str]:
    """Get the abbreviated name of the current branch.

    Returns:
        The branch name, or None if git cannot report one.
    """
    try:
        branch = _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"])
    except GitError as e:
        logger.debug("Branch lookup failed: %s", e)
        return None
    return branch or None


def _discard_temp_file(tmp) -> None:
    """Close and delete a temporary file, logging instead of raising."""
    try:
        tmp.close()
    except (OSError, ValueError) as e:
        logger.debug("Could not close temp file %s: %s", tmp.name, e)
    try:
        os.unlink(tmp.name)
    except OSError as e:
        logger.debug("Could not delete temp file %s: %s", tmp.name, e)


def create_commit(message: str) -> None:
    """Create a commit from the given message.

    The message goes through a uniquely named temporary file passed to
    `git commit -F`, so no shell quoting or argument length limits apply.
    git runs attached to the terminal so hook output appears as it happens.
    The file is removed on every path, including a failed write.

    Args:
        message: The full commit message.

    Raises:
        GitError: If the commit fails.
    """
    tmp = tempfile.NamedTemporaryFile(
        mode="w",
        prefix=TEMP_FILE_PREFIX,
        suffix=".txt",
        delete=False,
        encoding="utf-8",
    )
    try:
        tmp.write(message)
        tmp.close()
        _run_git_attached(["commit", "-F", tmp.name])
    finally:
        _discard_temp_file(tmp)


class GitAdapter:
    """VersionControl backed by the git command line."""

    def has_staged_changes(self) -> bool:
        return has_staged_changes()

    def get_current_branch(self) -> Optional[str]:
        return get_current_branch()

    def create_commit(self, message: str) -> None:
        create_commit(message)
