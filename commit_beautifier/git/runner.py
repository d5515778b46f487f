"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from commit_beautifier.git.exceptions import GitError

logger = logging.getLogger(__name__)


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running: git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def _run_git_attached(args: list[str]) -> None:
    """Run a git command with its output going straight to the terminal.

    Used where git or its hooks talk to the user while running.

    Args:
        args: List of arguments to pass to git.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running: git %s", " ".join(args))
    try:
        subprocess.run(["git"] + args, check=True)
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)} (exit status {e.returncode})")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_repo_root() -> Optional[Path]:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root, or None outside a work tree.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
    except GitError as e:
        logger.debug("Not in a git repository: %s", e)
        return None
    return Path(root) if root else None
