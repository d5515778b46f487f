"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NoStagedChangesError: Raised when there are no staged changes
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoStagedChangesError(GitError):
    """Raised when a commit is requested but nothing is staged."""

    def __init__(self, message: str = "No staged changes found. Please `git add` changes before committing."):
        super().__init__(message)
