"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from typing import Optional

import pytest

from commit_beautifier.models import CommitDetails


class FakeVersionControl:
    """In-memory VersionControl that records commits."""

    def __init__(self, staged: bool = True, branch: Optional[str] = "main", commit_error=None):
        self.staged = staged
        self.branch = branch
        self.commit_error = commit_error
        self.commits: list[str] = []
        self.branch_queries = 0

    def has_staged_changes(self) -> bool:
        return self.staged

    def get_current_branch(self) -> Optional[str]:
        self.branch_queries += 1
        return self.branch

    def create_commit(self, message: str) -> None:
        if self.commit_error is not None:
            raise self.commit_error
        self.commits.append(message)


class ScriptedPrompter:
    """Prompter that returns canned answers and records what it was asked."""

    def __init__(self, details: Optional[CommitDetails] = None, confirm_answer: bool = True):
        self.details = details
        self.confirm_answer = confirm_answer
        self.prompt_calls: list[Optional[CommitDetails]] = []
        self.confirm_calls: list[str] = []

    def prompt_for_details(self, defaults: Optional[CommitDetails] = None) -> CommitDetails:
        self.prompt_calls.append(defaults)
        if self.details is None:
            raise AssertionError("prompt_for_details was not expected")
        return self.details

    def confirm(self, message: str) -> bool:
        self.confirm_calls.append(message)
        return self.confirm_answer


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def fake_vcs():
    """Fake version control with staged changes on branch 'main'."""
    return FakeVersionControl()


@pytest.fixture
def scripted_prompter():
    """Prompter answering with a valid feat commit."""
    return ScriptedPrompter(CommitDetails(type="feat", summary="add login page"))


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
