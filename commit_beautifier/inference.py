"""Inference utilities for commit-beautifier.

Contains functions for:
- Extracting ticket keys from branch names
"""

import re
from typing import Optional

from commit_beautifier.config import TICKET_PATTERN


def extract_ticket_from_branch(branch: Optional[str], pattern: str = TICKET_PATTERN) -> Optional[str]:
    """Extract ticket key from branch name.

    Args:
        branch: The branch name.
        pattern: Regex pattern for ticket extraction.

    Returns:
        The extracted ticket key or None.
    """
    if not branch:
        return None
    match = re.search(pattern, branch)
    if match:
        return match.group(1) if match.groups() else match.group(0)
    return None
