"""Commit message validation and formatting.

Turns loosely structured CommitDetails into a conventional-commit message:

    <type>(<scope>): <summary>

    <body wrapped at 72 columns>

    <footer_action>: <ticket>
"""

import logging
import os
import re
import textwrap

from commit_beautifier.config import DEFAULT_CONFIG, FormatterConfig
from commit_beautifier.models import CommitDetails

logger = logging.getLogger(__name__)

ELLIPSIS = "…"

_SCOPE_DISALLOWED = re.compile(r"[^A-Za-z0-9\-_./]")


class CommitValidationError(Exception):
    """Base exception for commit details that cannot be formatted."""

    kind = "ValidationError"


class MissingRequiredFieldError(CommitValidationError):
    """Raised when type or summary is missing."""

    kind = "MissingRequiredField"

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.fields)}. "
            "Type and summary are required."
        )


class InvalidTypeError(CommitValidationError):
    """Raised when the commit type is not in the allowed set."""

    kind = "InvalidType"

    def __init__(self, commit_type: str, allowed_types: tuple[str, ...]):
        self.commit_type = commit_type
        self.allowed_types = tuple(allowed_types)
        super().__init__(
            f"Invalid type '{commit_type}'. Allowed types: {', '.join(self.allowed_types)}"
        )


def sanitize_scope(scope: str | None) -> str:
    """Strip every character that is not allowed in a scope.

    Args:
        scope: The raw scope string.

    Returns:
        The cleaned scope, or an empty string meaning "no scope".
    """
    if not scope:
        return ""
    return _SCOPE_DISALLOWED.sub("", scope.strip())


def normalize_summary(summary: str | None) -> str:
    """Trim the summary and drop a single trailing period."""
    cleaned = (summary or "").strip()
    if cleaned.endswith("."):
        cleaned = cleaned[:-1]
    return cleaned


def truncate_summary(summary: str, max_length: int = 72) -> str:
    """Truncate an over-long summary to max_length characters.

    The result keeps the first max_length - 1 characters and ends with a
    single ellipsis character. Truncation is reported as a warning.

    Args:
        summary: The normalized summary.
        max_length: Maximum allowed length.

    Returns:
        The summary, shortened if necessary.
    """
    if len(summary) <= max_length:
        return summary
    logger.warning(
        "Summary longer than %d chars (%d), truncating.", max_length, len(summary)
    )
    return summary[: max_length - 1] + ELLIPSIS


def wrap_body(text: str, width: int = 72) -> str:
    """Greedy word wrap for the message body.

    Words are split on any whitespace and packed onto a line while it stays
    within width. A word longer than width gets a line of its own.

    Args:
        text: Body text.
        width: Maximum line width.

    Returns:
        Wrapped text joined with the platform line separator.
    """
    words = text.split()
    if not words:
        return ""
    lines = textwrap.wrap(
        " ".join(words),
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return os.linesep.join(lines)


def build_header(commit_type: str, scope: str, summary: str) -> str:
    """Build the header line, omitting the parentheses when scope is empty."""
    if scope:
        return f"{commit_type}({scope}): {summary}"
    return f"{commit_type}: {summary}"


def build_footer(ticket: str | None, footer_action: str) -> str:
    """Build the ticket footer line, or an empty string without a ticket."""
    ticket = (ticket or "").strip()
    if not ticket:
        return ""
    return f"{footer_action}: {ticket}"


def format_commit_message(
    details: CommitDetails,
    config: FormatterConfig = DEFAULT_CONFIG,
) -> str:
    """Validate commit details and render the final commit message.

    Args:
        details: The collected commit details.
        config: Allowed types and size limits.

    Returns:
        The formatted commit message.

    Raises:
        MissingRequiredFieldError: If type or summary is missing.
        InvalidTypeError: If the type is not in config.allowed_types.
    """
    missing = details.missing_required_fields()
    if missing:
        raise MissingRequiredFieldError(missing)

    commit_type = details.type.strip().lower()
    if commit_type not in config.allowed_types:
        raise InvalidTypeError(details.type.strip(), config.allowed_types)

    scope = sanitize_scope(details.scope)

    summary = normalize_summary(details.summary)
    if not summary:
        raise MissingRequiredFieldError(["summary"])
    summary = truncate_summary(summary, config.max_summary_length)

    parts = [build_header(commit_type, scope, summary)]

    if details.body and details.body.strip():
        parts.extend(["", wrap_body(details.body, config.wrap_width)])

    footer = build_footer(details.ticket, details.footer_action)
    if footer:
        parts.extend(["", footer])

    return os.linesep.join(parts)
