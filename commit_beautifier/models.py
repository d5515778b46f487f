"""Data models for commit-beautifier.

Contains:
- CommitDetails: Pydantic model for the commit metadata collected per run
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from commit_beautifier.config import DEFAULT_FOOTER_ACTION

REQUIRED_FIELDS = ("type", "summary")


class CommitDetails(BaseModel):
    """Commit metadata gathered from flags or interactive prompts.

    Fields may be missing while details are being collected; the formatter
    enforces that type and summary are present.

    Attributes:
        type: Commit type (feat, fix, docs, etc.).
        scope: Optional scope of the change (api, auth, core, etc.).
        summary: Short summary for the header line.
        body: Optional longer description.
        ticket: Optional issue-tracker reference (e.g., ABC-123).
        footer_action: Label placed before the ticket in the footer.
    """

    type: Optional[str] = None
    scope: Optional[str] = None
    summary: Optional[str] = None
    body: Optional[str] = None
    ticket: Optional[str] = None
    footer_action: str = DEFAULT_FOOTER_ACTION

    @field_validator("footer_action", mode="before")
    @classmethod
    def default_footer_action(cls, v):
        """Fall back to the default label when none is given."""
        if v is None or not str(v).strip():
            return DEFAULT_FOOTER_ACTION
        return str(v).strip()

    def missing_required_fields(self) -> list[str]:
        """Return the names of required fields that are absent or blank."""
        missing = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or not value.strip():
                missing.append(name)
        return missing

    def has_ticket(self) -> bool:
        """Check whether a non-blank ticket is set."""
        return bool(self.ticket and self.ticket.strip())
