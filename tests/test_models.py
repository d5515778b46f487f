"""Tests for commit_beautifier.models module."""

from commit_beautifier.models import CommitDetails


class TestCommitDetails:
    """Tests for CommitDetails Pydantic model."""

    def test_defaults(self):
        """Test that every field except footer_action is optional."""
        details = CommitDetails()
        assert details.type is None
        assert details.summary is None
        assert details.footer_action == "Refs"

    def test_blank_footer_action_defaults(self):
        """Test that a blank or None footer_action falls back to Refs."""
        assert CommitDetails(footer_action="  ").footer_action == "Refs"
        assert CommitDetails(footer_action=None).footer_action == "Refs"

    def test_footer_action_stripped(self):
        assert CommitDetails(footer_action=" Closes ").footer_action == "Closes"

    def test_missing_required_fields(self):
        """Test reporting of missing type and summary."""
        assert CommitDetails().missing_required_fields() == ["type", "summary"]
        assert CommitDetails(type="fix").missing_required_fields() == ["summary"]
        assert CommitDetails(type=" ", summary="x").missing_required_fields() == ["type"]
        assert CommitDetails(type="fix", summary="x").missing_required_fields() == []

    def test_has_ticket(self):
        assert CommitDetails(ticket="ABC-1").has_ticket()
        assert not CommitDetails(ticket="   ").has_ticket()
        assert not CommitDetails().has_ticket()
