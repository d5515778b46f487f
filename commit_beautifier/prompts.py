"""Interactive prompts for collecting commit details.

Contains:
- Prompter: Protocol the workflow uses for user interaction
- TerminalPrompter: typer-based implementation for a real terminal
"""

from typing import Optional, Protocol

import click
import typer

from commit_beautifier.config import DEFAULT_CONFIG, FormatterConfig
from commit_beautifier.models import CommitDetails


class Prompter(Protocol):
    """User interaction needed by the commit workflow."""

    def prompt_for_details(self, defaults: Optional[CommitDetails] = None) -> CommitDetails:
        ...

    def confirm(self, message: str) -> bool:
        ...


def _optional(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


class TerminalPrompter:
    """Prompt for commit details on the terminal."""

    def __init__(self, config: FormatterConfig = DEFAULT_CONFIG):
        self.config = config

    def _show_type_menu(self) -> None:
        width = max(len(t) for t in self.config.allowed_types)
        typer.echo("Types of change:")
        for commit_type in self.config.allowed_types:
            description = self.config.describe_type(commit_type)
            if description:
                typer.echo(f"  {commit_type.ljust(width)} -> {description}")
            else:
                typer.echo(f"  {commit_type}")

    def prompt_type(self, default: Optional[str] = None) -> str:
        self._show_type_menu()
        return typer.prompt(
            "Select the type of change",
            default=default.strip().lower() if default else None,
            type=click.Choice(list(self.config.allowed_types), case_sensitive=False),
            show_choices=False,
        )

    def prompt_summary(self, default: Optional[str] = None) -> str:
        """Ask for a summary until it is between 1 and max_summary_length chars."""
        limit = self.config.max_summary_length
        while True:
            summary = typer.prompt(
                f"Enter a short summary (max {limit} chars)",
                default=default or None,
            ).strip()
            if 0 < len(summary) <= limit:
                return summary
            typer.echo(f"Summary must be 1-{limit} characters.", err=True)

    def _prompt_optional(self, text: str, default: Optional[str]) -> Optional[str]:
        answer = typer.prompt(text, default=default or "", show_default=bool(default))
        return _optional(answer)

    def prompt_for_details(self, defaults: Optional[CommitDetails] = None) -> CommitDetails:
        """Collect commit details interactively.

        Args:
            defaults: Values already known (e.g., from flags) used as prompt defaults.

        Returns:
            CommitDetails with the user's answers.
        """
        defaults = defaults or CommitDetails(footer_action=self.config.footer_action)

        commit_type = self.prompt_type(defaults.type)
        scope = self._prompt_optional("Enter a scope (optional)", defaults.scope)
        summary = self.prompt_summary(defaults.summary)
        body = self._prompt_optional("Enter a longer description (optional)", defaults.body)
        ticket = self._prompt_optional(
            "Enter a ticket ID (optional) - if missing, will attempt to detect "
            "from branch name (ABC-123)",
            defaults.ticket,
        )

        return CommitDetails(
            type=commit_type,
            scope=scope,
            summary=summary,
            body=body,
            ticket=ticket,
            footer_action=defaults.footer_action,
        )

    def confirm(self, message: str) -> bool:
        return typer.confirm(message, default=True)
