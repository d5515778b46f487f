"""Commit workflow: resolve details, detect ticket, format, preview, apply."""

from dataclasses import dataclass
from typing import Optional

import typer

from commit_beautifier.config import DEFAULT_CONFIG, FormatterConfig
from commit_beautifier.formatters import CommitValidationError, format_commit_message
from commit_beautifier.git import GitError, NoStagedChangesError, VersionControl
from commit_beautifier.inference import extract_ticket_from_branch
from commit_beautifier.models import CommitDetails
from commit_beautifier.prompts import Prompter

PREVIEW_RULE = "-" * 42


@dataclass
class CommitOptions:
    """Options collected from the command line."""

    type: Optional[str] = None
    summary: Optional[str] = None
    body: Optional[str] = None
    ticket: Optional[str] = None
    scope: Optional[str] = None
    footer_action: Optional[str] = None
    apply: bool = False
    yes: bool = False
    dry_run: bool = False

    def has_detail_flags(self) -> bool:
        """Check whether any commit detail was supplied as a flag."""
        return any((self.type, self.summary, self.body, self.ticket, self.scope))


def resolve_details(
    options: CommitOptions,
    prompter: Prompter,
    config: FormatterConfig = DEFAULT_CONFIG,
) -> CommitDetails:
    """Build CommitDetails from flags, prompting for whatever is missing.

    Raises:
        typer.Exit: If required fields are missing and --yes forbids prompting.
    """
    footer_action = options.footer_action or config.footer_action

    if not options.has_detail_flags():
        return prompter.prompt_for_details(CommitDetails(footer_action=footer_action))

    details = CommitDetails(
        type=options.type,
        scope=options.scope,
        summary=options.summary,
        body=options.body,
        ticket=options.ticket,
        footer_action=footer_action,
    )

    missing = details.missing_required_fields()
    if not missing:
        return details

    if options.yes:
        typer.echo(
            f"Error: missing required fields ({', '.join(missing)}); "
            "type and summary are required when using non-interactive --yes mode.",
            err=True,
        )
        raise typer.Exit(1)

    typer.echo(
        "Some required fields are missing from flags - falling back to interactive prompts.",
        err=True,
    )
    return prompter.prompt_for_details(details)


def detect_ticket(
    details: CommitDetails,
    vcs: VersionControl,
    config: FormatterConfig = DEFAULT_CONFIG,
) -> CommitDetails:
    """Fill in the ticket from the current branch name when none was given."""
    if details.has_ticket():
        return details

    ticket = extract_ticket_from_branch(vcs.get_current_branch(), config.ticket_pattern)
    if not ticket:
        return details

    typer.echo(f"Detected ticket from branch: {ticket}", err=True)
    return details.model_copy(update={"ticket": ticket})


def preview_message(message: str) -> None:
    typer.echo("")
    typer.echo("Commit message (preview):")
    typer.echo("")
    typer.echo(message)
    typer.echo("")
    typer.echo(PREVIEW_RULE)
    typer.echo("")


def apply_commit(
    message: str,
    options: CommitOptions,
    prompter: Prompter,
    vcs: VersionControl,
) -> None:
    """Create the commit after checking for staged changes and confirming.

    Raises:
        typer.Exit: On missing staged changes, cancellation, or commit failure.
    """
    if not vcs.has_staged_changes():
        typer.echo(str(NoStagedChangesError()), err=True)
        raise typer.Exit(1)

    if not options.yes and not prompter.confirm("Commit using above message?"):
        typer.echo("Commit cancelled.", err=True)
        raise typer.Exit(0)

    try:
        vcs.create_commit(message)
    except GitError as e:
        typer.echo(f"Commit failed: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Committed successfully.", err=True)


def run_workflow(
    options: CommitOptions,
    prompter: Prompter,
    vcs: VersionControl,
    config: FormatterConfig = DEFAULT_CONFIG,
) -> None:
    """Run the full commit workflow.

    Args:
        options: Command-line options.
        prompter: Source of interactive answers and confirmations.
        vcs: Version-control operations.
        config: Formatter configuration.

    Raises:
        typer.Exit: With code 1 on validation or commit errors, 0 on early success.
    """
    details = resolve_details(options, prompter, config)
    details = detect_ticket(details, vcs, config)

    try:
        message = format_commit_message(details, config)
    except CommitValidationError as e:
        typer.echo(f"Validation failed: {e}", err=True)
        typer.echo(f"Allowed types: {', '.join(config.allowed_types)}", err=True)
        raise typer.Exit(1)

    preview_message(message)

    if options.dry_run:
        raise typer.Exit(0)

    if options.apply:
        apply_commit(message, options, prompter, vcs)
    else:
        typer.echo("Run with --apply to commit, or --dry-run to preview only.", err=True)
