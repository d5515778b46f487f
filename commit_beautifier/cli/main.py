"""Main CLI command for building and applying commit messages."""

from typing import Optional

import typer

from commit_beautifier import __version__
from commit_beautifier.config import ConfigError, FormatterConfig, load_config
from commit_beautifier.git import GitAdapter, get_repo_root
from commit_beautifier.log import setup_logging
from commit_beautifier.prompts import TerminalPrompter
from commit_beautifier.cli.workflow import CommitOptions, run_workflow

BANNER = "commit-beautifier - structured commit helper"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commit-beautifier {__version__}")
        raise typer.Exit()


def _load_repo_config() -> FormatterConfig:
    """Load the repository config, falling back to defaults outside a repo."""
    return load_config(get_repo_root())


def main_command(
    commit_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="Commit type (feat, fix, refactor, chore, docs, test, style, perf, build, ci, hotfix)",
    ),
    summary: Optional[str] = typer.Option(
        None,
        "--summary",
        help="Short summary (1-72 chars)",
    ),
    body: Optional[str] = typer.Option(
        None,
        "--body",
        help="Longer description (optional)",
    ),
    ticket: Optional[str] = typer.Option(
        None,
        "--ticket",
        help="Ticket ID to append in the footer (e.g. ABC-123); skips branch detection",
    ),
    scope: Optional[str] = typer.Option(
        None,
        "--scope",
        help="Commit scope (optional)",
    ),
    footer_action: Optional[str] = typer.Option(
        None,
        "--footer-action",
        help=(
            "Label placed before the ticket in the footer (default: Refs). "
            "Not a commit detail on its own: without other detail flags the prompts still run"
        ),
    ),
    apply: bool = typer.Option(
        False,
        "--apply",
        help="Create the commit after the preview (requires staged changes)",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Auto-confirm (non-interactive); fail instead of prompting for missing fields",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Preview the message only, never commit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output, including git invocations",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Interactive commit CLI with conventional formatting and validation."""
    setup_logging(verbose)

    typer.echo(BANNER, err=True)
    typer.echo("", err=True)

    try:
        config = _load_repo_config()
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    options = CommitOptions(
        type=commit_type,
        summary=summary,
        body=body,
        ticket=ticket,
        scope=scope,
        footer_action=footer_action,
        apply=apply,
        yes=yes,
        dry_run=dry_run,
    )

    run_workflow(options, TerminalPrompter(config), GitAdapter(), config)
