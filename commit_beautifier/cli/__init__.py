"""CLI entry point for commit-beautifier."""

import typer

from commit_beautifier.cli.main import main_command

app = typer.Typer(
    name="commit-beautifier",
    help="Interactive commit CLI with conventional formatting and validation",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "main_command",
]
