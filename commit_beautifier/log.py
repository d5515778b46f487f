"""Logging setup for commit-beautifier.

Log records from the package are echoed to stderr through typer, the same
channel the CLI uses for its own diagnostics.
"""

import logging

import typer

PACKAGE_LOGGER = "commit_beautifier"


class TyperEchoHandler(logging.Handler):
    """Logging handler that writes records with typer.echo(err=True)."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


class _LevelPrefixFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return f"Error: {message}"
        if record.levelno >= logging.WARNING:
            return f"Warning: {message}"
        if record.levelno <= logging.DEBUG:
            return f"[debug] {message}"
        return message


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger.

    Args:
        verbose: Emit DEBUG records (git invocations and the like).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, TyperEchoHandler):
            logger.removeHandler(handler)

    handler = TyperEchoHandler()
    handler.setFormatter(_LevelPrefixFormatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
