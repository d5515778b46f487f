"""Interactive conventional-commit message helper."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commit-beautifier")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
