"""Formatter configuration for commit-beautifier.

Contains:
- ALLOWED_TYPES / TYPE_DESCRIPTIONS: Valid commit types and their meaning
- FormatterConfig: Immutable configuration injected into the formatter
- load_config: Read-only loader for .commit-beautifier/config.yaml
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml


class ConfigError(Exception):
    """Raised when the repository configuration file cannot be used."""

    pass


# Valid commit types (input is case-insensitive, output is lowercase)
ALLOWED_TYPES = (
    "feat",
    "fix",
    "refactor",
    "chore",
    "docs",
    "test",
    "style",
    "perf",
    "build",
    "ci",
    "hotfix",
)

TYPE_DESCRIPTIONS = {
    "feat": "A new feature",
    "fix": "A bug fix",
    "refactor": "Code refactor (no feature or fix)",
    "chore": "Build process or tooling",
    "docs": "Documentation changes",
    "test": "Adding or updating tests",
    "style": "Code style or formatting",
    "perf": "Performance improvements",
    "build": "Build system or external dependency changes",
    "ci": "CI/CD configuration changes",
    "hotfix": "Quick critical production fix",
}

MAX_SUMMARY_LENGTH = 72
WRAP_WIDTH = 72
TICKET_PATTERN = r"([A-Z]{2,}-\d+)"
DEFAULT_FOOTER_ACTION = "Refs"

CONFIG_DIR_NAME = ".commit-beautifier"
CONFIG_FILE_NAME = "config.yaml"


@dataclass(frozen=True)
class FormatterConfig:
    """Process-wide settings for validating and formatting commit messages."""

    allowed_types: tuple[str, ...] = ALLOWED_TYPES
    max_summary_length: int = MAX_SUMMARY_LENGTH
    wrap_width: int = WRAP_WIDTH
    ticket_pattern: str = TICKET_PATTERN
    footer_action: str = DEFAULT_FOOTER_ACTION
    type_descriptions: dict[str, str] = field(
        default_factory=lambda: dict(TYPE_DESCRIPTIONS), compare=False
    )

    def describe_type(self, commit_type: str) -> str:
        """Return the human description for a type, or an empty string."""
        return self.type_descriptions.get(commit_type, "")


DEFAULT_CONFIG = FormatterConfig()


def get_config_file(repo_root: Path) -> Path:
    """Get path to the repository config file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .commit-beautifier/config.yaml
    """
    return repo_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _width_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 2:
        raise ConfigError(f"'{key}' must be an integer greater than 1, got {value!r}")
    return value


def _non_empty_str(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string, got {value!r}")
    return value.strip()


def _ticket_pattern(value: Any) -> str:
    pattern = _non_empty_str(value, "ticket_pattern")
    try:
        re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"'ticket_pattern' is not a valid regular expression ({e}): {pattern!r}")
    return pattern


def _parse_types(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ConfigError("'types' must be a non-empty list of commit types")
    types = []
    for item in value:
        name = _non_empty_str(item, "types").lower()
        if name not in types:
            types.append(name)
    return tuple(types)


def config_from_dict(data: dict) -> FormatterConfig:
    """Build a FormatterConfig from a parsed configuration mapping.

    Keys that are absent keep their defaults; unknown keys are ignored.

    Args:
        data: Dictionary loaded from config.yaml.

    Returns:
        FormatterConfig instance.

    Raises:
        ConfigError: If a recognized key has an invalid value.
    """
    options = {}
    if "types" in data:
        options["allowed_types"] = _parse_types(data["types"])
    if "max_summary_length" in data:
        options["max_summary_length"] = _width_int(data["max_summary_length"], "max_summary_length")
    if "wrap_width" in data:
        options["wrap_width"] = _width_int(data["wrap_width"], "wrap_width")
    if "ticket_pattern" in data:
        options["ticket_pattern"] = _ticket_pattern(data["ticket_pattern"])
    if "footer_action" in data:
        options["footer_action"] = _non_empty_str(data["footer_action"], "footer_action")
    return FormatterConfig(**options)


def load_config(repo_root: Optional[Path] = None) -> FormatterConfig:
    """Load formatter configuration for a repository.

    The file is only ever read. Without a repository root, or when the
    file does not exist, the defaults are returned.

    Args:
        repo_root: The root directory of the git repository (optional).

    Returns:
        FormatterConfig instance.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    if repo_root is None:
        return DEFAULT_CONFIG

    config_file = get_config_file(repo_root)
    if not config_file.exists():
        return DEFAULT_CONFIG

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")

    return config_from_dict(data)
