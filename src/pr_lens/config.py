"""Configuration loading and validation for pr-lens."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_FILE = "pr-lens.yaml"
OUTPUT_FORMATS = ("table", "json")


@dataclass
class GitHubSettings:
    """GitHub access configuration."""

    token: str
    base_url: str | None = None  # For GitHub Enterprise
    diff_timeout_seconds: int = 30


@dataclass
class OutputSettings:
    """Output configuration."""

    format: str = "table"


@dataclass
class Config:
    """Complete application configuration."""

    github: GitHubSettings
    output: OutputSettings = field(default_factory=OutputSettings)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Path to config file (default: pr-lens.yaml)

    Returns:
        Loaded configuration
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)

    raw_config: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw_config = yaml.safe_load(f) or {}

    raw_config = _expand_env_vars(raw_config)

    return _parse_config(raw_config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in config."""
    if isinstance(obj, str):
        if obj.startswith("${") and obj.endswith("}"):
            env_var = obj[2:-1]
            return os.environ.get(env_var, "")
        return obj
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


def _parse_config(raw: dict[str, Any]) -> Config:
    """Parse raw config dict into Config object."""
    github_raw = raw.get("github") or {}
    github = GitHubSettings(
        token=github_raw.get("token") or os.environ.get("GITHUB_TOKEN", ""),
        base_url=github_raw.get("base_url") or None,
        diff_timeout_seconds=github_raw.get("diff_timeout_seconds", 30),
    )

    out_raw = raw.get("output") or {}
    output = OutputSettings(
        format=out_raw.get("format", "table"),
    )

    return Config(github=github, output=output)


def validate_config(config: Config, require_token: bool = True) -> list[str]:
    """Validate configuration and return list of errors.

    Args:
        config: Configuration to validate
        require_token: Whether a GitHub token is needed (not for offline runs)

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if require_token and not config.github.token:
        errors.append("Missing GitHub token (set GITHUB_TOKEN or github.token)")

    if not isinstance(config.github.diff_timeout_seconds, int) or config.github.diff_timeout_seconds <= 0:
        errors.append(
            f"github.diff_timeout_seconds must be a positive integer, "
            f"got {config.github.diff_timeout_seconds!r}"
        )

    if config.output.format not in OUTPUT_FORMATS:
        errors.append(
            f"Unknown output format '{config.output.format}' (expected one of: {', '.join(OUTPUT_FORMATS)})"
        )

    return errors
