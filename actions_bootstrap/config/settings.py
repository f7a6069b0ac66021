"""
Configuration system using Pydantic for type-safe settings management.

All fields have working defaults, so the tool runs without any configuration.
Each field can be overridden with an ``ACTIONS_BOOTSTRAP_`` environment
variable, e.g. ``ACTIONS_BOOTSTRAP_VARS_FILE=group_vars/ci.yml``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from actions_bootstrap.exceptions import ConfigurationError

DEFAULT_VARS_FILE = Path("inventory/group_vars/cicd_servers/github_secrets.yml")
DEFAULT_DOCS_FILE = Path("docs/GITHUB-ACTIONS-SETUP.md")


class BootstrapSettings(BaseSettings):
    """Settings for a single onboarding run."""

    model_config = SettingsConfigDict(
        env_prefix="ACTIONS_BOOTSTRAP_",
        case_sensitive=False,
    )

    required_tools: list[str] = Field(
        default_factory=lambda: ["curl", "jq", "gh"],
        description="External tools that must be on PATH, checked in order",
    )
    remote_name: str = Field(default="origin", description="Git remote used to detect the repository")
    gh_executable: str = Field(default="gh", description="GitHub CLI executable")
    command_timeout: float = Field(default=60.0, gt=0, description="Timeout in seconds for each gh call")
    vars_file: Path = Field(default=DEFAULT_VARS_FILE, description="Ansible vars file, relative to the repo")
    docs_file: Path = Field(default=DEFAULT_DOCS_FILE, description="Setup guide, relative to the repo")

    @field_validator("required_tools")
    @classmethod
    def validate_tools(cls, v: list[str]) -> list[str]:
        """Strip names and drop duplicates while keeping the check order."""
        seen: list[str] = []
        for name in v:
            name = name.strip()
            if not name:
                raise ValueError("Tool names must not be empty")
            if name not in seen:
                seen.append(name)
        return seen

    @field_validator("vars_file", "docs_file")
    @classmethod
    def validate_relative(cls, v: Path) -> Path:
        if v.is_absolute():
            raise ValueError(f"Artifact paths must be relative to the repository: {v}")
        return v

    def vars_path(self, repo_path: Path) -> Path:
        return repo_path / self.vars_file

    def docs_path(self, repo_path: Path) -> Path:
        return repo_path / self.docs_file

    @classmethod
    def load(cls) -> BootstrapSettings:
        """Load settings from the environment.

        Raises:
            ConfigurationError: If an override has an invalid value
        """
        try:
            return cls()
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings: {e}",
                hint="Check ACTIONS_BOOTSTRAP_* environment variables",
            ) from e
