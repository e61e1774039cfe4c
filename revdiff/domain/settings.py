"""Domain model for revdiff settings.

Settings are loaded from an optional YAML file (``.revdiff.yml``) and then
overridden by explicit command-line flags.

Parse-once pattern: YAML is parsed into a typed Settings model at the
boundary using the from_file() factory method.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from revdiff.domain.diff_source_type import DiffSourceType

SETTINGS_FILENAME = ".revdiff.yml"
DEFAULT_TOKEN_ENV = "GITHUB_TOKEN"


class SettingsError(ValueError):
    """Raised when a settings file is unreadable or has invalid values."""

    pass


# ============================================================
# Domain Models
# ============================================================


@dataclass
class Settings:
    """Resolved configuration for building a Diff.

    Attributes:
        source: Which backend supplies diff data
        repo_path: Local repository path (LOCAL source)
        repo: GitHub repository in owner/name form (GITHUB source)
        encoding: Declared encoding of raw diff bytes
        github_token_env: Environment variable holding the GitHub token
    """

    source: DiffSourceType = DiffSourceType.LOCAL
    repo_path: str = "."
    repo: str | None = None
    encoding: str = "utf-8"
    github_token_env: str = DEFAULT_TOKEN_ENV

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict | None) -> Settings:
        """Parse settings from a YAML mapping.

        Args:
            data: Raw dictionary from YAML, or None for an empty file

        Returns:
            Typed Settings instance

        Raises:
            SettingsError: If a value has the wrong type or is unknown
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise SettingsError("Settings file must contain a mapping at the top level")

        try:
            source = DiffSourceType.from_string(str(data.get("source", "local")))
        except ValueError as e:
            raise SettingsError(str(e)) from e

        repo = data.get("repo")
        if repo is not None and "/" not in str(repo):
            raise SettingsError(f"Invalid repo: {repo}. Expected owner/name")

        return cls(
            source=source,
            repo_path=str(data.get("repo_path", ".")),
            repo=str(repo) if repo is not None else None,
            encoding=str(data.get("encoding", "utf-8")),
            github_token_env=str(data.get("github_token_env", DEFAULT_TOKEN_ENV)),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> Settings:
        """Load settings from a YAML file.

        Args:
            path: Path to the settings file

        Returns:
            Typed Settings instance

        Raises:
            SettingsError: If the file cannot be read or parsed
        """
        try:
            content = Path(path).read_text()
        except OSError as e:
            raise SettingsError(f"Cannot read settings file {path}: {e}") from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in {path}: {e}") from e

        return cls.from_dict(data)

    @classmethod
    def load(cls, config_path: str | None = None, repo_path: str = ".") -> Settings:
        """Load settings from an explicit file or the repo's default file.

        Args:
            config_path: Explicit settings file; must exist when given
            repo_path: Directory searched for .revdiff.yml otherwise

        Returns:
            Settings from the file, or defaults when no file is found
        """
        if config_path is not None:
            return cls.from_file(config_path)

        default_path = Path(repo_path) / SETTINGS_FILENAME
        if not default_path.is_file():
            return cls(repo_path=repo_path)

        settings = cls.from_file(default_path)
        # Relative repo_path values in the file are relative to the file itself
        return replace(settings, repo_path=str(Path(repo_path) / settings.repo_path))

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def with_overrides(self, **overrides) -> Settings:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @property
    def repo_owner(self) -> str | None:
        return self.repo.split("/", 1)[0] if self.repo else None

    @property
    def repo_name(self) -> str | None:
        return self.repo.split("/", 1)[1] if self.repo else None

    def github_token(self) -> str | None:
        """Read the GitHub token from the configured environment variable."""
        return os.environ.get(self.github_token_env) or None
