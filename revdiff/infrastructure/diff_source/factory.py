"""Factory for creating diff sources.

This module provides factory functions for creating the appropriate diff
source based on the source type (local git, GitHub API or static text).
"""

from __future__ import annotations

from revdiff.domain.diff_source_type import DiffSourceType
from revdiff.services.git_operations import GitOperationsService

from .base import DiffSource
from .github_source import GitHubDiffSource
from .local_source import LocalGitDiffSource
from .static_source import StaticDiffSource


def create_diff_source(
    source: DiffSourceType,
    local_repo_path: str | None = None,
    repo_owner: str | None = None,
    repo_name: str | None = None,
    github_token: str | None = None,
    diff_content: str | bytes | None = None,
) -> DiffSource:
    """Create a diff source based on source type.

    Args:
        source: LOCAL, GITHUB or STATIC
        local_repo_path: Path to local git repo (required for LOCAL)
        repo_owner: GitHub repo owner (required for GITHUB)
        repo_name: GitHub repo name (required for GITHUB)
        github_token: Optional GitHub API token
        diff_content: Raw diff text (required for STATIC)

    Returns:
        DiffSource implementation appropriate for the source type

    Raises:
        ValueError: If an argument required by the source type is missing

    Examples:
        >>> source = create_diff_source(DiffSourceType.LOCAL, local_repo_path=".")

        >>> source = create_diff_source(
        ...     DiffSourceType.GITHUB,
        ...     repo_owner="myorg",
        ...     repo_name="myrepo",
        ... )
    """
    if source == DiffSourceType.LOCAL:
        if local_repo_path is None:
            raise ValueError("local_repo_path is required for LOCAL source")
        return LocalGitDiffSource(GitOperationsService(local_repo_path))
    elif source == DiffSourceType.GITHUB:
        if not repo_owner or not repo_name:
            raise ValueError("repo_owner and repo_name are required for GITHUB source")
        return GitHubDiffSource(repo_owner, repo_name, token=github_token)
    elif source == DiffSourceType.STATIC:
        if diff_content is None:
            raise ValueError("diff_content is required for STATIC source")
        return StaticDiffSource(diff_content)
    else:
        raise ValueError(f"Unknown diff source: {source}")
