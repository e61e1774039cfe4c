"""Diff data backends - local git, GitHub API and static text sources."""

from .base import DiffSource
from .factory import create_diff_source
from .github_source import GitHubApiError, GitHubDiffSource
from .local_source import LocalGitDiffSource
from .static_source import StaticDiffSource

__all__ = [
    "DiffSource",
    "create_diff_source",
    "GitHubApiError",
    "GitHubDiffSource",
    "LocalGitDiffSource",
    "StaticDiffSource",
]
