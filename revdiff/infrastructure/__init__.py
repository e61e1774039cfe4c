"""Infrastructure components for revdiff.

This layer handles external system interactions:
- Local git via subprocess (through GitOperationsService)
- GitHub REST API via requests
- Reading raw diffs from stdin or files, rendering parsed output

Organized into:
- diff_source/ - Diff data backends (local git, GitHub, static text)
- diff_io.py - Diff input and output formatting
"""

from .diff_io import (
    format_diff_set_as_json,
    format_diff_set_as_text,
    format_stats_as_text,
    read_diff,
    read_diff_from_file,
    read_diff_from_stdin,
)
from .diff_source import (
    DiffSource,
    GitHubApiError,
    GitHubDiffSource,
    LocalGitDiffSource,
    StaticDiffSource,
    create_diff_source,
)

__all__ = [
    # Diff sources
    "create_diff_source",
    "DiffSource",
    "GitHubApiError",
    "GitHubDiffSource",
    "LocalGitDiffSource",
    "StaticDiffSource",
    # Diff input/output
    "format_diff_set_as_json",
    "format_diff_set_as_text",
    "format_stats_as_text",
    "read_diff",
    "read_diff_from_file",
    "read_diff_from_stdin",
]
