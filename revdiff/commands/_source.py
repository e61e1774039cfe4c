"""Shared helper for building a Diff from resolved settings."""

from __future__ import annotations

from revdiff.domain.settings import Settings
from revdiff.infrastructure.diff_source.factory import create_diff_source
from revdiff.services.diff import Diff


def build_diff(
    settings: Settings,
    from_rev: str | None,
    to_rev: str | None,
    path: str | None = None,
) -> Diff:
    """Create the configured DiffSource and wrap it in a Diff request.

    Raises:
        ValueError: If the settings lack what the source type needs
    """
    source = create_diff_source(
        settings.source,
        local_repo_path=settings.repo_path,
        repo_owner=settings.repo_owner,
        repo_name=settings.repo_name,
        github_token=settings.github_token(),
    )
    return Diff(source, from_rev, to_rev, path=path, encoding=settings.encoding)
