"""Local git repository diff source.

Provides diff data using local git operations via GitOperationsService.
"""

from __future__ import annotations

from revdiff.domain.diff_stats import DiffStats
from revdiff.domain.name_status import NameStatus
from revdiff.services.git_operations import GitOperationsService

from .base import DiffSource


class LocalGitDiffSource(DiffSource):
    """Implementation backed by the git CLI in a local repository.

    Git failures (GitDiffError, GitRepositoryError) propagate unchanged.
    """

    def __init__(self, git_service: GitOperationsService):
        """Initialize with dependencies.

        Args:
            git_service: Service for git operations (injected)
        """
        self.git_service = git_service

    def fetch_full_diff(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> bytes:
        return self.git_service.get_diff_full(from_rev, to_rev, path)

    def fetch_stats(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> DiffStats:
        output = self.git_service.get_diff_numstat(from_rev, to_rev, path)
        return DiffStats.from_numstat(output)

    def fetch_name_status(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> NameStatus:
        output = self.git_service.get_diff_name_status(from_rev, to_rev, path)
        return NameStatus.from_output(output)

    def resolve_blob(self, content_id: str) -> bytes:
        """Resolve a blob with ``git cat-file``.

        Raises:
            GitObjectNotFoundError: If the object doesn't exist
        """
        return self.git_service.get_object_contents(content_id)
