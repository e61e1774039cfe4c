"""Static diff source serving canned diff text.

Used when the diff is already at hand (a file or stdin) rather than
produced by a repository. Revisions and path filters are ignored.
"""

from __future__ import annotations

from revdiff.domain.diff_stats import DiffStats
from revdiff.domain.file_change import BlobNotFoundError
from revdiff.domain.name_status import NameStatus

from .base import DiffSource


class StaticDiffSource(DiffSource):
    """Implementation returning literal diff data supplied up front."""

    def __init__(
        self,
        diff_content: str | bytes,
        stats: DiffStats | None = None,
        name_status: NameStatus | None = None,
        blobs: dict[str, bytes] | None = None,
    ):
        """Initialize with canned data.

        Args:
            diff_content: Raw unified diff text or bytes
            stats: Stats summary to report (default: all zero)
            name_status: Name/status summary to report (default: empty)
            blobs: Blob contents keyed by content id
        """
        self.diff_content = diff_content
        self.stats = stats if stats is not None else DiffStats()
        self.name_status = name_status if name_status is not None else NameStatus()
        self.blobs = dict(blobs or {})

    def fetch_full_diff(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> str | bytes:
        return self.diff_content

    def fetch_stats(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> DiffStats:
        return self.stats

    def fetch_name_status(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> NameStatus:
        return self.name_status

    def resolve_blob(self, content_id: str) -> bytes:
        try:
            return self.blobs[content_id]
        except KeyError:
            raise BlobNotFoundError(f"Blob {content_id} not found") from None
