"""Abstract backend contract for diff data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from revdiff.domain.diff_stats import DiffStats
from revdiff.domain.name_status import NameStatus


class DiffSource(ABC):
    """Abstract base class for diff sources.

    Supplies raw diff text, stats and name/status summaries for a revision
    range, and resolves content ids into blob bytes. Either revision may be
    None, meaning the backend's working tree / index default.
    """

    @abstractmethod
    def fetch_full_diff(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> str | bytes:
        """Fetch the complete unified diff for a revision range.

        Args:
            from_rev: Starting revision, or None
            to_rev: Ending revision, or None
            path: Optional path filter

        Returns:
            Raw unified diff text. Bytes are returned undecoded so the
            parser can normalize their encoding.
        """
        pass

    @abstractmethod
    def fetch_stats(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> DiffStats:
        """Fetch the numeric stats summary for a revision range."""
        pass

    @abstractmethod
    def fetch_name_status(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> NameStatus:
        """Fetch the name/status summary for a revision range."""
        pass

    @abstractmethod
    def resolve_blob(self, content_id: str) -> bytes:
        """Resolve a content id into the stored blob bytes.

        Args:
            content_id: Content id from an index line; never the null id

        Returns:
            Blob content

        Raises:
            BlobNotFoundError: If the id does not exist in the backend
        """
        pass
