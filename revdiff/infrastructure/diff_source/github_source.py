"""GitHub REST API diff source.

Provides diff data using the GitHub compare and git blob endpoints.
"""

from __future__ import annotations

import re

import requests

from revdiff.domain.diff_stats import DiffStats
from revdiff.domain.file_change import BlobNotFoundError
from revdiff.domain.name_status import NameStatus

from .base import DiffSource

GITHUB_API_URL = "https://api.github.com"

_FULL_SHA_PATTERN = re.compile(r"^[0-9a-f]{40}$")


class GitHubApiError(Exception):
    """Raised when a GitHub API request fails."""

    pass


class GitHubDiffSource(DiffSource):
    """Implementation backed by the GitHub REST API.

    GitHub has no working tree, so both revisions are required, and the
    compare endpoint has no path filter. Index lines in GitHub diffs carry
    abbreviated ids; they are expanded against the blob shas listed by the
    compare endpoint (destination side) and, failing that, against the
    from revision's tree (source side) before the blob endpoint is called.
    """

    def __init__(
        self,
        repo_owner: str,
        repo_name: str,
        token: str | None = None,
        session: requests.Session | None = None,
        api_url: str = GITHUB_API_URL,
    ):
        """Initialize with repository coordinates.

        Args:
            repo_owner: GitHub repository owner
            repo_name: GitHub repository name
            token: API token; anonymous access when None
            session: HTTP session (injected for testing)
            api_url: API base URL (GitHub Enterprise support)
        """
        self.repo_owner = repo_owner
        self.repo_name = repo_name
        self.session = session or requests.Session()
        self.api_url = api_url.rstrip("/")
        self.headers = {"Accept": "application/vnd.github.v3+json"}
        if token:
            self.headers["Authorization"] = f"token {token}"
        self._compare_files: dict[tuple[str | None, str | None], list[dict]] = {}
        self._known_blob_ids: set[str] = set()
        self._loaded_trees: set[str] = set()
        self._last_range: tuple[str | None, str | None] | None = None

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def fetch_full_diff(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> bytes:
        """Fetch the compare diff as raw bytes.

        Raises:
            ValueError: If a revision is missing or a path filter is given
            GitHubApiError: If the request fails
        """
        url = self._compare_url(from_rev, to_rev, path)
        response = self._get(url, accept="application/vnd.github.v3.diff")
        self._last_range = (from_rev, to_rev)
        return response.content

    def fetch_stats(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> DiffStats:
        return DiffStats.from_github_files(self._get_compare_files(from_rev, to_rev, path))

    def fetch_name_status(
        self,
        from_rev: str | None,
        to_rev: str | None,
        path: str | None = None,
    ) -> NameStatus:
        return NameStatus.from_github_files(self._get_compare_files(from_rev, to_rev, path))

    def resolve_blob(self, content_id: str) -> bytes:
        """Fetch raw blob content.

        Raises:
            BlobNotFoundError: If the id cannot be expanded or GitHub returns 404
            GitHubApiError: If the request fails for another reason
        """
        sha = self._expand_content_id(content_id)
        url = f"{self._repo_url()}/git/blobs/{sha}"
        try:
            response = self.session.get(
                url, headers={**self.headers, "Accept": "application/vnd.github.v3.raw"}
            )
        except requests.RequestException as e:
            raise GitHubApiError(f"Error fetching blob {sha} from GitHub: {e}") from e

        if response.status_code in (404, 422):
            raise BlobNotFoundError(f"Blob {content_id} not found on GitHub")
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise GitHubApiError(f"Error fetching blob {sha} from GitHub: {e}") from e
        return response.content

    # --------------------------------------------------------
    # Private Methods
    # --------------------------------------------------------

    def _repo_url(self) -> str:
        return f"{self.api_url}/repos/{self.repo_owner}/{self.repo_name}"

    def _compare_url(self, from_rev: str | None, to_rev: str | None, path: str | None) -> str:
        if from_rev is None or to_rev is None:
            raise ValueError("GitHub diff source requires both a from and a to revision")
        if path is not None:
            raise ValueError("Path filters are not supported by the GitHub diff source")
        return f"{self._repo_url()}/compare/{from_rev}...{to_rev}"

    def _get(self, url: str, accept: str | None = None) -> requests.Response:
        headers = dict(self.headers)
        if accept:
            headers["Accept"] = accept
        try:
            response = self.session.get(url, headers=headers)
            response.raise_for_status()
        except requests.RequestException as e:
            raise GitHubApiError(f"Error fetching {url} from GitHub: {e}") from e
        return response

    def _get_compare_files(
        self, from_rev: str | None, to_rev: str | None, path: str | None
    ) -> list[dict]:
        url = self._compare_url(from_rev, to_rev, path)
        key = (from_rev, to_rev)
        if key not in self._compare_files:
            files = self._get(url).json().get("files", [])
            self._compare_files[key] = files
            self._known_blob_ids.update(entry["sha"] for entry in files if entry.get("sha"))
        return self._compare_files[key]

    def _expand_content_id(self, content_id: str) -> str:
        if _FULL_SHA_PATTERN.match(content_id):
            return content_id
        if self._last_range is not None and self._last_range not in self._compare_files:
            self._get_compare_files(*self._last_range, None)
        matches = self._match_blob_ids(content_id)
        if not matches and self._last_range is not None:
            # The compare listing only carries destination shas
            self._load_tree_blob_ids(self._last_range[0])
            matches = self._match_blob_ids(content_id)
        if len(matches) != 1:
            raise BlobNotFoundError(
                f"Cannot resolve abbreviated blob id {content_id} on GitHub"
            )
        return matches[0]

    def _match_blob_ids(self, content_id: str) -> list[str]:
        return [sha for sha in self._known_blob_ids if sha.startswith(content_id)]

    def _load_tree_blob_ids(self, rev: str | None) -> None:
        """Add every blob sha in rev's tree to the expansion table."""
        if rev is None or rev in self._loaded_trees:
            return
        url = f"{self._repo_url()}/git/trees/{rev}?recursive=1"
        entries = self._get(url).json().get("tree", [])
        self._known_blob_ids.update(
            entry["sha"] for entry in entries if entry.get("type") == "blob" and entry.get("sha")
        )
        self._loaded_trees.add(rev)
