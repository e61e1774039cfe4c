"""Git operations service.

Core service for git command operations. Encapsulates all subprocess calls
to git commands used to produce diff text, stats and blobs.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from revdiff.domain.file_change import BlobNotFoundError


class GitDiffError(Exception):
    """Raised when a git diff command fails."""

    pass


class GitObjectNotFoundError(BlobNotFoundError):
    """Raised when a content id does not name an object in the repository."""

    pass


class GitRepositoryError(Exception):
    """Raised when directory is not a git repository."""

    pass


class GitOperationsService:
    """Core service for git command operations.

    Encapsulates all subprocess calls to git commands.
    Reusable across the entire application.
    """

    def __init__(self, repo_path: str = "."):
        """Initialize with repository path.

        Args:
            repo_path: Path to git repository (default: current directory)
        """
        self.repo_path = Path(repo_path)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def get_diff_full(
        self,
        from_rev: str | None = None,
        to_rev: str | None = None,
        path: str | None = None,
    ) -> bytes:
        """Get the full patch between two revisions.

        Args:
            from_rev: Starting revision (None compares the working tree with the index)
            to_rev: Ending revision (None compares against the working tree)
            path: Optional path filter

        Returns:
            Raw unified diff output, undecoded

        Raises:
            GitDiffError: If diff command fails
            GitRepositoryError: If not in a git repository
        """
        return self._run_diff(["-p"], from_rev, to_rev, path)

    def get_diff_numstat(
        self,
        from_rev: str | None = None,
        to_rev: str | None = None,
        path: str | None = None,
    ) -> str:
        """Get ``git diff --numstat`` output.

        Raises:
            GitDiffError: If diff command fails
            GitRepositoryError: If not in a git repository
        """
        output = self._run_diff(["--numstat"], from_rev, to_rev, path)
        return output.decode("utf-8", errors="replace")

    def get_diff_name_status(
        self,
        from_rev: str | None = None,
        to_rev: str | None = None,
        path: str | None = None,
    ) -> str:
        """Get ``git diff --name-status`` output.

        Raises:
            GitDiffError: If diff command fails
            GitRepositoryError: If not in a git repository
        """
        output = self._run_diff(["--name-status"], from_rev, to_rev, path)
        return output.decode("utf-8", errors="replace")

    def get_object_contents(self, content_id: str) -> bytes:
        """Get the stored bytes of a blob.

        Args:
            content_id: Full or abbreviated object id

        Returns:
            Object contents

        Raises:
            GitObjectNotFoundError: If the object doesn't exist
            GitRepositoryError: If not in a git repository
        """
        self._require_repository()

        try:
            result = subprocess.run(
                ["git", "cat-file", "-p", content_id],
                cwd=self.repo_path,
                capture_output=True,
                check=True,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitObjectNotFoundError(
                f"Object {content_id} not found: {_stderr_text(e)}"
            )

    def is_git_repository(self) -> bool:
        """Check if current directory is a git repository.

        Returns:
            True if valid git repo, False otherwise
        """
        try:
            subprocess.run(
                ["git", "rev-parse", "--git-dir"],
                cwd=self.repo_path,
                capture_output=True,
                check=True,
            )
            return True
        except subprocess.CalledProcessError:
            return False

    # --------------------------------------------------------
    # Private Methods
    # --------------------------------------------------------

    def _require_repository(self) -> None:
        if not self.is_git_repository():
            raise GitRepositoryError(
                f"Not a git repository: {self.repo_path}\n"
                "Make sure you're running from within a git repository."
            )

    def _run_diff(
        self,
        options: list[str],
        from_rev: str | None,
        to_rev: str | None,
        path: str | None,
    ) -> bytes:
        self._require_repository()

        cmd = ["git", "diff", *options]
        cmd.extend(rev for rev in (from_rev, to_rev) if rev is not None)
        if path is not None:
            cmd.extend(["--", path])

        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                check=True,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitDiffError(f"Failed to compute diff: {_stderr_text(e)}")


def _stderr_text(error: subprocess.CalledProcessError) -> str:
    stderr = error.stderr or b""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr.strip()
