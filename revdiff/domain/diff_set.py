"""Domain model for a parsed diff: an ordered, read-only path -> FileChange map.

Parse-once pattern: raw diff text is parsed into a DiffSet at the boundary
via from_diff_content(); everything downstream works on typed records.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from revdiff.domain.diff_parser import DiffParser, normalize_diff_text
from revdiff.domain.file_change import BlobResolver, FileChange


class FileChangeNotFoundError(KeyError):
    """Raised when a path is not part of the parsed diff."""

    pass


class DiffSet(Mapping[str, FileChange]):
    """Ordered collection of the files touched by one diff.

    Iteration order is the order in which files first appear in the raw
    diff text, not a sorted order.
    """

    def __init__(self, files: dict[str, FileChange] | None = None):
        self._files: dict[str, FileChange] = dict(files or {})

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_diff_content(
        cls,
        diff_content: str | bytes,
        resolver: BlobResolver | None = None,
        encoding: str = "utf-8",
    ) -> DiffSet:
        """Parse raw diff output into a DiffSet.

        Args:
            diff_content: Unified diff text, or bytes in the given encoding
            resolver: Blob resolver attached to each FileChange
            encoding: Encoding used to decode bytes input

        Returns:
            Parsed DiffSet (empty for empty or header-less input)
        """
        text = normalize_diff_text(diff_content, encoding)
        return cls(DiffParser(resolver=resolver).parse(text))

    # --------------------------------------------------------
    # Mapping Protocol
    # --------------------------------------------------------

    def __getitem__(self, path: str) -> FileChange:
        try:
            return self._files[path]
        except KeyError:
            raise FileChangeNotFoundError(path) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"DiffSet({list(self._files)!r})"

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def paths(self) -> list[str]:
        return list(self._files)

    def file_changes(self) -> Iterator[FileChange]:
        """Iterate FileChange records in diff order."""
        return iter(self._files.values())

    def binary_files(self) -> list[FileChange]:
        """Return the files flagged with a "Binary files" marker."""
        return [change for change in self._files.values() if change.is_binary]

    def to_dict(self, include_patch: bool = True) -> dict:
        """Convert to a dictionary for JSON serialization.

        Args:
            include_patch: If False, per-file patch text is left out

        Returns:
            Dictionary with a file count and the ordered file list
        """
        return {
            "file_count": len(self._files),
            "files": [
                change.to_dict(include_patch=include_patch)
                for change in self._files.values()
            ],
        }
