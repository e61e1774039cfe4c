"""Domain models for diff size statistics.

Stats come straight from the backend's stat call; they are never derived from
parsed FileChange records, so the two views are not guaranteed to agree.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_BRACE_RENAME_PATTERN = re.compile(r"^(.*)\{(.*) => (.*)\}(.*)$")
_RENAME_SEPARATOR = " => "


@dataclass
class FileStats:
    """Insertions and deletions for one file."""

    insertions: int = 0
    deletions: int = 0

    @property
    def lines(self) -> int:
        return self.insertions + self.deletions

    def to_dict(self) -> dict:
        return {"insertions": self.insertions, "deletions": self.deletions}


@dataclass
class DiffStats:
    """Aggregate totals for a diff plus the per-file breakdown.

    Attributes:
        files: Number of files changed
        lines: Total changed lines (insertions + deletions)
        insertions: Total inserted lines
        deletions: Total deleted lines
        file_stats: Per-file counts keyed by path, in backend order
    """

    files: int = 0
    lines: int = 0
    insertions: int = 0
    deletions: int = 0
    file_stats: dict[str, FileStats] = field(default_factory=dict)

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_file_stats(cls, file_stats: dict[str, FileStats]) -> DiffStats:
        """Build totals from a per-file breakdown.

        Args:
            file_stats: Per-file counts keyed by path

        Returns:
            DiffStats with totals summed over all files
        """
        insertions = sum(stats.insertions for stats in file_stats.values())
        deletions = sum(stats.deletions for stats in file_stats.values())
        return cls(
            files=len(file_stats),
            lines=insertions + deletions,
            insertions=insertions,
            deletions=deletions,
            file_stats=dict(file_stats),
        )

    @classmethod
    def from_numstat(cls, output: str) -> DiffStats:
        """Parse ``git diff --numstat`` output.

        Each row is ``<insertions>\\t<deletions>\\t<path>``. Binary files
        report ``-`` for both counts and are counted as zero. Rename rows
        (``old => new`` or ``dir/{old => new}.py``) are keyed by the source
        path, matching the parsed FileChanges and NameStatus.

        Args:
            output: Raw numstat output

        Returns:
            Parsed DiffStats
        """
        file_stats: dict[str, FileStats] = {}
        for row in output.splitlines():
            parts = row.split("\t", 2)
            if len(parts) != 3:
                continue
            insertions, deletions, path = parts
            file_stats[_source_path(path)] = FileStats(
                insertions=_count(insertions),
                deletions=_count(deletions),
            )
        return cls.from_file_stats(file_stats)

    @classmethod
    def from_github_files(cls, files: list[dict]) -> DiffStats:
        """Parse the ``files`` list of a GitHub compare response.

        Args:
            files: File entries with filename, additions and deletions

        Returns:
            Parsed DiffStats; renamed files are keyed by previous_filename
        """
        file_stats = {
            entry.get("previous_filename") or entry["filename"]: FileStats(
                insertions=int(entry.get("additions", 0)),
                deletions=int(entry.get("deletions", 0)),
            )
            for entry in files
        }
        return cls.from_file_stats(file_stats)

    @classmethod
    def from_dict(cls, data: dict | None) -> DiffStats:
        """Parse the ``{"total": {...}, "files": {...}}`` shape.

        Args:
            data: Raw dictionary (e.g. from JSON or YAML), or None

        Returns:
            Typed DiffStats instance
        """
        if data is None:
            return cls()

        total = data.get("total", {})
        file_stats = {
            path: FileStats(
                insertions=int(counts.get("insertions", 0)),
                deletions=int(counts.get("deletions", 0)),
            )
            for path, counts in data.get("files", {}).items()
        }
        return cls(
            files=int(total.get("files", len(file_stats))),
            lines=int(total.get("lines", 0)),
            insertions=int(total.get("insertions", 0)),
            deletions=int(total.get("deletions", 0)),
            file_stats=file_stats,
        )

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "total": {
                "files": self.files,
                "lines": self.lines,
                "insertions": self.insertions,
                "deletions": self.deletions,
            },
            "files": {path: stats.to_dict() for path, stats in self.file_stats.items()},
        }


def _source_path(path: str) -> str:
    """Reduce a numstat rename path to its source side."""
    match = _BRACE_RENAME_PATTERN.match(path)
    if match:
        prefix, old, _new, suffix = match.groups()
        # "dir/{ => sub}/x.py" leaves an empty segment behind
        return (prefix + old + suffix).replace("//", "/")
    if _RENAME_SEPARATOR in path:
        return path.split(_RENAME_SEPARATOR, 1)[0]
    return path


def _count(value: str) -> int:
    """Convert a numstat count column, treating "-" (binary) as zero."""
    value = value.strip()
    return int(value) if value.isdigit() else 0
