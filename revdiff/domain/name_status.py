"""Domain model for the name/status summary of a diff."""

from __future__ import annotations

from dataclasses import dataclass, field

# GitHub compare "status" values mapped to git's name-status letters
_GITHUB_STATUS_LETTERS = {
    "added": "A",
    "removed": "D",
    "modified": "M",
    "renamed": "R",
    "copied": "C",
    "changed": "T",
}


@dataclass
class NameStatus:
    """Path -> status letter (``A``, ``M``, ``D``, ``R100``, ...).

    Passed through from the backend; not reconciled with parsed FileChanges.
    """

    entries: dict[str, str] = field(default_factory=dict)

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_output(cls, output: str) -> NameStatus:
        """Parse ``git diff --name-status`` output.

        Rows are ``<status>\\t<path>[\\t<new path>]``. Rename and copy rows
        are keyed by their first (source) path.

        Args:
            output: Raw name-status output

        Returns:
            Parsed NameStatus
        """
        entries: dict[str, str] = {}
        for row in output.splitlines():
            parts = row.split("\t")
            if len(parts) < 2:
                continue
            entries[parts[1]] = parts[0]
        return cls(entries=entries)

    @classmethod
    def from_github_files(cls, files: list[dict]) -> NameStatus:
        """Parse the ``files`` list of a GitHub compare response.

        Args:
            files: File entries with filename, status and previous_filename

        Returns:
            Parsed NameStatus; "unchanged" entries are skipped
        """
        entries: dict[str, str] = {}
        for entry in files:
            letter = _GITHUB_STATUS_LETTERS.get(entry.get("status", ""))
            if letter is None:
                continue
            path = entry.get("previous_filename") or entry["filename"]
            entries[path] = letter
        return cls(entries=entries)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def __getitem__(self, path: str) -> str:
        return self.entries[path]

    def __contains__(self, path: object) -> bool:
        return path in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict:
        return dict(self.entries)
