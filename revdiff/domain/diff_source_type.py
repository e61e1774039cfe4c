"""Domain enum for diff source selection.

This module defines the DiffSourceType enum used to pick a backend in the
diff source factory.
"""

from __future__ import annotations

from enum import Enum


class DiffSourceType(Enum):
    """Backend that supplies diff text, stats and blobs.

    Attributes:
        LOCAL: Local git repository via the git CLI (default)
        GITHUB: GitHub compare and blob REST endpoints
        STATIC: Canned diff text read from a file or stdin
    """

    LOCAL = "local"
    GITHUB = "github"
    STATIC = "static"

    @classmethod
    def from_string(cls, value: str) -> DiffSourceType:
        """Parse DiffSourceType from string value.

        Args:
            value: String value ("local", "github" or "static")

        Returns:
            Corresponding DiffSourceType enum value

        Raises:
            ValueError: If value is not a valid DiffSourceType

        Examples:
            >>> DiffSourceType.from_string("github")
            <DiffSourceType.GITHUB: 'github'>
            >>> DiffSourceType.from_string("LOCAL")
            <DiffSourceType.LOCAL: 'local'>
        """
        value_lower = value.lower()
        for member in cls:
            if member.value == value_lower:
                return member
        valid_values = [m.value for m in cls]
        raise ValueError(
            f"Invalid diff source: {value}. Must be one of: {', '.join(valid_values)}"
        )
