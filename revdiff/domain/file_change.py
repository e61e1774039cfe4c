"""Domain model for a single file touched by a diff.

A FileChange carries the file's patch text plus the content ids, mode and
change type read from its header lines. It never owns blob content; blobs
are fetched on demand through a BlobResolver (normally the DiffSource the
diff came from).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

NULL_CONTENT_ID = "0000000"


class BlobNotFoundError(LookupError):
    """Raised when a content id cannot be resolved to a blob."""

    pass


class BlobResolver(Protocol):
    """Protocol for anything that can turn a content id into bytes."""

    def resolve_blob(self, content_id: str) -> bytes:
        """Return the stored bytes for content_id."""
        ...


class BlobSide(Enum):
    """Which side of the diff a blob is read from."""

    SRC = "src"
    DST = "dst"


def is_null_content_id(content_id: str) -> bool:
    """Check if a content id is the "file absent on this side" sentinel.

    Args:
        content_id: Abbreviated or full content id from an index line

    Returns:
        True for "0000000" and any other all-zero id
    """
    return content_id == NULL_CONTENT_ID or (
        bool(content_id) and not content_id.strip("0")
    )


# ============================================================
# Domain Models
# ============================================================


@dataclass
class FileChange:
    """One file's section of a unified diff.

    Attributes:
        path: Repo-relative path taken from the a/ side of the header
        patch: The file's diff block, header line first, newline-joined
        mode: Permission bits when present, else ""
        src: Source content id ("0000000" when the file did not exist)
        dst: Destination content id ("0000000" when the file was removed)
        type: "modified", or the verb from a "<verb> file mode" header
        binary: True if a "Binary files ..." marker appeared in the section
    """

    path: str
    patch: str
    mode: str = ""
    src: str = ""
    dst: str = ""
    type: str = "modified"
    binary: bool = False
    resolver: BlobResolver | None = field(default=None, repr=False, compare=False)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def is_binary(self) -> bool:
        return self.binary

    def blob(self, side: BlobSide | str = BlobSide.DST) -> bytes | None:
        """Fetch the file content for one side of the change.

        Args:
            side: BlobSide.SRC or BlobSide.DST (or "src" / "dst")

        Returns:
            The blob bytes, or None when that side has no content
            (pure addition or pure deletion)

        Raises:
            BlobNotFoundError: If the section had no index line, or the id
                cannot be resolved by the backend
            ValueError: If side is not a valid BlobSide
        """
        side = BlobSide(side)
        content_id = self.src if side == BlobSide.SRC else self.dst
        if is_null_content_id(content_id):
            return None
        if not content_id:
            raise BlobNotFoundError(f"{self.path} has no {side.value} content id")
        if self.resolver is None:
            raise BlobNotFoundError(
                f"No blob resolver attached to {self.path}; cannot resolve {content_id}"
            )
        return self.resolver.resolve_blob(content_id)

    def to_dict(self, include_patch: bool = True) -> dict:
        """Convert to a dictionary for JSON serialization.

        Args:
            include_patch: If False, the patch text is left out

        Returns:
            Dictionary with the file change attributes
        """
        data = {
            "path": self.path,
            "type": self.type,
            "mode": self.mode,
            "src": self.src,
            "dst": self.dst,
            "binary": self.binary,
        }
        if include_patch:
            data["patch"] = self.patch
        return data
