"""Blob command - write one side of a changed file to stdout."""

from __future__ import annotations

import sys

from revdiff.domain.diff_set import FileChangeNotFoundError
from revdiff.domain.file_change import BlobNotFoundError, BlobSide
from revdiff.domain.settings import Settings

from ._source import build_diff


def cmd_blob(
    settings: Settings,
    file_path: str,
    from_rev: str | None = None,
    to_rev: str | None = None,
    side: str = "dst",
) -> int:
    """Execute the blob command.

    Args:
        settings: Resolved settings (source, repo, encoding)
        file_path: Path of a file in the diff
        from_rev: Starting revision, or None for the backend default
        to_rev: Ending revision, or None for the backend default
        side: "src" or "dst"

    Returns:
        Exit code (0 for success, 1 for failure, 2 when the side has no content)
    """
    try:
        diff = build_diff(settings, from_rev, to_rev)
        content = diff[file_path].blob(BlobSide(side))
    except FileChangeNotFoundError:
        print(f"File not in diff: {file_path}", file=sys.stderr)
        return 1
    except BlobNotFoundError as e:
        print(f"Blob not found: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error reading blob: {e}", file=sys.stderr)
        return 1

    if content is None:
        print(f"{file_path} has no {side} content (added or deleted file)", file=sys.stderr)
        return 2

    sys.stdout.buffer.write(content)
    sys.stdout.buffer.flush()
    return 0
