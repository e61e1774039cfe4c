"""Infrastructure for reading raw diffs and rendering parsed ones.

Handles reading diff content from stdin or files and converting parsed
DiffSets and stats to JSON or text output.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from revdiff.domain.diff_set import DiffSet
from revdiff.domain.diff_stats import DiffStats


# ============================================================
# Input Functions
# ============================================================


def read_diff_from_stdin() -> bytes:
    """Read diff content from stdin.

    Returns:
        Raw diff content as bytes (decoded later by the parser)
    """
    return sys.stdin.buffer.read()


def read_diff_from_file(path: str | Path) -> bytes:
    """Read diff content from a file.

    Args:
        path: Path to the diff file

    Returns:
        Raw diff content as bytes

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    return Path(path).read_bytes()


def read_diff(input_file: str | None = None) -> bytes:
    """Read diff content from stdin or a file.

    Args:
        input_file: Optional path to read from. If None, reads from stdin.

    Returns:
        Raw diff content as bytes
    """
    if input_file is None:
        return read_diff_from_stdin()
    return read_diff_from_file(input_file)


# ============================================================
# Output Functions
# ============================================================


def format_diff_set_as_json(diff_set: DiffSet, include_patch: bool = True) -> str:
    """Format a DiffSet as JSON.

    Args:
        diff_set: Parsed DiffSet
        include_patch: If False, per-file patch text is omitted

    Returns:
        JSON string representation of the diff
    """
    return json.dumps(diff_set.to_dict(include_patch=include_patch), indent=2)


def format_diff_set_as_text(diff_set: DiffSet) -> str:
    """Format a DiffSet as a human-readable file listing.

    Args:
        diff_set: Parsed DiffSet

    Returns:
        One line per file with type, mode, content ids and binary flag
    """
    if not diff_set:
        return "Empty diff (no files found)"

    lines = [f"Files changed: {len(diff_set)}", ""]
    for change in diff_set.values():
        ids = f"{change.src or '-'}..{change.dst or '-'}"
        flags = " [binary]" if change.is_binary else ""
        mode = f" {change.mode}" if change.mode else ""
        lines.append(f"{change.type:<9} {ids}{mode} {change.path}{flags}")
    return "\n".join(lines)


def format_stats_as_text(stats: DiffStats) -> str:
    """Format a DiffStats summary like ``git diff --stat``'s last line."""
    lines = [
        f"{counts.insertions:>6} {counts.deletions:>6}  {path}"
        for path, counts in stats.file_stats.items()
    ]
    lines.append(
        f"{stats.files} files changed, "
        f"{stats.insertions} insertions(+), {stats.deletions} deletions(-)"
    )
    return "\n".join(lines)
