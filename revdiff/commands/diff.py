"""Diff command - show stats, files, name-status or patch for a revision range.

Thin command that builds a Diff from settings and prints one view of it.
"""

from __future__ import annotations

import json
import sys

from revdiff.domain.settings import Settings
from revdiff.infrastructure.diff_io import (
    format_diff_set_as_json,
    format_diff_set_as_text,
    format_stats_as_text,
)

from ._source import build_diff

VIEWS = ("stats", "files", "name-status", "patch")


def cmd_diff(
    settings: Settings,
    from_rev: str | None = None,
    to_rev: str | None = None,
    path: str | None = None,
    view: str = "files",
    output_format: str = "text",
) -> int:
    """Execute the diff command.

    Args:
        settings: Resolved settings (source, repo, encoding)
        from_rev: Starting revision, or None for the backend default
        to_rev: Ending revision, or None for the backend default
        path: Optional path filter
        view: One of "stats", "files", "name-status", "patch"
        output_format: "text" or "json" (ignored for "patch")

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        diff = build_diff(settings, from_rev, to_rev, path)

        if view == "patch":
            output = diff.patch()
        elif view == "stats":
            stats = diff.stats()
            if output_format == "json":
                output = json.dumps(stats.to_dict(), indent=2)
            else:
                output = format_stats_as_text(stats)
        elif view == "name-status":
            name_status = diff.name_status()
            if output_format == "json":
                output = json.dumps(name_status.to_dict(), indent=2)
            else:
                output = "\n".join(
                    f"{status}\t{file_path}"
                    for file_path, status in name_status.entries.items()
                )
        else:
            if output_format == "json":
                output = format_diff_set_as_json(diff.files())
            else:
                output = format_diff_set_as_text(diff.files())
    except Exception as e:
        print(f"Error computing diff: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0
