"""Parse diff command.

Thin command that orchestrates diff parsing infrastructure.
Reads a raw diff from stdin or a file and prints the parsed file changes.
"""

from __future__ import annotations

import sys

from revdiff.infrastructure.diff_io import (
    format_diff_set_as_json,
    format_diff_set_as_text,
    read_diff,
)
from revdiff.infrastructure.diff_source.static_source import StaticDiffSource
from revdiff.services.diff import Diff


def cmd_parse_diff(
    input_file: str | None = None,
    output_format: str = "json",
    include_patch: bool = True,
    encoding: str = "utf-8",
) -> int:
    """Parse a git diff and output structured per-file information.

    Args:
        input_file: Optional path to read diff from. If None, reads from stdin.
        output_format: Output format - 'json' (default) or 'text'
        include_patch: If False, JSON output omits per-file patch text
        encoding: Declared encoding of the input bytes

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    # --------------------------------------------------------
    # 1. Read diff input
    # --------------------------------------------------------
    try:
        diff_content = read_diff(input_file)
    except FileNotFoundError:
        print(f"Input file not found: {input_file}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Failed to read diff: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 2. Parse into domain model
    # --------------------------------------------------------
    diff = Diff(StaticDiffSource(diff_content), encoding=encoding)

    # --------------------------------------------------------
    # 3. Output in requested format
    # --------------------------------------------------------
    if output_format == "text":
        print(format_diff_set_as_text(diff.files()))
    else:
        print(format_diff_set_as_json(diff.files(), include_patch=include_patch))

    return 0
