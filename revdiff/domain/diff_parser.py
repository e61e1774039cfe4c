"""Line-oriented parser turning unified diff text into FileChange records.

Unified diff text has no explicit framing, so every line is classified by
shape. The classification order is fixed:

1. file header   ``diff --git a/<path> b/<path>`` starts a new file
2. index line    ``index <src>..<dst>[ <mode>]``
3. mode header   ``<verb> file mode <mode>``
4. binary marker ``Binary files ...``
5. accumulate    every non-header line is appended to the current patch

Checks 2-4 are not mutually exclusive; all of them run for each line that is
not a file header, and the line is always appended afterwards. The parser
never fails: lines before the first file header are ignored, and files with
no index line keep their default ids.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

from revdiff.domain.file_change import BlobResolver, FileChange

CANONICAL_ENCODING = "utf-8"

FILE_HEADER_PATTERN = re.compile(r"^diff --git a/(.*?) b/(.*?)")
INDEX_LINE_PATTERN = re.compile(r"^index (\w{7,})\.\.(\w{7,})( \S+)?")
MODE_HEADER_PATTERN = re.compile(r"^([A-Za-z]*?) file mode (\d{6})")
BINARY_MARKER_PREFIX = "Binary files "


# ============================================================
# Encoding Normalization
# ============================================================


def normalize_diff_text(raw: str | bytes, encoding: str = CANONICAL_ENCODING) -> str:
    """Convert raw backend output into canonical text.

    Args:
        raw: Diff text as returned by a DiffSource
        encoding: Declared encoding of raw when it is bytes

    Returns:
        Decoded text. Undecodable byte sequences become U+FFFD, so this
        never raises for bad input.
    """
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode(encoding, errors="replace")
    except LookupError:
        # Unknown codec name; fall back to the canonical encoding
        return raw.decode(CANONICAL_ENCODING, errors="replace")


# ============================================================
# Line Rules
# ============================================================


@dataclass
class _FileSection:
    """A file being built while its lines are scanned."""

    change: FileChange
    lines: list[str] = field(default_factory=list)

    def finish(self) -> None:
        self.change.patch = "\n".join(self.lines)


def _apply_index_line(change: FileChange, match: re.Match[str]) -> None:
    change.src = match.group(1)
    change.dst = match.group(2)
    if match.group(3):
        change.mode = match.group(3).strip()


def _apply_mode_header(change: FileChange, match: re.Match[str]) -> None:
    change.type = match.group(1)
    change.mode = match.group(2)


def _apply_binary_marker(change: FileChange, match: re.Match[str]) -> None:
    change.binary = True


@dataclass(frozen=True)
class LineRule:
    """An annotation rule: a line shape and the update it makes to the file."""

    name: str
    pattern: re.Pattern[str]
    apply: Callable[[FileChange, re.Match[str]], None]

    def __call__(self, change: FileChange, line: str) -> bool:
        match = self.pattern.match(line)
        if match is None:
            return False
        self.apply(change, match)
        return True


ANNOTATION_RULES: tuple[LineRule, ...] = (
    LineRule("index", INDEX_LINE_PATTERN, _apply_index_line),
    LineRule("mode", MODE_HEADER_PATTERN, _apply_mode_header),
    LineRule("binary", re.compile(re.escape(BINARY_MARKER_PREFIX)), _apply_binary_marker),
)


# ============================================================
# Parser
# ============================================================


class DiffParser:
    """Single-pass state machine over unified diff lines.

    Holds one "current file" slot. A file header opens a new section; every
    other line annotates and extends the current section, or is dropped when
    no section is open yet.
    """

    def __init__(
        self,
        resolver: BlobResolver | None = None,
        rules: tuple[LineRule, ...] = ANNOTATION_RULES,
    ):
        """Initialize the parser.

        Args:
            resolver: Attached to every FileChange so blobs can be fetched
            rules: Ordered annotation rules tried on each non-header line
        """
        self.resolver = resolver
        self.rules = rules

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def parse(self, diff_text: str) -> dict[str, FileChange]:
        """Parse diff text into FileChange records keyed by path.

        Args:
            diff_text: Normalized unified diff text

        Returns:
            Dict in first-seen path order. A repeated path replaces the
            earlier record but keeps the earlier position.
        """
        files: dict[str, FileChange] = {}
        current: _FileSection | None = None

        for line in diff_text.split("\n"):
            header = FILE_HEADER_PATTERN.match(line)
            if header:
                if current is not None:
                    current.finish()
                current = self._open_section(header.group(1), line)
                files[current.change.path] = current.change
                continue

            if current is None:
                continue

            for rule in self.rules:
                rule(current.change, line)
            current.lines.append(line)

        if current is not None:
            current.finish()

        return files

    # --------------------------------------------------------
    # Private Methods
    # --------------------------------------------------------

    def _open_section(self, path: str, header_line: str) -> _FileSection:
        change = FileChange(path=path, patch=header_line, resolver=self.resolver)
        return _FileSection(change=change, lines=[header_line])
