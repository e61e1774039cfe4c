"""revdiff - structured, queryable git diffs.

Parses the unified diff text produced by a version-control backend into an
ordered collection of per-file change records, with lazily fetched and
cached stats, name/status summaries and blob access.

- Domain Modeling: Parse-once pattern with type-safe models
- Services Pattern: Core services with dependency injection
- CLI Architecture: Single entry point dispatcher with explicit parameters

Usage:
    python -m revdiff <command> [options]
    revdiff <command> [options]

Structure:
    revdiff/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── diff_parser.py   # Line classifier / DiffParser
    │   ├── diff_set.py      # DiffSet ordered path -> FileChange map
    │   ├── file_change.py   # FileChange, blob sides
    │   ├── diff_stats.py    # DiffStats, FileStats
    │   ├── name_status.py   # NameStatus
    │   └── settings.py      # Settings loaded from .revdiff.yml
    ├── services/            # Business logic services
    │   ├── diff.py          # Diff request with lazy caches
    │   └── git_operations.py
    ├── infrastructure/      # External system interactions
    │   ├── diff_source/     # Local git, GitHub, static backends
    │   └── diff_io.py
    └── commands/            # Thin command orchestrators
        ├── diff.py
        ├── parse_diff.py
        └── blob.py
"""

from revdiff.domain.diff_set import DiffSet, FileChangeNotFoundError
from revdiff.domain.file_change import BlobNotFoundError, BlobSide, FileChange
from revdiff.services.diff import Diff

__all__ = [
    "BlobNotFoundError",
    "BlobSide",
    "Diff",
    "DiffSet",
    "FileChange",
    "FileChangeNotFoundError",
]
