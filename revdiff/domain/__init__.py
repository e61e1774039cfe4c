"""Domain models for revdiff."""

from revdiff.domain.diff_parser import DiffParser, LineRule, normalize_diff_text
from revdiff.domain.diff_set import DiffSet, FileChangeNotFoundError
from revdiff.domain.diff_source_type import DiffSourceType
from revdiff.domain.diff_stats import DiffStats, FileStats
from revdiff.domain.file_change import (
    NULL_CONTENT_ID,
    BlobNotFoundError,
    BlobResolver,
    BlobSide,
    FileChange,
    is_null_content_id,
)
from revdiff.domain.name_status import NameStatus
from revdiff.domain.settings import Settings, SettingsError

__all__ = [
    "BlobNotFoundError",
    "BlobResolver",
    "BlobSide",
    "DiffParser",
    "DiffSet",
    "DiffSourceType",
    "DiffStats",
    "FileChange",
    "FileChangeNotFoundError",
    "FileStats",
    "LineRule",
    "NameStatus",
    "NULL_CONTENT_ID",
    "Settings",
    "SettingsError",
    "is_null_content_id",
    "normalize_diff_text",
]
