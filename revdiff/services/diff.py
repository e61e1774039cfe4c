"""Diff request service.

A Diff is one query against a DiffSource: a revision pair plus an optional
path filter. Backend data is fetched lazily, at most once per kind (full
text, stats, name-status), and the full text is parsed at most once into a
DiffSet. Nothing is ever invalidated; a Diff lives as long as the query.

Not thread-safe: concurrent first access to the same Diff can fetch twice.
Callers sharing an instance across threads must serialize access.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Callable, Generic, TypeVar

from revdiff.domain.diff_parser import normalize_diff_text
from revdiff.domain.diff_set import DiffSet
from revdiff.domain.diff_stats import DiffStats
from revdiff.domain.file_change import FileChange
from revdiff.domain.name_status import NameStatus
from revdiff.infrastructure.diff_source.base import DiffSource

T = TypeVar("T")


class Lazy(Generic[T]):
    """A value loaded on first use, with an explicit fetched flag.

    The flag, not the value, records whether loading happened, so an empty
    result (zero files, empty text) is still cached.
    """

    def __init__(self, loader: Callable[[], T]):
        self._loader = loader
        self._value: T | None = None
        self.fetched = False

    def get(self) -> T:
        if not self.fetched:
            self._value = self._loader()
            self.fetched = True
        return self._value  # type: ignore[return-value]


class Diff:
    """Lazy, cached view of the changes between two revisions.

    Example:
        >>> diff = Diff(source, "HEAD~1", "HEAD").with_path("src/")
        >>> diff.size()
        3
        >>> for change in diff:
        ...     print(change.path, change.type)
    """

    def __init__(
        self,
        source: DiffSource,
        from_rev: object | None = None,
        to_rev: object | None = None,
        path: str | None = None,
        encoding: str = "utf-8",
    ):
        """Initialize a diff request.

        Args:
            source: Backend providing diff data (injected)
            from_rev: Starting revision; None uses the backend default
            to_rev: Ending revision; None uses the backend default
            path: Optional path filter for every fetch
            encoding: Declared encoding of raw diff bytes
        """
        self.source = source
        self._from = str(from_rev) if from_rev is not None else None
        self._to = str(to_rev) if to_rev is not None else None
        self._path = path
        self.encoding = encoding

        self._full_diff: Lazy[str | bytes] = Lazy(
            lambda: self.source.fetch_full_diff(self._from, self._to, self._path)
        )
        self._patch_text: Lazy[str] = Lazy(
            lambda: normalize_diff_text(self._full_diff.get(), self.encoding)
        )
        self._diff_set: Lazy[DiffSet] = Lazy(self._parse_full_diff)
        self._stats: Lazy[DiffStats] = Lazy(
            lambda: self.source.fetch_stats(self._from, self._to, self._path)
        )
        self._name_status: Lazy[NameStatus] = Lazy(
            lambda: self.source.fetch_name_status(self._from, self._to, self._path)
        )

    # --------------------------------------------------------
    # Request
    # --------------------------------------------------------

    @property
    def from_rev(self) -> str | None:
        return self._from

    @property
    def to_rev(self) -> str | None:
        return self._to

    @property
    def path_filter(self) -> str | None:
        return self._path

    def with_path(self, path: str | None) -> Diff:
        """Scope future fetches to a path and return this Diff for chaining.

        Results already fetched are kept as they are, so call this before
        any accessor.
        """
        self._path = path
        return self

    # --------------------------------------------------------
    # Stats
    # --------------------------------------------------------

    def stats(self) -> DiffStats:
        return self._stats.get()

    def size(self) -> int:
        """Number of files changed, from the stats summary."""
        return self.stats().files

    def lines(self) -> int:
        return self.stats().lines

    def insertions(self) -> int:
        return self.stats().insertions

    def deletions(self) -> int:
        return self.stats().deletions

    def name_status(self) -> NameStatus:
        return self._name_status.get()

    # --------------------------------------------------------
    # Patch Text
    # --------------------------------------------------------

    def patch(self) -> str:
        """Return the whole unparsed diff text."""
        return self._patch_text.get()

    def __str__(self) -> str:
        return self.patch()

    # --------------------------------------------------------
    # Per-file Access
    # --------------------------------------------------------

    def files(self) -> DiffSet:
        """Return the parsed DiffSet, parsing on first use."""
        return self._diff_set.get()

    def lookup(self, path: str) -> FileChange:
        """Return the FileChange for a path.

        Raises:
            FileChangeNotFoundError: If the path is not in the diff
        """
        return self.files()[path]

    def __getitem__(self, path: str) -> FileChange:
        return self.lookup(path)

    def __contains__(self, path: object) -> bool:
        return path in self.files()

    def __iter__(self) -> Iterator[FileChange]:
        return self.files().file_changes()

    def __repr__(self) -> str:
        return f"Diff(from_rev={self._from!r}, to_rev={self._to!r}, path={self._path!r})"

    # --------------------------------------------------------
    # Private Methods
    # --------------------------------------------------------

    def _parse_full_diff(self) -> DiffSet:
        return DiffSet.from_diff_content(self.patch(), resolver=self.source)
