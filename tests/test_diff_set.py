"""Tests for the DiffSet domain model.

Tests cover:
- Parsing raw text and bytes into an ordered mapping
- Lookup by path and NotFound behavior
- Restartable iteration
- JSON serialization
"""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from revdiff.domain.diff_set import DiffSet, FileChangeNotFoundError
from revdiff.domain.file_change import FileChange

SAMPLE_DIFF = (
    "diff --git a/src/b.py b/src/b.py\n"
    "index 1234567..89abcde 100644\n"
    "--- a/src/b.py\n"
    "+++ b/src/b.py\n"
    "@@ -1 +1 @@\n"
    "-x = 1\n"
    "+x = 2\n"
    "diff --git a/src/a.png b/src/a.png\n"
    "Binary files a/src/a.png and b/src/a.png differ\n"
)


class TestDiffSetParsing(unittest.TestCase):
    """Tests for DiffSet.from_diff_content."""

    def test_files_are_in_diff_order(self):
        """Test that iteration follows the raw diff, not sorted order."""
        diff_set = DiffSet.from_diff_content(SAMPLE_DIFF)

        self.assertEqual(list(diff_set), ["src/b.py", "src/a.png"])
        self.assertEqual(diff_set.paths, ["src/b.py", "src/a.png"])
        self.assertEqual(len(diff_set), 2)

    def test_bytes_input_is_decoded(self):
        """Test that bytes are normalized before parsing."""
        raw = b"diff --git a/caf\xe9.txt b/caf\xe9.txt\n+x"

        diff_set = DiffSet.from_diff_content(raw, encoding="latin-1")

        self.assertIn("café.txt", diff_set)

    def test_invalid_bytes_do_not_fail_the_parse(self):
        """Test that undecodable bytes are replaced rather than raising."""
        raw = b"diff --git a/x.txt b/x.txt\n+\xff\xfe"

        diff_set = DiffSet.from_diff_content(raw)

        self.assertIn("\ufffd", diff_set["x.txt"].patch)

    def test_resolver_reaches_file_changes(self):
        """Test that the resolver is attached to parsed records."""
        resolver = MagicMock()
        resolver.resolve_blob.return_value = b"x = 2\n"

        diff_set = DiffSet.from_diff_content(SAMPLE_DIFF, resolver=resolver)

        self.assertEqual(diff_set["src/b.py"].blob(), b"x = 2\n")
        resolver.resolve_blob.assert_called_once_with("89abcde")

    def test_empty_input(self):
        """Test that empty text yields an empty DiffSet."""
        diff_set = DiffSet.from_diff_content("")

        self.assertEqual(len(diff_set), 0)
        self.assertFalse(diff_set)


class TestDiffSetAccess(unittest.TestCase):
    """Tests for lookup and iteration."""

    def setUp(self):
        """Set up test fixtures."""
        self.diff_set = DiffSet.from_diff_content(SAMPLE_DIFF)

    def test_lookup_returns_file_change(self):
        """Test that indexing by path returns the record."""
        change = self.diff_set["src/b.py"]

        self.assertIsInstance(change, FileChange)
        self.assertEqual(change.path, "src/b.py")

    def test_missing_path_raises_not_found(self):
        """Test that unknown paths raise FileChangeNotFoundError."""
        with self.assertRaises(FileChangeNotFoundError):
            self.diff_set["nope.py"]

    def test_not_found_is_a_key_error(self):
        """Test that Mapping helpers like get() keep working."""
        self.assertIsNone(self.diff_set.get("nope.py"))
        self.assertNotIn("nope.py", self.diff_set)

    def test_iteration_is_restartable(self):
        """Test that iterating twice yields the same records."""
        first = list(self.diff_set.file_changes())
        second = list(self.diff_set.file_changes())

        self.assertEqual([c.path for c in first], ["src/b.py", "src/a.png"])
        self.assertEqual(first, second)

    def test_binary_files(self):
        """Test that binary_files() returns only flagged records."""
        self.assertEqual([c.path for c in self.diff_set.binary_files()], ["src/a.png"])

    def test_input_dict_is_copied(self):
        """Test that the DiffSet does not alias the dict it was built from."""
        files = {"a": FileChange(path="a", patch="diff --git a/a b/a")}
        diff_set = DiffSet(files)

        files.clear()

        self.assertEqual(list(diff_set), ["a"])


class TestDiffSetToDict(unittest.TestCase):
    """Tests for DiffSet serialization."""

    def test_to_dict_lists_files_in_order(self):
        """Test the serialized shape."""
        data = DiffSet.from_diff_content(SAMPLE_DIFF).to_dict()

        self.assertEqual(data["file_count"], 2)
        self.assertEqual([f["path"] for f in data["files"]], ["src/b.py", "src/a.png"])
        self.assertEqual(data["files"][0]["mode"], "100644")
        self.assertTrue(data["files"][1]["binary"])
        self.assertIn("patch", data["files"][0])

    def test_to_dict_without_patch(self):
        """Test that include_patch=False drops patch text."""
        data = DiffSet.from_diff_content(SAMPLE_DIFF).to_dict(include_patch=False)

        self.assertNotIn("patch", data["files"][0])


if __name__ == "__main__":
    unittest.main()
