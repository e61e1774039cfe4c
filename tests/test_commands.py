"""Tests for CLI commands.

Tests cover:
- parse-diff reading a file and printing JSON or text
- diff command views and error handling
- blob command output and exit codes
- build_diff wiring from settings
- Argument routing in the entry point
"""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from revdiff.__main__ import main
from revdiff.commands._source import build_diff
from revdiff.commands.blob import cmd_blob
from revdiff.commands.diff import cmd_diff
from revdiff.commands.parse_diff import cmd_parse_diff
from revdiff.domain.diff_source_type import DiffSourceType
from revdiff.domain.diff_stats import DiffStats
from revdiff.domain.name_status import NameStatus
from revdiff.domain.settings import Settings
from revdiff.infrastructure.diff_source.local_source import LocalGitDiffSource
from revdiff.infrastructure.diff_source.static_source import StaticDiffSource
from revdiff.services.diff import Diff


# ============================================================
# Test Fixtures
# ============================================================

SAMPLE_DIFF = (
    "diff --git a/lib/app.rb b/lib/app.rb\n"
    "index 1234567..89abcde 100644\n"
    "--- a/lib/app.rb\n"
    "+++ b/lib/app.rb\n"
    "@@ -1 +1 @@\n"
    "-OLD = 1\n"
    "+NEW = 1\n"
    "diff --git a/bin/run b/bin/run\n"
    "new file mode 100755\n"
    "index 0000000..abcdef1\n"
    "diff --git a/img/logo.png b/img/logo.png\n"
    "Binary files a/img/logo.png and b/img/logo.png differ\n"
)


def make_diff() -> Diff:
    """Create a Diff over canned data."""
    source = StaticDiffSource(
        SAMPLE_DIFF,
        stats=DiffStats.from_numstat("1\t1\tlib/app.rb\n0\t0\tbin/run\n-\t-\timg/logo.png"),
        name_status=NameStatus.from_output("M\tlib/app.rb\nA\tbin/run\nM\timg/logo.png"),
        blobs={"89abcde": b"NEW = 1\n"},
    )
    return Diff(source, "HEAD~1", "HEAD")


# ============================================================
# parse-diff Tests
# ============================================================


class TestParseDiffCommand(unittest.TestCase):
    """Tests for cmd_parse_diff."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.diff_path = Path(self.temp_dir.name) / "changes.diff"
        self.diff_path.write_bytes(SAMPLE_DIFF.encode("utf-8"))

    def tearDown(self):
        """Clean up temporary files."""
        self.temp_dir.cleanup()

    def test_json_output(self):
        """Test that JSON lists files in diff order."""
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            exit_code = cmd_parse_diff(input_file=str(self.diff_path))

        self.assertEqual(exit_code, 0)
        data = json.loads(stdout.getvalue())
        self.assertEqual(data["file_count"], 3)
        self.assertEqual(
            [f["path"] for f in data["files"]], ["lib/app.rb", "bin/run", "img/logo.png"]
        )
        self.assertEqual(data["files"][1]["type"], "new")
        self.assertTrue(data["files"][2]["binary"])

    def test_json_output_without_patch(self):
        """Test that include_patch=False omits patch text."""
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cmd_parse_diff(input_file=str(self.diff_path), include_patch=False)

        data = json.loads(stdout.getvalue())
        self.assertNotIn("patch", data["files"][0])

    def test_text_output(self):
        """Test the human-readable listing."""
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            exit_code = cmd_parse_diff(input_file=str(self.diff_path), output_format="text")

        self.assertEqual(exit_code, 0)
        output = stdout.getvalue()
        self.assertIn("Files changed: 3", output)
        self.assertIn("1234567..89abcde 100644 lib/app.rb", output)
        self.assertIn("img/logo.png [binary]", output)

    def test_missing_file(self):
        """Test that a missing input file returns 1."""
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = cmd_parse_diff(input_file=str(self.diff_path) + ".missing")

        self.assertEqual(exit_code, 1)
        self.assertIn("Input file not found", stderr.getvalue())

    def test_reads_stdin_when_no_file(self):
        """Test that stdin is used when no input file is given."""
        fake_stdin = MagicMock()
        fake_stdin.buffer.read.return_value = SAMPLE_DIFF.encode("utf-8")

        with patch("sys.stdin", fake_stdin), patch(
            "sys.stdout", new_callable=io.StringIO
        ) as stdout:
            exit_code = cmd_parse_diff()

        self.assertEqual(exit_code, 0)
        self.assertEqual(json.loads(stdout.getvalue())["file_count"], 3)


# ============================================================
# diff Tests
# ============================================================


@patch("revdiff.commands.diff.build_diff")
class TestDiffCommand(unittest.TestCase):
    """Tests for cmd_diff."""

    def run_view(self, mock_build, view, output_format="text"):
        mock_build.return_value = make_diff()
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            exit_code = cmd_diff(
                Settings(), "HEAD~1", "HEAD", view=view, output_format=output_format
            )
        self.assertEqual(exit_code, 0)
        return stdout.getvalue()

    def test_stats_json(self, mock_build):
        """Test the stats view as JSON."""
        data = json.loads(self.run_view(mock_build, "stats", "json"))

        self.assertEqual(
            data["total"], {"files": 3, "lines": 2, "insertions": 1, "deletions": 1}
        )

    def test_stats_text(self, mock_build):
        """Test the stats summary line."""
        output = self.run_view(mock_build, "stats")

        self.assertIn("3 files changed, 1 insertions(+), 1 deletions(-)", output)

    def test_files_json(self, mock_build):
        """Test the files view as JSON."""
        data = json.loads(self.run_view(mock_build, "files", "json"))

        self.assertEqual(data["file_count"], 3)

    def test_name_status_text(self, mock_build):
        """Test the name-status view."""
        output = self.run_view(mock_build, "name-status")

        self.assertIn("A\tbin/run", output)

    def test_patch(self, mock_build):
        """Test that the patch view prints the raw diff."""
        output = self.run_view(mock_build, "patch")

        self.assertEqual(output, SAMPLE_DIFF + "\n")

    def test_passes_request_to_build_diff(self, mock_build):
        """Test that revisions and path reach build_diff."""
        mock_build.return_value = make_diff()
        settings = Settings()

        with patch("sys.stdout", new_callable=io.StringIO):
            cmd_diff(settings, "a", "b", path="lib/")

        mock_build.assert_called_once_with(settings, "a", "b", "lib/")

    def test_backend_failure_returns_1(self, mock_build):
        """Test that errors are reported on stderr."""
        mock_build.side_effect = ValueError("repo_owner and repo_name are required")

        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = cmd_diff(Settings(), "a", "b")

        self.assertEqual(exit_code, 1)
        self.assertIn("Error computing diff", stderr.getvalue())


# ============================================================
# blob Tests
# ============================================================


@patch("revdiff.commands.blob.build_diff")
class TestBlobCommand(unittest.TestCase):
    """Tests for cmd_blob."""

    def test_writes_blob_bytes(self, mock_build):
        """Test that blob bytes go to stdout."""
        mock_build.return_value = make_diff()
        fake_stdout = MagicMock()

        with patch("sys.stdout", fake_stdout):
            exit_code = cmd_blob(Settings(), "lib/app.rb", "HEAD~1", "HEAD")

        self.assertEqual(exit_code, 0)
        fake_stdout.buffer.write.assert_called_once_with(b"NEW = 1\n")

    def test_absent_side_returns_2(self, mock_build):
        """Test that an added file has no source content."""
        mock_build.return_value = make_diff()

        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = cmd_blob(Settings(), "bin/run", "HEAD~1", "HEAD", side="src")

        self.assertEqual(exit_code, 2)
        self.assertIn("has no src content", stderr.getvalue())

    def test_unknown_path_returns_1(self, mock_build):
        """Test that a path outside the diff is reported."""
        mock_build.return_value = make_diff()

        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = cmd_blob(Settings(), "nope.rb", "HEAD~1", "HEAD")

        self.assertEqual(exit_code, 1)
        self.assertIn("File not in diff", stderr.getvalue())

    def test_missing_blob_returns_1(self, mock_build):
        """Test that an unresolvable id is reported."""
        mock_build.return_value = make_diff()

        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = cmd_blob(Settings(), "lib/app.rb", "HEAD~1", "HEAD", side="src")

        self.assertEqual(exit_code, 1)
        self.assertIn("Blob not found", stderr.getvalue())


# ============================================================
# Wiring Tests
# ============================================================


class TestBuildDiff(unittest.TestCase):
    """Tests for build_diff."""

    def test_local_settings(self):
        """Test that local settings produce a Diff over the git CLI."""
        settings = Settings(source=DiffSourceType.LOCAL, repo_path="/repo", encoding="latin-1")

        diff = build_diff(settings, "a", "b", "lib/")

        self.assertIsInstance(diff.source, LocalGitDiffSource)
        self.assertEqual((diff.from_rev, diff.to_rev, diff.path_filter), ("a", "b", "lib/"))
        self.assertEqual(diff.encoding, "latin-1")

    def test_github_settings_without_repo(self):
        """Test that github settings need a repository."""
        with self.assertRaises(ValueError):
            build_diff(Settings(source=DiffSourceType.GITHUB), "a", "b")


class TestMain(unittest.TestCase):
    """Tests for the CLI entry point."""

    def test_no_command_prints_help(self):
        """Test that running without a command returns 1."""
        with patch("sys.argv", ["revdiff"]), patch("sys.stdout", new_callable=io.StringIO):
            self.assertEqual(main(), 1)

    @patch("revdiff.__main__.cmd_parse_diff", return_value=0)
    def test_routes_parse_diff(self, mock_cmd):
        """Test that parse-diff arguments are passed through."""
        argv = ["revdiff", "parse-diff", "--input-file", "x.diff", "--format", "text", "--no-patch"]
        with patch("sys.argv", argv):
            self.assertEqual(main(), 0)

        mock_cmd.assert_called_once_with(
            input_file="x.diff",
            output_format="text",
            include_patch=False,
            encoding="utf-8",
        )

    @patch("revdiff.__main__.cmd_diff", return_value=0)
    def test_routes_diff_with_overrides(self, mock_cmd):
        """Test that CLI flags override settings for the diff command."""
        with tempfile.TemporaryDirectory() as repo:
            argv = [
                "revdiff", "diff", "HEAD~1", "HEAD",
                "--repo-path", repo, "--source", "github", "--repo", "o/r",
                "--show", "stats",
            ]
            with patch("sys.argv", argv):
                self.assertEqual(main(), 0)

        settings = mock_cmd.call_args[0][0]
        self.assertEqual(settings.source, DiffSourceType.GITHUB)
        self.assertEqual(settings.repo, "o/r")
        self.assertEqual(mock_cmd.call_args[1]["view"], "stats")
        self.assertEqual(mock_cmd.call_args[1]["from_rev"], "HEAD~1")


if __name__ == "__main__":
    unittest.main()
