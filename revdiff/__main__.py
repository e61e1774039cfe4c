#!/usr/bin/env python3
"""CLI entry point for revdiff.

Usage:
    python -m revdiff <command> [options]
    revdiff <command> [options]

Commands:
    diff        Show stats, files, name-status or patch for a revision range
    parse-diff  Parse a unified diff from stdin or a file
    blob        Write one side of a changed file to stdout
"""

from __future__ import annotations

import argparse
import sys

from revdiff.commands.blob import cmd_blob
from revdiff.commands.diff import VIEWS, cmd_diff
from revdiff.commands.parse_diff import cmd_parse_diff
from revdiff.domain.diff_source_type import DiffSourceType
from revdiff.domain.settings import Settings, SettingsError


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        help="Path to settings YAML (default: <repo-path>/.revdiff.yml if present)",
    )
    parser.add_argument(
        "--source",
        choices=[member.value for member in DiffSourceType if member != DiffSourceType.STATIC],
        help="Diff source (default: local, or the settings file value)",
    )
    parser.add_argument(
        "--repo-path",
        help="Path to local git repository (default: current directory)",
    )
    parser.add_argument(
        "--repo",
        help="GitHub repository in owner/repo format (github source)",
    )
    parser.add_argument(
        "--encoding",
        help="Encoding of raw diff output (default: utf-8)",
    )


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.load(args.config, repo_path=args.repo_path or ".")
    return settings.with_overrides(
        source=DiffSourceType.from_string(args.source) if args.source else None,
        repo_path=args.repo_path,
        repo=args.repo,
        encoding=args.encoding,
    )


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Parse and query git diffs between revisions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  diff        Show stats, files, name-status or patch for a revision range
  parse-diff  Parse a unified diff from stdin or a file
  blob        Write one side of a changed file to stdout

Examples:
  revdiff diff HEAD~1 HEAD --show stats
  revdiff diff main feature --path src/ --show files --format json
  revdiff diff v1.0 v1.1 --source github --repo owner/repo --show name-status
  git diff | revdiff parse-diff --format text
  revdiff blob HEAD~1 HEAD README.md --side src
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # diff command
    parser_diff = subparsers.add_parser(
        "diff",
        help="Show stats, files, name-status or patch for a revision range",
    )
    parser_diff.add_argument("from_rev", nargs="?", help="Starting revision")
    parser_diff.add_argument("to_rev", nargs="?", help="Ending revision")
    parser_diff.add_argument("--path", help="Limit the diff to this path")
    parser_diff.add_argument(
        "--show",
        choices=VIEWS,
        default="files",
        help="What to show (default: files)",
    )
    parser_diff.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )
    _add_source_arguments(parser_diff)

    # parse-diff command
    parser_parse_diff = subparsers.add_parser(
        "parse-diff",
        help="Parse a unified diff and output structured file information",
    )
    parser_parse_diff.add_argument(
        "--input-file",
        help="Path to diff file. If not provided, reads from stdin",
    )
    parser_parse_diff.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)",
    )
    parser_parse_diff.add_argument(
        "--no-patch",
        action="store_true",
        help="Omit per-file patch text from JSON output",
    )
    parser_parse_diff.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the input diff (default: utf-8)",
    )

    # blob command
    parser_blob = subparsers.add_parser(
        "blob",
        help="Write one side of a changed file to stdout",
    )
    parser_blob.add_argument("from_rev", help="Starting revision")
    parser_blob.add_argument("to_rev", help="Ending revision")
    parser_blob.add_argument("file_path", help="Path of a file in the diff")
    parser_blob.add_argument(
        "--side",
        choices=["src", "dst"],
        default="dst",
        help="Which side of the change to read (default: dst)",
    )
    _add_source_arguments(parser_blob)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "parse-diff":
        return cmd_parse_diff(
            input_file=args.input_file,
            output_format=args.format,
            include_patch=not args.no_patch,
            encoding=args.encoding,
        )

    try:
        settings = _resolve_settings(args)
    except SettingsError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    # Route to command implementations with explicit parameters
    if args.command == "diff":
        return cmd_diff(
            settings,
            from_rev=args.from_rev,
            to_rev=args.to_rev,
            path=args.path,
            view=args.show,
            output_format=args.format,
        )

    elif args.command == "blob":
        return cmd_blob(
            settings,
            file_path=args.file_path,
            from_rev=args.from_rev,
            to_rev=args.to_rev,
            side=args.side,
        )

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
