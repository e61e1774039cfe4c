"""Thin command orchestrators for the revdiff CLI."""

from .blob import cmd_blob
from .diff import cmd_diff
from .parse_diff import cmd_parse_diff

__all__ = ["cmd_blob", "cmd_diff", "cmd_parse_diff"]
