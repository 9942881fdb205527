"""Test-data harness for the title cleanup."""

from titletotags.harness.metadata import read_metadata, remove_metadata, write_metadata
from titletotags.harness.patterns import TITLE_PATTERNS, check_patterns, patterns_by_name
from titletotags.harness.runner import HarnessRunner

__all__ = [
    "TITLE_PATTERNS",
    "HarnessRunner",
    "check_patterns",
    "patterns_by_name",
    "read_metadata",
    "remove_metadata",
    "write_metadata",
]
