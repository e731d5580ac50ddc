from __future__ import annotations

from enum import Enum


class FileOutcome(str, Enum):
    """Per-file result of one sanitize attempt."""

    MODIFIED = "modified"  # At least one rule matched and the file was rewritten.
    UNCHANGED = "unchanged"  # Nothing matched; file left untouched on disk.
    ERROR = "error"  # Read, decode or write failed.
