from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from bundle_sanitizer.models.results import RunSummary, SanitizeResult


class RunReporter(Protocol):
    """Output contract used by collection and sanitize services."""

    def inputs_received(self, tokens: Sequence[str]) -> None:
        """Announce the raw command-line tokens."""

        ...

    def token_started(self, token: str, *, is_pattern: bool) -> None:
        """Announce that one input token is being expanded."""

        ...

    def token_collected(self, token: str, files: Sequence[Path], *, is_pattern: bool) -> None:
        """Report the files one token expanded to."""

        ...

    def collection_error(self, target: str, message: str) -> None:
        """Report a non-fatal failure while expanding a token or directory."""

        ...

    def no_files(self) -> None:
        """Warn that collection produced nothing to process."""

        ...

    def files_planned(self, files: Sequence[Path]) -> None:
        """List the deduplicated files about to be sanitized."""

        ...

    def file_sanitized(self, result: SanitizeResult) -> None:
        """Report one successful sanitize attempt (modified or not)."""

        ...

    def file_failed(self, path: Path, message: str) -> None:
        """Report a per-file read or write failure."""

        ...

    def summary(self, summary: RunSummary) -> None:
        """Print final tallies."""

        ...
