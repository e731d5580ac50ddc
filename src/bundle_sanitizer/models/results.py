from __future__ import annotations

from pathlib import Path

from pydantic import ConfigDict, Field, computed_field

from bundle_sanitizer.models.common import StrictModel
from bundle_sanitizer.models.enums import FileOutcome


class SanitizeResult(StrictModel):
    """Outcome of sanitizing one file."""

    path: Path
    modified: bool
    match_count: int = Field(default=0, ge=0)
    chars_removed: int = Field(default=0, ge=0)

    @property
    def outcome(self) -> FileOutcome:
        return FileOutcome.MODIFIED if self.modified else FileOutcome.UNCHANGED


class RunSummary(StrictModel):
    """Aggregated statistics for one run.

    Values are never mutated in place; `fold` returns a new summary so the
    driver can reduce per-file outcomes without shared counters.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    modified: int = 0
    unchanged: int = 0
    errors: int = 0
    chars_removed: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.modified + self.unchanged + self.errors

    def fold(self, outcome: FileOutcome, *, chars_removed: int = 0) -> "RunSummary":
        """Return a new summary with one more file outcome counted."""

        if outcome == FileOutcome.MODIFIED:
            return self.model_copy(
                update={
                    "modified": self.modified + 1,
                    "chars_removed": self.chars_removed + chars_removed,
                }
            )
        if outcome == FileOutcome.UNCHANGED:
            return self.model_copy(update={"unchanged": self.unchanged + 1})
        return self.model_copy(update={"errors": self.errors + 1})
