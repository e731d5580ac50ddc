from __future__ import annotations

from pathlib import Path
from typing import Sequence

from bundle_sanitizer.models.enums import FileOutcome
from bundle_sanitizer.models.results import RunSummary
from bundle_sanitizer.services.collect_service import collect_inputs
from bundle_sanitizer.services.ports import RunReporter
from bundle_sanitizer.services.sanitize_service import sanitize_file


async def sanitize_all(files: Sequence[Path], reporter: RunReporter) -> RunSummary:
    """Sanitize files one after another and fold outcomes into a summary."""

    summary = RunSummary()
    for path in files:
        try:
            result = await sanitize_file(path)
        except (OSError, UnicodeError) as exc:
            reporter.file_failed(path, str(exc))
            summary = summary.fold(FileOutcome.ERROR)
            continue
        reporter.file_sanitized(result)
        summary = summary.fold(result.outcome, chars_removed=result.chars_removed)
    return summary


async def run_cleanup(tokens: Sequence[str], reporter: RunReporter) -> RunSummary | None:
    """Collect files for all tokens and sanitize them.

    Returns None when no file was collected; there is nothing to summarize.
    """

    reporter.inputs_received(tokens)
    files = await collect_inputs(tokens, reporter)
    if not files:
        reporter.no_files()
        return None

    reporter.files_planned(files)
    summary = await sanitize_all(files, reporter)
    reporter.summary(summary)
    return summary
