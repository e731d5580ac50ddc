from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from pydantic import ValidationError

from bundle_sanitizer.models.enums import FileOutcome
from bundle_sanitizer.models.results import RunSummary
from bundle_sanitizer.services.run_service import run_cleanup, sanitize_all


def test_run_summary_fold_is_pure() -> None:
    """Folding returns new values and leaves the original untouched."""

    start = RunSummary()
    after = start.fold(FileOutcome.MODIFIED, chars_removed=12).fold(FileOutcome.UNCHANGED)
    after = after.fold(FileOutcome.ERROR).fold(FileOutcome.MODIFIED, chars_removed=3)

    assert start.total == 0
    assert (after.modified, after.unchanged, after.errors) == (2, 1, 1)
    assert after.chars_removed == 15
    assert after.total == 4
    with pytest.raises(ValidationError):
        start.modified = 5


def test_sanitize_all_isolates_failures(tmp_path: Path, make_tree, reporter) -> None:
    """One failing file is counted and the rest are still processed."""

    good, plain = make_tree({"good.js": "export {};\nrun();\n", "plain.js": "run();\n"})
    missing = tmp_path / "vanished.js"

    summary = asyncio.run(sanitize_all([missing, good, plain], reporter))

    assert (summary.modified, summary.unchanged, summary.errors) == (1, 1, 1)
    assert summary.total == 3
    assert summary.chars_removed == len("export {};\n")
    assert good.read_text(encoding="utf-8") == "run();\n"
    assert [path for path, _ in reporter.failures] == [missing]


def test_run_cleanup_end_to_end(tmp_path: Path, make_tree, reporter) -> None:
    """Collection feeds sanitize; overlapping tokens process a file once."""

    make_tree(
        {
            "dist/index.js": 'Object.defineProperty(exports, "__esModule", { value: !0 });\nfoo();',
            "dist/lib/util.js": "export {};\n",
            "dist/lib/clean.js": "const y = 2;",
            "dist/notes.txt": "export {};",
        }
    )
    dist = tmp_path / "dist"

    summary = asyncio.run(run_cleanup([str(dist), str(dist / "*.js")], reporter))

    assert summary is not None
    assert summary.total == 3
    assert summary.modified == 2
    assert summary.unchanged == 1
    assert (dist / "index.js").read_text(encoding="utf-8") == "foo();"
    assert (dist / "lib" / "util.js").read_text(encoding="utf-8") == ""
    assert (dist / "notes.txt").read_text(encoding="utf-8") == "export {};"
    assert reporter.events[-1] == ("summary", summary)


def test_run_cleanup_nothing_found(tmp_path: Path, reporter) -> None:
    """No collected files is a warning, not an error."""

    result = asyncio.run(run_cleanup([str(tmp_path)], reporter))

    assert result is None
    assert ("no_files", None) in reporter.events
    assert not any(event == "summary" for event, _ in reporter.events)
