from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import pytest

from bundle_sanitizer.models.results import RunSummary, SanitizeResult


class RecordingReporter:
    """Reporter stub that keeps every call for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def _names(self, name: str) -> list[Any]:
        return [payload for event, payload in self.events if event == name]

    @property
    def errors(self) -> list[tuple[str, str]]:
        return self._names("collection_error")

    @property
    def failures(self) -> list[tuple[Path, str]]:
        return self._names("file_failed")

    def inputs_received(self, tokens: Sequence[str]) -> None:
        self.events.append(("inputs_received", list(tokens)))

    def token_started(self, token: str, *, is_pattern: bool) -> None:
        self.events.append(("token_started", (token, is_pattern)))

    def token_collected(self, token: str, files: Sequence[Path], *, is_pattern: bool) -> None:
        self.events.append(("token_collected", (token, list(files))))

    def collection_error(self, target: str, message: str) -> None:
        self.events.append(("collection_error", (target, message)))

    def no_files(self) -> None:
        self.events.append(("no_files", None))

    def files_planned(self, files: Sequence[Path]) -> None:
        self.events.append(("files_planned", list(files)))

    def file_sanitized(self, result: SanitizeResult) -> None:
        self.events.append(("file_sanitized", result))

    def file_failed(self, path: Path, message: str) -> None:
        self.events.append(("file_failed", (path, message)))

    def summary(self, summary: RunSummary) -> None:
        self.events.append(("summary", summary))


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_tree(tmp_path: Path):
    """Return a helper creating `{relative path: content}` files under tmp_path."""

    def _make(files: dict[str, str], root: Path | None = None) -> list[Path]:
        base = root or tmp_path
        created: list[Path] = []
        for rel, content in files.items():
            path = base / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            created.append(path)
        return created

    return _make
