from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, Sequence

from bundle_sanitizer.integrations.filesystem_adapter import is_directory, list_entries
from bundle_sanitizer.patterns import compile_name_pattern, split_pattern
from bundle_sanitizer.rules import TARGET_EXTENSION
from bundle_sanitizer.services.ports import RunReporter


async def collect_recursive(
    directory: Path,
    reporter: RunReporter,
    *,
    extension: str = TARGET_EXTENSION,
) -> list[Path]:
    """Walk `directory` and return every file ending with `extension`.

    Symlinks are not followed. A directory that cannot be listed is reported
    and skipped; siblings and parents are still collected.
    """

    files: list[Path] = []
    try:
        entries = await list_entries(directory)
    except OSError as exc:
        reporter.collection_error(str(directory), exc.strerror or str(exc))
        return files

    for entry in entries:
        full_path = directory / entry.name
        if entry.is_dir(follow_symlinks=False):
            files.extend(await collect_recursive(full_path, reporter, extension=extension))
        elif entry.is_file(follow_symlinks=False) and entry.name.endswith(extension):
            files.append(full_path)
    return files


async def collect_by_pattern(pattern: str, reporter: RunReporter) -> list[Path]:
    """Return direct file children of the pattern's directory matching its name part."""

    directory, name_pattern = split_pattern(pattern)
    try:
        matcher = compile_name_pattern(name_pattern)
        entries = await list_entries(Path(directory))
    except (OSError, re.error) as exc:
        message = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        reporter.collection_error(pattern, message)
        return []

    return [
        Path(directory) / entry.name
        for entry in entries
        if entry.is_file(follow_symlinks=False) and matcher.fullmatch(entry.name)
    ]


class FileSet:
    """Insertion-ordered set of files keyed by absolute normalized path."""

    def __init__(self) -> None:
        self._items: dict[str, Path] = {}

    def add(self, path: Path) -> None:
        key = os.path.normcase(os.path.abspath(path))
        self._items.setdefault(key, path)

    def update(self, paths: Iterable[Path]) -> None:
        for path in paths:
            self.add(path)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items.values())


async def collect_inputs(tokens: Sequence[str], reporter: RunReporter) -> list[Path]:
    """Expand every input token and union the results, first occurrence wins."""

    file_set = FileSet()
    for token in tokens:
        is_pattern = "*" in token
        reporter.token_started(token, is_pattern=is_pattern)
        if is_pattern:
            files = await collect_by_pattern(token, reporter)
        else:
            path = Path(token)
            try:
                if not await is_directory(path):
                    reporter.collection_error(token, "not a directory")
                    continue
            except OSError as exc:
                reporter.collection_error(token, exc.strerror or str(exc))
                continue
            files = await collect_recursive(path, reporter)
        reporter.token_collected(token, files, is_pattern=is_pattern)
        file_set.update(files)
    return list(file_set)
