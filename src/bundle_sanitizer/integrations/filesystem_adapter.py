from __future__ import annotations

import asyncio
import os
import stat
from pathlib import Path


def _scan_sorted(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF line endings intact on rewrite.
    with open(path, "r", encoding="utf-8", newline="") as fh:
        return fh.read()


def _write_text(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)


async def list_entries(directory: Path) -> list[os.DirEntry[str]]:
    """List direct entries of a directory, sorted by name."""

    return await asyncio.to_thread(_scan_sorted, directory)


async def is_directory(path: Path) -> bool:
    """Stat `path` and report whether it is a directory.

    Raises `OSError` when the path cannot be stat'ed.
    """

    st = await asyncio.to_thread(os.stat, path)
    return stat.S_ISDIR(st.st_mode)


async def read_text(path: Path) -> str:
    """Read a whole file as UTF-8 without newline translation."""

    return await asyncio.to_thread(_read_text, path)


async def write_text(path: Path, text: str) -> None:
    """Overwrite a file with UTF-8 text without newline translation."""

    await asyncio.to_thread(_write_text, path, text)
