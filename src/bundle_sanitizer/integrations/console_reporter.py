from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bundle_sanitizer.models.results import RunSummary, SanitizeResult


def printable(text: str) -> str:
    """Escape markup and replace undecodable filename bytes for output."""

    # scandir yields lone surrogates for non-UTF-8 names; they cannot be encoded.
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "replace")
    text = raw.decode("utf-8", "replace")
    return escape(text)


def display_path(path: Path) -> str:
    """Render `path` relative to the working directory when possible."""

    try:
        shown = os.path.relpath(path)
    except ValueError:
        # Different drive on Windows.
        shown = str(path)
    return printable(shown)


class ConsoleReporter:
    """Rich console implementation of the run reporter port."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def inputs_received(self, tokens: Sequence[str]) -> None:
        self.console.print(f"[cyan]Inputs:[/cyan] {printable(', '.join(tokens))}")

    def token_started(self, token: str, *, is_pattern: bool) -> None:
        kind = "file pattern" if is_pattern else "directory (recursive)"
        self.console.print(f"\n[cyan]Processing[/cyan] {printable(token)} [dim]as {kind}[/dim]")

    def token_collected(self, token: str, files: Sequence[Path], *, is_pattern: bool) -> None:
        self.console.print(f"  found {len(files)} file(s)")
        if not is_pattern:
            return
        for index, path in enumerate(files, start=1):
            self.console.print(f"    {index}. {display_path(path)}")

    def collection_error(self, target: str, message: str) -> None:
        self.err_console.print(f"[red]Error:[/red] {printable(target)}: {printable(message)}")

    def no_files(self) -> None:
        self.err_console.print("\n[yellow]Warning: no .js files found; nothing to do.[/yellow]")
        self.console.print("[dim]Hint: check that the paths or patterns are correct.[/dim]")

    def files_planned(self, files: Sequence[Path]) -> None:
        self.console.print(f"\n[cyan]Cleaning {len(files)} file(s):[/cyan]")
        for index, path in enumerate(files, start=1):
            self.console.print(f"  {index}. {display_path(path)}")
        self.console.print()

    def file_sanitized(self, result: SanitizeResult) -> None:
        shown = display_path(result.path)
        if result.modified:
            self.console.print(
                f"[green]cleaned[/green] {shown} "
                f"({result.match_count} match(es), {result.chars_removed} chars removed)"
            )
        else:
            self.console.print(f"[dim]unchanged[/dim] {shown}")

    def file_failed(self, path: Path, message: str) -> None:
        self.err_console.print(
            f"[red]Error:[/red] failed to process {display_path(path)}: {printable(message)}"
        )

    def summary(self, summary: RunSummary) -> None:
        table = Table(title="Results", show_header=False)
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_row("Cleaned", str(summary.modified))
        table.add_row("Unchanged", str(summary.unchanged))
        table.add_row("Errors", str(summary.errors))
        table.add_row("Total files", str(summary.total))
        table.add_row("Chars removed", str(summary.chars_removed))
        self.console.print()
        self.console.print(table)
