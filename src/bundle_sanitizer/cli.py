from __future__ import annotations

import asyncio
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from bundle_sanitizer.integrations.console_reporter import ConsoleReporter
from bundle_sanitizer.services.run_service import run_cleanup

app = typer.Typer(
    help="Strip `export {};` and `__esModule` interop flags from built .js files.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

USAGE_EXAMPLES = (
    "bundle-sanitize ./build/          # directory",
    "bundle-sanitize './build/*.js'    # pattern",
    "bundle-sanitize ./build ./dist    # several directories",
)


@app.command()
def sanitize(
    paths: Optional[List[str]] = typer.Argument(
        None,
        help="Directories (searched recursively) or patterns with `*` (e.g., build/*.js)",
        show_default=False,
    ),
) -> None:
    """
    Remove bundler boilerplate from .js files in place.

    Only files where something matched are rewritten. Per-file failures are
    reported and counted but do not change the exit code.
    """

    if not paths:
        err_console.print("[red]Error: no directory or file pattern given.[/red]")
        err_console.print("Usage examples:")
        for line in USAGE_EXAMPLES:
            err_console.print(f"  {escape(line)}")
        raise typer.Exit(code=1)

    reporter = ConsoleReporter(console, err_console)
    try:
        asyncio.run(run_cleanup(paths, reporter))
    except Exception as exc:
        err_console.print(f"[red]Unexpected error:[/red] {escape(repr(exc))}")
        raise typer.Exit(code=1) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
