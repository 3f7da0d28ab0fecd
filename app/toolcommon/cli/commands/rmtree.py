"""Resilient directory deletion command.

Provides the `toolcommon rmtree` command, which removes directory trees
while clearing read-only files and retrying while a tree is in use.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from toolcommon.filesystem.deleter import ResilientDeleter
from toolcommon.filesystem.sink import ConsoleSink
from toolcommon.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def rmtree(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Directories to delete."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
) -> None:
    """Delete directory trees, retrying on transient failures.

    Examples:
        toolcommon rmtree build/ obj/
        toolcommon rmtree --dry-run /tmp/staging
    """
    if dry_run:
        _print_plan(paths)
        print_info(f"Dry-run: {len(paths)} path(s) would be deleted.")
        return

    deleter = ResilientDeleter(ConsoleSink())
    failed: list[Path] = []
    for path in paths:
        try:
            deleted = deleter.delete(str(path))
        except OSError as e:
            print_error(escape(f"Cannot delete {path}: {e}"))
            deleted = False
        if not deleted:
            failed.append(path)

    if failed:
        print_warning(f"{len(paths) - len(failed)} deleted, {len(failed)} failed")
        raise typer.Exit(code=1)

    print_success(f"All {len(paths)} path(s) deleted.")


def _print_plan(paths: list[Path]) -> None:
    """Display planned deletions."""
    table = Table(title="Planned Deletions (dry-run)", show_lines=False)
    table.add_column("Path", style="bold")
    table.add_column("Exists", width=8)

    for path in paths:
        table.add_row(escape(str(path)), "yes" if path.exists() else "[muted]no[/]")

    console.print(table)
