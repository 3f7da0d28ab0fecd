"""Search path command.

Provides the `toolcommon find` command, which lists the files matching a
search path such as ``../src/*.wxs``.
"""

from typing import Annotated

import typer
from rich.markup import escape

from toolcommon.core.search import FileNotFoundForPatternError, get_files
from toolcommon.utils.formatting import console, print_error


def find(
    search_path: Annotated[
        str,
        typer.Argument(help="Search path; the last segment may contain wildcards."),
    ],
    file_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Kind of file, used in error messages."),
    ] = "Source",
) -> None:
    """List files matching a search path."""
    try:
        files = get_files(search_path, file_type)
    except FileNotFoundForPatternError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    for file_path in files:
        console.print(file_path, highlight=False, markup=False, soft_wrap=True)
