"""CLI package for toolcommon.

This package contains the Typer application and all subcommands.
"""

from toolcommon.cli.main import app

__all__ = ["app"]
