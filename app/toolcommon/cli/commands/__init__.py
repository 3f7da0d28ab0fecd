"""CLI commands for toolcommon.

This package contains all subcommand implementations.
"""

from toolcommon.cli.commands import config, culture, find, rmtree

__all__ = ["config", "culture", "find", "rmtree"]
