"""Filesystem helpers.

This module provides resilient directory deletion, read-only attribute
handling, and the warning sinks used to report deletion failures.
"""

from toolcommon.filesystem.attributes import (
    clear_tree_read_only,
    is_read_only,
    set_read_only,
    set_tree_read_only,
)
from toolcommon.filesystem.deleter import (
    RETRY_DELAY_SECONDS,
    RETRY_LIMIT,
    AttemptOutcome,
    ResilientDeleter,
    delete_directory,
)
from toolcommon.filesystem.sink import (
    CollectingSink,
    ConsoleSink,
    DeletionWarning,
    LoggingSink,
    MessageSink,
    WarningKind,
)

__all__ = [
    "RETRY_DELAY_SECONDS",
    "RETRY_LIMIT",
    "AttemptOutcome",
    "CollectingSink",
    "ConsoleSink",
    "DeletionWarning",
    "LoggingSink",
    "MessageSink",
    "ResilientDeleter",
    "WarningKind",
    "clear_tree_read_only",
    "delete_directory",
    "is_read_only",
    "set_read_only",
    "set_tree_read_only",
]
