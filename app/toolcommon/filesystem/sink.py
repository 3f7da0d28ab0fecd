"""Warning messages and message sinks for filesystem operations.

A message sink receives non-fatal, human-readable warnings from an
operation without halting it. Sinks are fire-and-forget: they return
nothing and never raise on behalf of the caller.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from rich.markup import escape

from toolcommon.utils.formatting import print_warning

logger = logging.getLogger(__name__)


class WarningKind(str, Enum):
    """Kind of deletion warning.

    Attributes:
        ACCESS_DENIED_FOR_DELETION: Access was still denied after read-only
            attributes were cleared.
        DIRECTORY_IN_USE: The directory stayed in use by another process
            for every retry.
    """

    ACCESS_DENIED_FOR_DELETION = "access_denied_for_deletion"
    DIRECTORY_IN_USE = "directory_in_use"


_MESSAGES: dict[WarningKind, str] = {
    WarningKind.ACCESS_DENIED_FOR_DELETION: "Access denied; cannot delete '{path}'.",
    WarningKind.DIRECTORY_IN_USE: (
        "The directory '{path}' cannot be deleted because it is still in use."
    ),
}


@dataclass(frozen=True, slots=True)
class DeletionWarning:
    """A non-fatal warning raised while deleting a directory tree.

    Attributes:
        kind: Warning category.
        path: Path of the tree that could not be deleted.
    """

    kind: WarningKind
    path: str

    @property
    def message(self) -> str:
        """Human-readable warning text."""
        return _MESSAGES[self.kind].format(path=self.path)


def access_denied_for_deletion(path: str) -> DeletionWarning:
    """Build an access-denied warning for the given path."""
    return DeletionWarning(kind=WarningKind.ACCESS_DENIED_FOR_DELETION, path=path)


def directory_in_use(path: str) -> DeletionWarning:
    """Build a directory-in-use warning for the given path."""
    return DeletionWarning(kind=WarningKind.DIRECTORY_IN_USE, path=path)


class MessageSink(Protocol):
    """Capability for reporting non-fatal warnings."""

    def on_message(self, warning: DeletionWarning) -> None:
        """Report a warning."""
        ...


class LoggingSink:
    """Sink that writes warnings to the module logger."""

    def on_message(self, warning: DeletionWarning) -> None:
        logger.warning("%s", warning.message)


class ConsoleSink:
    """Sink that prints warnings to stderr through the Rich console."""

    def on_message(self, warning: DeletionWarning) -> None:
        print_warning(escape(warning.message))


class CollectingSink:
    """Sink that keeps every warning it receives, in order.

    Attributes:
        messages: Warnings received so far.
    """

    def __init__(self) -> None:
        self.messages: list[DeletionWarning] = []

    def on_message(self, warning: DeletionWarning) -> None:
        self.messages.append(warning)

    def kinds(self) -> list[WarningKind]:
        """Return the kinds of the collected warnings."""
        return [m.kind for m in self.messages]
