"""Resilient recursive directory deletion.

Removes a directory tree while tolerating read-only files and transient
"in use" errors. Unresolved failures are reported through a message sink
and surface to the caller as a False return value, never as an exception.
"""

import errno
import logging
import os
import shutil
import time
from enum import Enum

from toolcommon.filesystem.attributes import clear_tree_read_only
from toolcommon.filesystem.sink import (
    MessageSink,
    access_denied_for_deletion,
    directory_in_use,
)

logger = logging.getLogger(__name__)

RETRY_LIMIT = 3
RETRY_DELAY_SECONDS = 0.3

# errno values raised while another process still holds part of the tree
IN_USE_ERRNOS = frozenset({errno.EBUSY, errno.ETXTBSY, errno.ENOTEMPTY, errno.EAGAIN})

# ERROR_SHARING_VIOLATION, ERROR_LOCK_VIOLATION, ERROR_DIR_NOT_EMPTY
IN_USE_WINERRORS = frozenset({32, 33, 145})


class AttemptOutcome(str, Enum):
    """Result of a single removal attempt.

    Attributes:
        REMOVED: The tree was removed.
        ABSENT: The path did not exist.
        ACCESS_DENIED: A permission error stopped the removal.
        IN_USE: Part of the tree is held by another process.
    """

    REMOVED = "removed"
    ABSENT = "absent"
    ACCESS_DENIED = "access_denied"
    IN_USE = "in_use"


def is_in_use_error(error: OSError) -> bool:
    """Check whether an OSError signals a transient in-use condition.

    Args:
        error: The error raised by a filesystem call.

    Returns:
        True if retrying after a short pause may succeed.
    """
    winerror = getattr(error, "winerror", None)
    if winerror is not None and winerror in IN_USE_WINERRORS:
        return True
    return error.errno in IN_USE_ERRNOS


def remove_tree(path: str) -> AttemptOutcome:
    """Make one attempt at removing a directory tree.

    Args:
        path: Directory to remove.

    Returns:
        Tagged outcome of the attempt.

    Raises:
        OSError: For any failure that is neither a missing path, a
            permission error nor an in-use condition.
    """
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return AttemptOutcome.ABSENT
    except NotADirectoryError:
        # A file component in the path means the directory cannot exist
        if os.path.lexists(path):
            raise
        return AttemptOutcome.ABSENT
    except PermissionError:
        return AttemptOutcome.ACCESS_DENIED
    except OSError as e:
        if is_in_use_error(e):
            return AttemptOutcome.IN_USE
        raise
    return AttemptOutcome.REMOVED


class ResilientDeleter:
    """Deletes directory trees with read-only remediation and bounded retries.

    The deleter keeps no state between calls; the remediation flag and
    attempt counter live only for the duration of a single ``delete``.

    Attributes:
        _sink: Receiver for warnings about trees that could not be deleted.
    """

    def __init__(self, sink: MessageSink) -> None:
        """Initialize the ResilientDeleter.

        Args:
            sink: Message sink used to report unresolved failures.
        """
        self._sink = sink

    def delete(self, path: str) -> bool:
        """Delete a directory and everything beneath it.

        Up to RETRY_LIMIT attempts are made. A permission error triggers one
        pass that clears read-only attributes from every file in the tree;
        a second permission error is final. An in-use error pauses for
        RETRY_DELAY_SECONDS before the next attempt. Exactly one warning is
        sent to the sink for every failed call.

        Args:
            path: Directory to delete.

        Returns:
            True if the tree no longer exists, False otherwise.

        Raises:
            OSError: For unclassified failures, including any error raised
                while clearing read-only attributes.
        """
        removed_read_only = False

        for attempt in range(RETRY_LIMIT):
            outcome = remove_tree(path)

            if outcome in (AttemptOutcome.REMOVED, AttemptOutcome.ABSENT):
                logger.debug("Deleted %s (%s, attempt %d)", path, outcome.value, attempt + 1)
                return True

            logger.debug("Attempt %d to delete %s failed: %s", attempt + 1, path, outcome.value)

            if outcome == AttemptOutcome.ACCESS_DENIED:
                if removed_read_only:
                    self._sink.on_message(access_denied_for_deletion(path))
                    return False
                removed_read_only = True
                cleared = clear_tree_read_only(path)
                logger.info("Cleared read-only attribute from %d file(s) under %s", cleared, path)
                continue

            # AttemptOutcome.IN_USE
            if attempt == RETRY_LIMIT - 1:
                self._sink.on_message(directory_in_use(path))
                return False
            time.sleep(RETRY_DELAY_SECONDS)

        # Remediation ran on the last attempt with no attempt left to use it
        if os.path.lexists(path):
            self._sink.on_message(access_denied_for_deletion(path))
            return False
        return True


def delete_directory(path: str, sink: MessageSink) -> bool:
    """Delete a directory tree, reporting unresolved failures to ``sink``.

    Args:
        path: Directory to delete.
        sink: Message sink for non-fatal warnings.

    Returns:
        True if the tree no longer exists, False otherwise.
    """
    return ResilientDeleter(sink).delete(path)
