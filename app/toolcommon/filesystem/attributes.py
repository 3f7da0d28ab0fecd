"""Read-only attribute handling for files in a directory tree.

On Windows the read-only state is the FILE_ATTRIBUTE_READONLY bit, which
os.chmod toggles through stat.S_IWRITE without touching hidden, archive or
any other attribute. On POSIX the owner write bit plays the same role and
every other mode bit is written back unchanged.
"""

import os
import stat


def is_read_only(path: str) -> bool:
    """Check whether a file carries the read-only attribute.

    Args:
        path: File path.

    Returns:
        True if the owner cannot write to the file.
    """
    return not os.stat(path, follow_symlinks=False).st_mode & stat.S_IWUSR


def set_read_only(path: str, read_only: bool) -> bool:
    """Add or remove the read-only attribute of a single file.

    Only the owner write bit changes. The file is left alone when it is
    already in the requested state.

    Args:
        path: File path.
        read_only: If True, mark the file read-only. If False, clear it.

    Returns:
        True if the attribute was changed, False if nothing was written.

    Raises:
        OSError: If the attributes cannot be read or written.
    """
    mode = stat.S_IMODE(os.stat(path, follow_symlinks=False).st_mode)
    if read_only:
        new_mode = mode & ~stat.S_IWUSR
    else:
        new_mode = mode | stat.S_IWUSR
    if new_mode == mode:
        return False
    os.chmod(path, new_mode)
    return True


def set_tree_read_only(path: str, read_only: bool) -> int:
    """Recursively change the read-only attribute on all files under a directory.

    Subdirectories are visited first, depth-first, then the files directly
    inside ``path``. Directories themselves are traversed but never modified.
    Symbolic links are neither followed nor modified. There is no retry;
    any OSError propagates to the caller.

    Args:
        path: Directory to start from.
        read_only: If True, mark every file read-only. If False, clear it.

    Returns:
        Number of files whose attribute was changed.
    """
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)

    changed = 0
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            changed += set_tree_read_only(entry.path, read_only)

    for entry in entries:
        if entry.is_file(follow_symlinks=False) and set_read_only(entry.path, read_only):
            changed += 1

    return changed


def clear_tree_read_only(path: str) -> int:
    """Clear the read-only attribute from every file under a directory.

    Args:
        path: Directory to start from.

    Returns:
        Number of files that were read-only and have been made writable.
    """
    return set_tree_read_only(path, read_only=False)
