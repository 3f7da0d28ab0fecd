"""File search-path resolution.

A search path is a directory part followed by a file name pattern, for
example ``../src/*.wxs``. The directory part is kept verbatim so relative
segments such as ``..`` work; only the last segment may contain wildcards.
"""

import fnmatch
import logging
import os

logger = logging.getLogger(__name__)


class FileNotFoundForPatternError(FileNotFoundError):
    """Raised when no file matches a search path.

    Attributes:
        search_path: The search path as given by the caller.
        file_type: Kind of file looked for, e.g. "Source".
    """

    def __init__(self, search_path: str, file_type: str) -> None:
        self.search_path = search_path
        self.file_type = file_type
        super().__init__(f"{file_type} file not found: {search_path}")


def split_search_path(search_path: str) -> tuple[str, str]:
    """Split a search path into its directory part and file pattern.

    Alternate directory separators are converted to the platform separator
    first. The directory part keeps its trailing separator.

    Args:
        search_path: Path whose last segment may contain wildcards.

    Returns:
        Tuple of (directory, pattern). Directory is "." when the search
        path has no separator.
    """
    file_path = search_path
    if os.altsep:
        file_path = file_path.replace(os.altsep, os.sep)

    last_separator = file_path.rfind(os.sep)
    if last_separator < 0:
        return ".", file_path
    return file_path[: last_separator + 1], file_path[last_separator + 1 :]


def get_files(search_path: str, file_type: str) -> list[str]:
    """Get the files matching a search path that may contain wildcards.

    Only regular files directly inside the directory part are considered.
    Matching is case-insensitive on Windows, as the filesystem is.

    Args:
        search_path: Search path, e.g. "../src/*.wxs" or "product.wxs".
        file_type: Kind of file looked for; used in the error message.

    Returns:
        Sorted list of matching file paths, each joined onto the directory part.

    Raises:
        ValueError: If search_path is None.
        FileNotFoundForPatternError: If no file matches or the directory
            cannot be read.
    """
    if search_path is None:
        msg = "search_path must not be None"
        raise ValueError(msg)

    directory, pattern = split_search_path(search_path)
    files: list[str] = []

    try:
        with os.scandir(directory) as it:
            for entry in it:
                if entry.is_file() and fnmatch.fnmatch(entry.name, pattern):
                    files.append(os.path.join(directory, entry.name))
    except (FileNotFoundError, NotADirectoryError, ValueError):
        # Missing directory or malformed path; reported as no match below
        logger.debug("Search directory not usable: %s", directory)
    except OSError as e:
        raise FileNotFoundForPatternError(search_path, file_type) from e

    if not files:
        raise FileNotFoundForPatternError(search_path, file_type)

    return sorted(files)
