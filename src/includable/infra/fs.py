from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin abstraction over 'os' used by the lookup core: user data location,
search path entry joining, regular-file checks and resilient line
streaming. Keeps every direct filesystem touch in one place.
"""

import os
from typing import Iterator

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "includable"
UNIX_APP_DIR_NAME = ".includable"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    The directory is not created.

    Standards:
    - Windows: %LOCALAPPDATA%/includable
    - Linux/Mac: ~/.includable

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def join_search_entry(root: str, entry: str) -> str:
    """
    Anchor a search path entry to the environment root.

    Absolute entries are used verbatim; relative entries are joined onto
    the root.

    Args:
        root: Environment root directory.
        entry: Raw search path element.

    Returns:
        str: Base directory to search.
    """
    if os.path.isabs(entry):
        return entry
    return os.path.join(root, entry)

# -----------------------------------------------------------------------------
# FILE ACCESS API
# -----------------------------------------------------------------------------

def is_regular_file(path: str) -> bool:
    """Return True only for an existing regular file (symlinks followed)."""
    return os.path.isfile(path)


def stream_file_content(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Undecodable byte sequences are replaced rather than raised, so a stray
    Latin-1 comment in a manifest does not abort the scan. The file is
    closed as soon as the consumer stops iterating.

    Args:
        file_path: Absolute path to the target file.

    Yields:
        str: Lines from the file, newline included.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line
