from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the raw file and directory primitives consumed by the structure
builder and the directory scanner: whole-file text I/O, idempotent
directory creation, ordered child listing and path normalization. Acts as
an abstraction over the 'os' module so the core never touches it directly.
"""

import os
from typing import List, Optional, Tuple

from foldertree.domain.constants import APP_NAME
from foldertree.domain.errors import FolderTreeIOError, NotFoundError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = APP_NAME
UNIX_APP_DIR_NAME = ".foldertree"
DEFAULT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/FolderTree
    - Linux/Mac: ~/.foldertree

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

    safe_mkdir(path)
    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def path_exists(path: str) -> bool:
    return os.path.lexists(path)

# -----------------------------------------------------------------------------
# FILE I/O API
# -----------------------------------------------------------------------------

def read_text_file(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a whole file as text.

    Raises:
        NotFoundError: If the file does not exist.
        FolderTreeIOError: If the path cannot be read or decoded with encoding.
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read()
    except FileNotFoundError:
        raise NotFoundError(path, "file") from None
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FolderTreeIOError(f"Cannot read '{path}' as {encoding} text", e) from e


def write_text_file(path: str, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Write a whole file as text, creating parent directories as needed."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding=encoding, newline="\n") as f:
        f.write(text)


def touch_if_missing(path: str) -> bool:
    """
    Create an empty file unless something already exists at the path.

    Existing files are never truncated.

    Returns:
        bool: True if a new file was created.
    """
    try:
        with open(path, "x", encoding=DEFAULT_ENCODING):
            pass
    except FileExistsError:
        return False
    return True

# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def list_children(path: str) -> List[Tuple[str, bool]]:
    """
    List the immediate children of a directory in listing order.

    Symbolic links and special files are reported as non-directories so
    callers never recurse into link targets.

    Args:
        path: Directory to list.

    Returns:
        List[Tuple[str, bool]]: (name, is_directory) pairs.
    """
    children: List[Tuple[str, bool]] = []
    with os.scandir(path) as it:
        for entry in it:
            children.append((entry.name, entry.is_dir(follow_symlinks=False)))
    return children
