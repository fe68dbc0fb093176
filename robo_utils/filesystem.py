"""File-system queries and path helpers."""

from __future__ import annotations

import os
import stat
import sys
from typing import Optional

from .allocator import allocator_is_valid
from .repl_str import repl_str

PATH_DELIMITER = os.sep


def _stat(abs_path) -> Optional[os.stat_result]:
    if abs_path is None:
        return None
    try:
        return os.stat(abs_path)
    except (OSError, ValueError):
        return None


def get_cwd() -> Optional[str]:
    """Return the current working directory, or None if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return None


def is_directory(abs_path) -> bool:
    """Return whether the path names an existing directory."""
    info = _stat(abs_path)
    return info is not None and stat.S_ISDIR(info.st_mode)


def is_file(abs_path) -> bool:
    """Return whether the path names an existing regular file."""
    info = _stat(abs_path)
    return info is not None and stat.S_ISREG(info.st_mode)


def exists(abs_path) -> bool:
    """Return whether anything exists at the path."""
    return _stat(abs_path) is not None


def is_readable(abs_path) -> bool:
    """Return whether the path exists and its owner read bit is set."""
    info = _stat(abs_path)
    return info is not None and bool(info.st_mode & stat.S_IRUSR)


def is_writable(abs_path) -> bool:
    """Return whether the path exists and its owner write bit is set."""
    info = _stat(abs_path)
    return info is not None and bool(info.st_mode & stat.S_IWUSR)


def is_readable_and_writable(abs_path) -> bool:
    """Return whether the path exists with both owner read and write bits set."""
    info = _stat(abs_path)
    if info is None:
        return False
    return bool(info.st_mode & stat.S_IWUSR) and bool(info.st_mode & stat.S_IRUSR)


def join_path(left_hand_path, right_hand_path, allocator) -> Optional[str]:
    """Join two paths with the platform delimiter.

    Returns None when either path is None or the allocator is invalid or fails.
    """
    if left_hand_path is None or right_hand_path is None:
        return None
    if not allocator_is_valid(allocator):
        return None
    result = f"{left_hand_path}{PATH_DELIMITER}{right_hand_path}"
    block = allocator.allocate(len(result.encode("utf-8")) + 1, allocator.state)
    if block is None:
        return None
    allocator.deallocate(block, allocator.state)
    return result


def to_native_path(path, allocator) -> Optional[str]:
    """Replace every "/" in the path with the platform delimiter.

    Returns None when the path is None or the allocator fails.
    """
    if path is None:
        return None
    return repl_str(path, "/", PATH_DELIMITER, allocator)


def mkdir(abs_path) -> bool:
    """Create a directory with mode 0o775; succeed if it already exists.

    Outside Windows the path must be absolute.
    """
    if not abs_path:
        return False
    if not sys.platform.startswith("win") and not str(abs_path).startswith("/"):
        return False
    try:
        os.mkdir(abs_path, 0o775)
    except FileExistsError:
        return is_directory(abs_path)
    except OSError:
        return False
    return True