"""
Input validation for Image Duplicate Remover.

Validators return ``(is_valid, error_message)`` so callers can log the
message and decide on the exit code themselves.
"""

from __future__ import annotations

import os
from pathlib import Path

MAX_WORKERS = 32


def validate_directory(directory: str | Path) -> tuple[bool, str]:
    """
    Check that a scan root exists, is a directory and can be listed.

    Examples:
        >>> validate_directory('/nonexistent/directory')
        (False, 'Directory not found: /nonexistent/directory')
    """
    if not directory:
        return False, "Directory path is required"

    path = Path(directory)
    if path.is_dir():
        if os.access(path, os.R_OK | os.X_OK):
            return True, ""
        return False, f"Cannot read directory (permission denied): {path}"
    if path.exists():
        return False, f"Path is not a directory: {path}"
    return False, f"Directory not found: {path}"


def validate_file_accessible(filepath: str) -> tuple[bool, str]:
    """
    Check that a duplicate is still a regular file right before removal.

    Examples:
        >>> validate_file_accessible('/nonexistent/file.jpg')
        (False, 'File does not exist')
    """
    path = Path(filepath)
    if path.is_file():
        return True, ""
    if path.exists():
        return False, "Path is not a file"
    return False, "File does not exist"


def validate_workers(workers) -> tuple[bool, str]:
    """
    Examples:
        >>> validate_workers(4)
        (True, '')
        >>> validate_workers(0)
        (False, 'Workers must be between 1 and 32')
    """
    try:
        count = int(workers)
    except (ValueError, TypeError):
        return False, "Workers must be an integer"
    if 1 <= count <= MAX_WORKERS:
        return True, ""
    return False, f"Workers must be between 1 and {MAX_WORKERS}"


def directories_overlap(primary: str | Path, secondary: str | Path) -> bool:
    """
    Check whether one directory is the same as, or inside, the other.

    Examples:
        >>> directories_overlap('/photos', '/photos/backup')
        True
        >>> directories_overlap('/photos', '/backup')
        False
    """
    first = Path(primary).resolve()
    second = Path(secondary).resolve()
    return first == second or first in second.parents or second in first.parents


__all__ = [
    'MAX_WORKERS',
    'validate_directory',
    'validate_file_accessible',
    'validate_workers',
    'directories_overlap',
]
