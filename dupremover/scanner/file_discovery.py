"""
File discovery module for the scanner package.

Provides functionality to find and enumerate image files in directories.
"""

from __future__ import annotations

from pathlib import Path

from ..config import IMAGE_EXTENSIONS


def find_image_files(root_path: str | Path, recursive: bool = True) -> list[str]:
    """
    Find all image files in the given directory.

    Args:
        root_path: Directory path to search for images
        recursive: If True, search subdirectories recursively

    Returns:
        Sorted list of absolute file paths as strings

    Notes:
        - Matching is on the lower-cased file extension only
        - Handles symlinks by resolving to canonical paths
        - Deduplicates files that may be encountered via multiple paths
    """
    root = Path(root_path)

    images = []
    seen = set()

    iterator = root.rglob('*') if recursive else root.glob('*')

    for filepath in iterator:
        if filepath.is_file() and filepath.suffix.lower() in IMAGE_EXTENSIONS:
            resolved = str(filepath.resolve())
            if resolved not in seen:
                seen.add(resolved)
                images.append(resolved)

    images.sort()
    return images


__all__ = ['find_image_files']
