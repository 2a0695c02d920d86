"""
Hashing module for the scanner package.

Provides functions for calculating content hashes and building the
fingerprint record of a file.
"""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path
from typing import Optional

from ..config import HASH_CHUNK_SIZE
from ..models import FileRecord


logger = logging.getLogger(__name__)


def calculate_file_hash(filepath: str | Path, algorithm: str = 'sha256') -> str:
    """
    Calculate cryptographic hash of a file.

    Args:
        filepath: Path to the file
        algorithm: Hash algorithm to use (default: sha256)

    Returns:
        Hex digest of the file hash, or empty string on error
    """
    hasher = hashlib.new(algorithm)
    try:
        with open(filepath, 'rb') as f:
            for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b''):
                hasher.update(chunk)
        return hasher.hexdigest()
    except OSError as e:
        logger.debug(f"File hash calculation failed for {filepath}: {e}")
        return ""


def fingerprint_file(filepath: str | Path) -> Optional[FileRecord]:
    """
    Build the fingerprint record of a file.

    Args:
        filepath: Path to the file

    Returns:
        FileRecord with SHA-256 digest and size, or None if the file
        could not be read
    """
    filepath = str(filepath)

    if not os.path.isfile(filepath):
        logger.debug(f"Not a file: {filepath}")
        return None

    try:
        filesize = os.path.getsize(filepath)
    except OSError as e:
        logger.debug(f"Cannot stat {filepath}: {e}")
        return None

    digest = calculate_file_hash(filepath)
    if not digest:
        return None

    return FileRecord(filepath=filepath, sha256=digest, filesize=filesize)


__all__ = [
    'calculate_file_hash',
    'fingerprint_file',
]
