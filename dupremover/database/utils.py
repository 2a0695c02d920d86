"""
Shared utilities for database operations.

Provides:
- IndexStats: Statistics dataclass for an indexing run
- Row conversion and key-to-column helpers
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from ..models import FileRecord, FingerprintKey


# Only these columns may be interpolated into a query
KEY_COLUMNS = {
    FingerprintKey.CONTENT_HASH: 'sha256',
    FingerprintKey.SIZE_BYTES: 'filesize',
}


@dataclass
class IndexStats:
    """Statistics about fingerprinting files into the index."""
    total_files: int = 0
    indexed: int = 0
    failed: int = 0
    # Fingerprinted but rejected by the index, also counted in failed
    store_errors: int = 0

    @property
    def success_rate(self) -> float:
        """Return indexed files as percentage of all files."""
        if self.total_files == 0:
            return 0.0
        return (self.indexed / self.total_files) * 100


def key_column(key) -> str:
    """
    Map a fingerprint key to its column name.

    Args:
        key: FingerprintKey member or its string value

    Returns:
        Column name

    Raises:
        ValueError: If key is not a recognized fingerprint key
    """
    member = FingerprintKey.parse(key)
    if member is None:
        raise ValueError(f"Unknown fingerprint key: {key!r}")
    return KEY_COLUMNS[member]


def row_to_record(row: sqlite3.Row) -> FileRecord:
    """
    Convert database row to FileRecord object.

    Args:
        row: sqlite3.Row from database query

    Returns:
        FileRecord object
    """
    return FileRecord(
        filepath=row['filepath'],
        sha256=row['sha256'],
        filesize=row['filesize'],
    )


__all__ = [
    'KEY_COLUMNS',
    'IndexStats',
    'key_column',
    'row_to_record',
]
