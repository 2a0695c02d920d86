"""
FingerprintIndex facade class for coordinating database operations.

Provides a unified interface to all index operations using the facade pattern.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from typing import Optional

from ..models import FileRecord, FingerprintKey
from .connection import ConnectionManager
from .schema import initialize_schema, SCHEMA_VERSION
from .operations import IndexOperations
from .maintenance import MaintenanceOperations


logger = logging.getLogger(__name__)


class FingerprintIndex:
    """
    SQLite-backed index of file fingerprints.

    Safe for concurrent lookups from several threads. Without a db_path the
    index lives in a private temporary directory that ``close()`` removes,
    so it lasts for one run only.

    Usage:
        with FingerprintIndex() as index:
            index.put_batch(records)
            same = index.find_same('/photos/a.jpg', FingerprintKey.CONTENT_HASH)
    """

    SCHEMA_VERSION = SCHEMA_VERSION

    def __init__(self, db_path: Optional[str] = None):
        """
        Initialize the fingerprint index.

        Args:
            db_path: Path to SQLite database file. A temporary file is used if None.
        """
        self._temp_dir: Optional[str] = None
        if db_path is None:
            self._temp_dir = tempfile.mkdtemp(prefix='dupremover-')
            db_path = os.path.join(self._temp_dir, 'index.db')
        self.db_path = str(db_path)

        self._conn_mgr = ConnectionManager(self.db_path)
        self._operations = IndexOperations(self._conn_mgr)
        self._maintenance = MaintenanceOperations(self._conn_mgr)

        journal_mode = self._conn_mgr.enable_wal()
        if journal_mode != 'wal':
            logger.debug(f"Index journal mode is {journal_mode}, lookups may block on writes")
        with self._conn_mgr.writer() as conn:
            initialize_schema(conn)

        logger.debug(f"Fingerprint index at {self.db_path}")

    def __enter__(self) -> 'FingerprintIndex':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def is_temporary(self) -> bool:
        return self._temp_dir is not None

    def close(self):
        """Discard the index if it is temporary."""
        if self._temp_dir is not None:
            shutil.rmtree(self._temp_dir, ignore_errors=True)
            logger.debug(f"Removed temporary index {self.db_path}")
            self._temp_dir = None

    # Delegate to IndexOperations
    def get(self, filepath: str) -> Optional[FileRecord]:
        """Get the stored record for a file."""
        return self._operations.get(filepath)

    def put(self, record: FileRecord) -> bool:
        """Store a FileRecord."""
        return self._operations.put(record)

    def put_batch(self, records: list[FileRecord]) -> int:
        """Store multiple FileRecord objects efficiently."""
        return self._operations.put_batch(records)

    def find_same(self, filepath: str, key: FingerprintKey) -> list[str]:
        """Find every other indexed file sharing the fingerprint of filepath."""
        return self._operations.find_same(filepath, key)

    def count(self) -> int:
        """Return the number of indexed files."""
        return self._operations.count()

    def invalidate(self, filepath: str):
        """Remove a specific file from the index."""
        self._operations.invalidate(filepath)

    # Delegate to MaintenanceOperations
    def get_stats(self) -> dict:
        """Get index statistics."""
        return self._maintenance.get_stats()

    def clear(self):
        """Remove all indexed records."""
        self._maintenance.clear()


__all__ = ['FingerprintIndex']
