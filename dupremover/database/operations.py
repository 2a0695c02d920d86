"""
Core CRUD and lookup operations for the fingerprint index.

Provides IndexOperations class for single and batch operations and the
fingerprint equality lookup used by matching.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from ..exceptions import StoreQueryFailed
from ..models import FileRecord, FingerprintKey
from .connection import ConnectionManager
from .utils import key_column, row_to_record


logger = logging.getLogger(__name__)


class IndexOperations:
    """
    Handles record storage and fingerprint lookups for the index.
    """

    def __init__(self, connection_manager: ConnectionManager):
        """
        Initialize index operations.

        Args:
            connection_manager: ConnectionManager instance for database access
        """
        self.conn_mgr = connection_manager

    def get(self, filepath: str) -> Optional[FileRecord]:
        """
        Get the stored record for a file.

        Args:
            filepath: Path of the file as it was indexed

        Returns:
            FileRecord if indexed, None otherwise
        """
        try:
            with self.conn_mgr.reader() as conn:
                row = conn.execute("""
                    SELECT filepath, sha256, filesize FROM files WHERE filepath = ?
                """, (filepath,)).fetchone()
                return row_to_record(row) if row else None
        except sqlite3.Error as e:
            logger.debug(f"Failed to read record for {filepath}: {e}")
            return None

    def put(self, record: FileRecord) -> bool:
        """
        Store a FileRecord.

        Args:
            record: FileRecord to store

        Returns:
            True if successfully stored
        """
        try:
            with self.conn_mgr.writer() as conn:
                conn.execute("""
                    INSERT OR REPLACE INTO files (filepath, sha256, filesize)
                    VALUES (?, ?, ?)
                """, (record.filepath, record.sha256, record.filesize))
            return True
        except sqlite3.Error as e:
            logger.debug(f"Failed to index {record.filepath}: {e}")
            return False

    def put_batch(self, records: list[FileRecord]) -> int:
        """
        Store multiple FileRecord objects in one transaction.

        Args:
            records: List of FileRecord objects

        Returns:
            Number of stored records
        """
        if not records:
            return 0

        try:
            with self.conn_mgr.writer() as conn:
                conn.executemany("""
                    INSERT OR REPLACE INTO files (filepath, sha256, filesize)
                    VALUES (?, ?, ?)
                """, [(r.filepath, r.sha256, r.filesize) for r in records])
            return len(records)
        except sqlite3.Error as e:
            logger.warning(f"Error during batch indexing: {e}")
            return 0

    def find_same(self, filepath: str, key: FingerprintKey) -> list[str]:
        """
        Find every other indexed file sharing the fingerprint of filepath.

        The key only selects one of the whitelisted columns; the filepath is
        always a bound parameter.

        Args:
            filepath: Path whose fingerprint is looked up
            key: Fingerprint to compare

        Returns:
            Paths of the other files with an equal fingerprint, in the
            order they were indexed. Empty if filepath is not indexed.

        Raises:
            StoreQueryFailed: If the query could not be answered
        """
        try:
            column = key_column(key)
        except ValueError as e:
            raise StoreQueryFailed(filepath, str(key), str(e)) from e

        query = f"""
            SELECT b.filepath FROM files AS a
            JOIN files AS b ON b.{column} = a.{column}
            WHERE a.filepath = ? AND b.filepath != a.filepath
            ORDER BY b.rowid
        """
        try:
            with self.conn_mgr.reader() as conn:
                rows = conn.execute(query, (filepath,)).fetchall()
        except sqlite3.Error as e:
            raise StoreQueryFailed(filepath, column, f"Index query failed for {filepath}: {e}") from e

        return [row['filepath'] for row in rows]

    def count(self) -> int:
        """Return the number of indexed files."""
        with self.conn_mgr.reader() as conn:
            return conn.execute("SELECT COUNT(*) AS cnt FROM files").fetchone()['cnt']

    def invalidate(self, filepath: str):
        """Remove a specific file from the index."""
        try:
            with self.conn_mgr.writer() as conn:
                conn.execute("DELETE FROM files WHERE filepath = ?", (filepath,))
        except sqlite3.Error as e:
            logger.debug(f"Failed to remove {filepath} from index: {e}")


__all__ = ['IndexOperations']
