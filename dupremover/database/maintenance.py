"""
Maintenance operations for the fingerprint index.

Provides statistics, clearing and vacuum operations.
"""

from __future__ import annotations

import os
import sqlite3
import logging

from .connection import ConnectionManager


logger = logging.getLogger(__name__)


class MaintenanceOperations:
    """
    Handles maintenance operations for the fingerprint index.
    """

    def __init__(self, connection_manager: ConnectionManager):
        self.conn_mgr = connection_manager

    def get_stats(self) -> dict:
        """
        Get index statistics.

        Returns:
            Dictionary with index statistics:
                - total_entries: Number of indexed files
                - distinct_hashes: Number of distinct SHA-256 digests
                - distinct_sizes: Number of distinct file sizes
                - db_size_bytes: Database size in bytes
                - db_path: Path to database file
        """
        try:
            with self.conn_mgr.reader() as conn:
                row = conn.execute("""
                    SELECT COUNT(*) AS total,
                           COUNT(DISTINCT sha256) AS hashes,
                           COUNT(DISTINCT filesize) AS sizes
                    FROM files
                """).fetchone()

                db_size = os.path.getsize(self.conn_mgr.db_path) if os.path.exists(self.conn_mgr.db_path) else 0

                return {
                    'total_entries': row['total'],
                    'distinct_hashes': row['hashes'],
                    'distinct_sizes': row['sizes'],
                    'db_size_bytes': db_size,
                    'db_path': self.conn_mgr.db_path,
                }
        except sqlite3.Error as e:
            logger.warning(f"Failed to get index stats: {e}")
            return {
                'total_entries': 0,
                'distinct_hashes': 0,
                'distinct_sizes': 0,
                'db_size_bytes': 0,
                'db_path': self.conn_mgr.db_path,
            }

    def clear(self):
        """Remove all indexed records."""
        try:
            with self.conn_mgr.writer() as conn:
                conn.execute("DELETE FROM files")
            self.vacuum()
        except sqlite3.Error as e:
            logger.warning(f"Failed to clear index: {e}")

    def vacuum(self):
        """Compact the database file."""
        try:
            # VACUUM cannot run inside a transaction
            with self.conn_mgr.writer(transaction=False) as conn:
                conn.execute("VACUUM")
        except sqlite3.Error as e:
            logger.debug(f"Failed to vacuum database: {e}")


__all__ = ['MaintenanceOperations']
