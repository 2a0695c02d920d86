"""
SQLite connections for the fingerprint index.

The index is written once, in bulk, and then queried by a pool of lookup
threads. Readers get plain autocommit connections that never take the
write lock. Writers are serialized and run inside a ``BEGIN IMMEDIATE``
transaction.
"""

from __future__ import annotations

import os
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator


class ConnectionManager:
    """Opens short-lived connections to one index database file."""

    BUSY_TIMEOUT = 30.0

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._write_lock = threading.Lock()
        os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)

    def _open(self) -> sqlite3.Connection:
        conn = sqlite3.connect(
            self.db_path,
            timeout=self.BUSY_TIMEOUT,
            isolation_level=None,
            check_same_thread=False,
        )
        conn.row_factory = sqlite3.Row
        return conn

    def enable_wal(self) -> str:
        """
        Switch the database file to write-ahead logging.

        The journal mode is stored in the file, so this runs once when the
        index is opened. Returns the mode SQLite reports back.
        """
        conn = self._open()
        try:
            return conn.execute("PRAGMA journal_mode=WAL").fetchone()[0]
        finally:
            conn.close()

    @contextmanager
    def reader(self) -> Iterator[sqlite3.Connection]:
        """Read-only autocommit connection; every statement sees its own snapshot."""
        conn = self._open()
        try:
            conn.execute("PRAGMA query_only=ON")
            yield conn
        finally:
            conn.close()

    @contextmanager
    def writer(self, transaction: bool = True) -> Iterator[sqlite3.Connection]:
        """
        Serialized connection for changes.

        Args:
            transaction: Wrap the block in BEGIN IMMEDIATE/COMMIT, rolling
                back on error. VACUUM needs False.
        """
        with self._write_lock:
            conn = self._open()
            try:
                if not transaction:
                    yield conn
                    return
                conn.execute("BEGIN IMMEDIATE")
                try:
                    yield conn
                except BaseException:
                    conn.execute("ROLLBACK")
                    raise
                conn.execute("COMMIT")
            finally:
                conn.close()


__all__ = ['ConnectionManager']
