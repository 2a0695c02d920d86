"""
Database schema initialization.

Provides schema versioning and table creation for the fingerprint index.
"""

from __future__ import annotations

import sqlite3


# Schema version - increment when changing table structure
SCHEMA_VERSION = 1


def initialize_schema(conn: sqlite3.Connection) -> None:
    """
    Initialize database schema with versioning support.

    Creates tables and indexes if they don't exist. Drops and recreates
    the files table if the schema version has changed.

    Args:
        conn: Active database connection

    Tables created:
        - meta: Schema version tracking
        - files: One fingerprint row per file path
    """
    conn.execute("""
        CREATE TABLE IF NOT EXISTS meta (
            key TEXT PRIMARY KEY,
            value TEXT
        )
    """)

    result = conn.execute(
        "SELECT value FROM meta WHERE key = 'schema_version'"
    ).fetchone()

    current_version = int(result['value']) if result else 0

    if current_version < SCHEMA_VERSION:
        conn.execute("DROP TABLE IF EXISTS files")

    conn.execute("""
        CREATE TABLE IF NOT EXISTS files (
            filepath TEXT PRIMARY KEY,
            sha256 TEXT NOT NULL,
            filesize INTEGER NOT NULL CHECK (filesize >= 0)
        )
    """)

    # Both fingerprint columns are used for self-joins
    conn.execute("""
        CREATE INDEX IF NOT EXISTS idx_files_sha256
        ON files(sha256)
    """)
    conn.execute("""
        CREATE INDEX IF NOT EXISTS idx_files_filesize
        ON files(filesize)
    """)

    conn.execute("""
        INSERT OR REPLACE INTO meta (key, value)
        VALUES ('schema_version', ?)
    """, (str(SCHEMA_VERSION),))


__all__ = ['SCHEMA_VERSION', 'initialize_schema']
