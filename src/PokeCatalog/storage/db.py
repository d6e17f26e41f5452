"""SQLite database utilities."""

from __future__ import annotations

import sqlite3
from pathlib import Path


class DatabaseManager:
    """Owns one SQLite connection for a database file.

    Supports the context manager protocol for automatic connection cleanup.
    The connection may be used from worker threads; callers serialize access.
    """

    def __init__(self, db_path: Path) -> None:
        """Open (and create if needed) the database at ``db_path``."""
        self.db_path = db_path
        self.conn = ensure_db(db_path)
        init_schema(self.conn)

    def get_connection(self) -> sqlite3.Connection:
        return self.conn

    def close(self) -> None:
        """Close the database connection."""
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def ensure_db(db_path: Path) -> sqlite3.Connection:
    """Ensure the database file's directory exists and return a connection.

    Raises:
        OSError: If directory creation fails.
        sqlite3.Error: If database connection fails.
    """
    if str(db_path) != ":memory:":
        db_path.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(str(db_path), check_same_thread=False)


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the ability cache table if missing."""
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS ability_cache (
          cache_key TEXT PRIMARY KEY,
          name TEXT NOT NULL,
          effect TEXT,
          short_effect TEXT,
          generation TEXT,
          fetched_at INTEGER NOT NULL DEFAULT (
            CAST(strftime('%s','now') AS INTEGER)
          )
        );
    """)
    conn.commit()
