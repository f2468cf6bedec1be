"""
SQLite connection helpers for the document store.

Blog documents are kept as JSON text in a single ``blogs`` table, one
row per document.  ``get_connection`` opens a connection with a
dict-like row factory and ``init_db`` creates the table if needed.
"""

import os
import sqlite3
from pathlib import Path


def get_database_path(db_url: str) -> str:
    """Compute the path to the SQLite database file.

    If ``db_url`` is an absolute path, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so columns can be
    accessed by name.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str) -> None:
    """Create the ``blogs`` collection table if it does not exist.

    ``version`` is the internal revision counter of a document; it
    is bumped on every update and never leaves the store.
    """
    conn = get_connection(db_path)
    try:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS blogs (
                id TEXT PRIMARY KEY,
                document TEXT NOT NULL,
                version INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        conn.commit()
    finally:
        conn.close()
