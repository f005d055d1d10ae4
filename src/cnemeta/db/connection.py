# ABOUTME: SQLite connection management for the cnemeta record store.
# ABOUTME: Opens or creates the database, applies schema, and provides a configured connection.

import sqlite3
from pathlib import Path

from cnemeta.db.schema import SCHEMA_V1

DEFAULT_DB_PATH = Path.home() / ".cnemeta" / "records.db"


def _schema_exists(conn: sqlite3.Connection) -> bool:
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def open_store(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the record store database.

    Creates parent directories as needed, applies the schema on first use,
    and sets sqlite3.Row as the row factory. The connection may be used from
    auto-save timer threads, so same-thread checking is off; callers
    serialize writes per record.

    Args:
        path: Path to the database file. Defaults to ~/.cnemeta/records.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    if not _schema_exists(conn):
        conn.executescript(SCHEMA_V1)

    return conn
