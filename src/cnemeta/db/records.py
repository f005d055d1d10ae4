# ABOUTME: CRUD for the records table and the RecordAccessor backed by it.
# ABOUTME: StoredRecord buffers field edits and writes them in one transaction on save.

import sqlite3

from cnemeta.db.mapping import Record, row_to_record

# Columns a StoredRecord exposes through get_field/set_field.
RECORD_FIELDS = ("title", "extra")


class RecordNotFoundError(Exception):
    """Raised when a record id does not exist in the store."""


class RecordStore:
    """Wraps a sqlite3 connection and provides typed CRUD for the records table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def add_record(self, title: str, extra: str = "") -> int:
        """Insert a record and return its row ID."""
        cursor = self._conn.execute(
            "INSERT INTO records (title, extra) VALUES (?, ?)",
            (title, extra),
        )
        self._conn.commit()
        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_id(self, record_id: int) -> Record | None:
        cursor = self._conn.execute("SELECT * FROM records WHERE id = ?", (record_id,))
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def list_all(self) -> list[Record]:
        """Return all records ordered by ID."""
        cursor = self._conn.execute("SELECT * FROM records ORDER BY id")
        return [row_to_record(row) for row in cursor.fetchall()]

    def update_fields(self, record_id: int, **fields: str) -> None:
        """Update columns of a record and bump date_modified.

        Raises:
            ValueError: If a column name is not a record field.
            RecordNotFoundError: If the record_id does not exist.
        """
        if not fields:
            return
        unknown = set(fields) - set(RECORD_FIELDS)
        if unknown:
            raise ValueError(f"Unknown record fields: {', '.join(sorted(unknown))}")

        set_clause = ", ".join(f"{k} = ?" for k in fields)
        set_clause += ", date_modified = strftime('%Y-%m-%dT%H:%M:%S', 'now')"
        values = [*fields.values(), record_id]

        cursor = self._conn.execute(f"UPDATE records SET {set_clause} WHERE id = ?", values)
        self._conn.commit()

        if cursor.rowcount == 0:
            raise RecordNotFoundError(f"Record with id {record_id} not found")

    def delete_record(self, record_id: int) -> None:
        cursor = self._conn.execute("DELETE FROM records WHERE id = ?", (record_id,))
        self._conn.commit()
        if cursor.rowcount == 0:
            raise RecordNotFoundError(f"Record with id {record_id} not found")

    def open_record(self, record_id: int) -> "StoredRecord":
        """Return a RecordAccessor for an existing record.

        Raises:
            RecordNotFoundError: If the record_id does not exist.
        """
        if self.get_by_id(record_id) is None:
            raise RecordNotFoundError(f"Record with id {record_id} not found")
        return StoredRecord(self, record_id)


class StoredRecord:
    """RecordAccessor over one row of the records table.

    get_field() returns a pending value if one was set, otherwise the stored
    one. save_transaction() writes all pending values at once.
    """

    def __init__(self, store: RecordStore, record_id: int) -> None:
        self._store = store
        self._id = record_id
        self._pending: dict[str, str] = {}

    @property
    def id(self) -> int:
        return self._id

    def get_field(self, name: str) -> str:
        if name not in RECORD_FIELDS:
            raise KeyError(name)
        if name in self._pending:
            return self._pending[name]
        record = self._store.get_by_id(self._id)
        if record is None:
            raise RecordNotFoundError(f"Record with id {self._id} not found")
        return getattr(record, name)

    def set_field(self, name: str, value: str) -> None:
        if name not in RECORD_FIELDS:
            raise KeyError(name)
        self._pending[name] = value

    def save_transaction(self) -> None:
        pending, self._pending = self._pending, {}
        self._store.update_fields(self._id, **pending)
