# ABOUTME: Public API for the cnemeta record store.
# ABOUTME: Exports connection management, record CRUD, and the SQLite-backed RecordAccessor.

from cnemeta.db.connection import DEFAULT_DB_PATH, open_store
from cnemeta.db.mapping import Record
from cnemeta.db.records import RecordNotFoundError, RecordStore, StoredRecord

__all__ = [
    "DEFAULT_DB_PATH",
    "Record",
    "RecordNotFoundError",
    "RecordStore",
    "StoredRecord",
    "open_store",
]
