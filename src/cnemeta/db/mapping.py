# ABOUTME: Converts SQLite rows from the records table into typed Record objects.
# ABOUTME: Keeps row-shape knowledge out of the store and CLI code.

from dataclasses import dataclass
from typing import Any


@dataclass
class Record:
    """A stored bibliographic record."""

    id: int
    title: str
    extra: str
    date_added: str
    date_modified: str


def row_to_record(row: Any) -> Record:
    """Convert a database row (dict-like) to a Record."""
    return Record(
        id=row["id"],
        title=row["title"],
        extra=row["extra"] or "",
        date_added=row["date_added"],
        date_modified=row["date_modified"],
    )
