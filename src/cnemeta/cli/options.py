# ABOUTME: Shared Click options and helpers for cnemeta CLI commands.
# ABOUTME: Provides the --db option and record lookup that exits cleanly on a missing ID.

from pathlib import Path

import click
from rich.console import Console

from cnemeta.db.connection import DEFAULT_DB_PATH
from cnemeta.db.records import RecordNotFoundError, RecordStore
from cnemeta.metadata.model import CneMetadata

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    envvar="CNEMETA_DB",
    default=None,
    help=f"Path to record database (default: {DEFAULT_DB_PATH})",
)


def load_metadata(store: RecordStore, record_id: int, console: Console) -> CneMetadata:
    """Open a record's metadata model, exiting with status 1 if it is missing."""
    try:
        record = store.open_record(record_id)
    except RecordNotFoundError as exc:
        console.print(f"[red]Record {record_id} not found.[/red]")
        raise SystemExit(1) from exc
    return CneMetadata(record)
