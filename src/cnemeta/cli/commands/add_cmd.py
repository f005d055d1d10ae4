# ABOUTME: The `cnemeta add` command for creating a record.
# ABOUTME: Stores a title and an optional initial extra field read from a file.

from pathlib import Path

import click
from rich.console import Console

from cnemeta.cli.options import db_option
from cnemeta.db.connection import DEFAULT_DB_PATH, open_store
from cnemeta.db.records import RecordStore

console = Console()


@click.command("add")
@click.argument("title")
@click.option(
    "--extra-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File whose contents become the record's extra field.",
)
@db_option
def add(title: str, extra_file: Path | None, db_path: Path | None) -> None:
    """Add a record with TITLE."""
    extra = extra_file.read_text(encoding="utf-8") if extra_file else ""

    conn = open_store(db_path or DEFAULT_DB_PATH)
    try:
        record_id = RecordStore(conn).add_record(title, extra)
    finally:
        conn.close()

    console.print(f"Added record [bold]{record_id}[/bold].")
