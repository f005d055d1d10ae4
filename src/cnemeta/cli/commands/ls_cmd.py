# ABOUTME: The `cnemeta ls` command for listing stored records.
# ABOUTME: Shows each record with how many non-English fields it carries.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cnemeta.cli.options import db_option
from cnemeta.db.connection import DEFAULT_DB_PATH, open_store
from cnemeta.db.records import RecordStore
from cnemeta.metadata.grammar import parse

console = Console()


@click.command("ls")
@db_option
def ls(db_path: Path | None) -> None:
    """List all records."""
    conn = open_store(db_path or DEFAULT_DB_PATH)
    try:
        records = RecordStore(conn).list_all()
    finally:
        conn.close()

    if not records:
        console.print("[yellow]No records in the store.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Lang", width=6)
    table.add_column("Fields", justify="right")
    table.add_column("Authors", justify="right")

    for record in records:
        data = parse(record.extra)
        table.add_row(
            str(record.id),
            escape(record.title),
            data.original_language or "",
            str(len(data.fields)),
            str(len(data.authors)),
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} record(s)[/dim]")
