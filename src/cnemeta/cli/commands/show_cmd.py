# ABOUTME: The `cnemeta show` command for displaying a record's non-English metadata.
# ABOUTME: Renders field variants, original language, and author names as Rich tables.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cnemeta.cli.options import db_option, load_metadata
from cnemeta.db.connection import DEFAULT_DB_PATH, open_store
from cnemeta.db.records import RecordStore
from cnemeta.metadata.languages import language_label
from cnemeta.metadata.types import AUTHOR_NAME_PARTS, CANONICAL_FIELDS, CneFieldName

console = Console()


@click.command("show")
@click.argument("record_id", type=int)
@db_option
def show(record_id: int, db_path: Path | None) -> None:
    """Show non-English metadata for a record by ID."""
    conn = open_store(db_path or DEFAULT_DB_PATH)
    try:
        metadata = load_metadata(RecordStore(conn), record_id, console)
    finally:
        conn.close()

    if metadata.data.is_empty:
        console.print(f"[yellow]Record {record_id} has no non-English metadata.[/yellow]")
        return

    language = metadata.get_original_language()
    if language:
        console.print(f"[bold]Original language:[/bold] {escape(language_label(language))}")

    table = Table(show_header=True, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Variant")
    table.add_column("Value")
    for name in CneFieldName:
        variants = metadata.data.fields.get(name)
        if not variants:
            continue
        for variant, value in variants.items():
            table.add_row(name.value, variant.value, escape(value))
    if table.row_count:
        console.print(table)

    if metadata.data.authors:
        authors = Table(show_header=True, pad_edge=False)
        authors.add_column("#", style="dim")
        for part in AUTHOR_NAME_PARTS:
            authors.add_column(part.replace("_", " "))
        for index, entry in sorted(metadata.data.authors.items()):
            authors.add_row(
                str(index),
                *(escape(getattr(entry, part) or "") for part in AUTHOR_NAME_PARTS),
            )
        console.print(authors)

    filled = metadata.get_filled_field_count()
    console.print(f"\n[dim]{filled} of {len(CANONICAL_FIELDS)} fields filled[/dim]")
