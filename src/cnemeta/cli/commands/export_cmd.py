# ABOUTME: The `cnemeta export` command for printing a record's BibLaTeX fields or CSL variables.
# ABOUTME: With --extra it prints the enriched extra text a BibLaTeX exporter would see.

from pathlib import Path

import click
from rich.console import Console

from cnemeta.cli.options import db_option, load_metadata
from cnemeta.db.connection import DEFAULT_DB_PATH, open_store
from cnemeta.db.records import RecordStore
from cnemeta.export.biblatex import BibLaTeXMapper
from cnemeta.export.csl import map_to_csl
from cnemeta.export.inject import export_extra

console = Console()


@click.command("export")
@click.argument("record_id", type=int)
@click.option(
    "--extra",
    "as_extra",
    is_flag=True,
    default=False,
    help="Print the extra field with biblatex.* lines injected.",
)
@click.option(
    "--stable-only",
    is_flag=True,
    default=False,
    help="Skip fields not supported by every BibLaTeX style.",
)
@click.option(
    "--csl",
    "as_csl",
    is_flag=True,
    default=False,
    help="Print CSL variables instead of BibLaTeX fields.",
)
@db_option
def export(
    record_id: int, as_extra: bool, stable_only: bool, as_csl: bool, db_path: Path | None
) -> None:
    """Print BibLaTeX fields (or CSL variables) derived from a record's metadata."""
    conn = open_store(db_path or DEFAULT_DB_PATH)
    try:
        metadata = load_metadata(RecordStore(conn), record_id, console)
        extra = metadata.record.get_field("extra")
    finally:
        conn.close()

    if as_csl:
        _print_fields(map_to_csl(metadata.data))
        return

    mapper = BibLaTeXMapper()
    if stable_only:
        mapper = mapper.stable_only()

    if as_extra:
        text = export_extra(extra, mapper)
        console.print(text, markup=False, highlight=False, soft_wrap=True)
        return

    if not mapper.has_exportable_data(metadata.data):
        console.print("[yellow]Nothing to export.[/yellow]")
        return

    _print_fields(mapper.map(metadata.data))


def _print_fields(fields: dict[str, str]) -> None:
    if not fields:
        console.print("[yellow]Nothing to export.[/yellow]")
        return
    for name, value in fields.items():
        console.print(f"{name} = {{{value}}}", markup=False, highlight=False, soft_wrap=True)
