# ABOUTME: The `cnemeta set`, `lang`, `author`, and `clear` commands.
# ABOUTME: Edit one record's non-English metadata and save it back into the extra field.

from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from cnemeta.cli.options import db_option, load_metadata
from cnemeta.db.connection import DEFAULT_DB_PATH, open_store
from cnemeta.db.records import RecordStore
from cnemeta.metadata.languages import is_known_language
from cnemeta.metadata.model import CneMetadata, MetadataSaveError
from cnemeta.metadata.types import AUTHOR_NAME_PARTS, CneFieldName, FieldVariant

console = Console()

_FIELD_CHOICES = [name.value for name in CneFieldName]
_VARIANT_CHOICES = [variant.value for variant in FieldVariant]
_PART_CHOICES = [part.replace("_", "-") for part in AUTHOR_NAME_PARTS]


def _edit_and_save(
    db_path: Path | None, record_id: int, edit: Callable[[CneMetadata], None]
) -> CneMetadata:
    """Load a record's metadata, apply edit, and save it."""
    conn = open_store(db_path or DEFAULT_DB_PATH)
    try:
        metadata = load_metadata(RecordStore(conn), record_id, console)
        edit(metadata)
        try:
            metadata.save()
        except MetadataSaveError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1) from exc
    finally:
        conn.close()
    return metadata


@click.command("set")
@click.argument("record_id", type=int)
@click.argument("field", type=click.Choice(_FIELD_CHOICES))
@click.argument("variant", type=click.Choice(_VARIANT_CHOICES))
@click.argument("value")
@db_option
def set_variant(
    record_id: int, field: str, variant: str, value: str, db_path: Path | None
) -> None:
    """Set FIELD VARIANT to VALUE on a record. An empty VALUE clears it."""
    name = CneFieldName(field)
    kind = FieldVariant(variant)
    _edit_and_save(db_path, record_id, lambda m: m.set_field_variant(name, kind, value))

    if value.strip():
        console.print(f"Set [cyan]{field}.{variant}[/cyan] on record {record_id}.")
    else:
        console.print(f"Cleared [cyan]{field}.{variant}[/cyan] on record {record_id}.")


@click.command("lang")
@click.argument("record_id", type=int)
@click.argument("code")
@db_option
def lang(record_id: int, code: str, db_path: Path | None) -> None:
    """Set the original language CODE of a record. An empty CODE clears it."""
    if code.strip() and not is_known_language(code):
        console.print(f"[yellow]Warning: unrecognized language code '{escape(code)}'.[/yellow]")
    _edit_and_save(db_path, record_id, lambda m: m.set_original_language(code))
    console.print(f"Original language of record {record_id} is now '{escape(code.strip())}'.")


@click.command("author")
@click.argument("record_id", type=int)
@click.argument("index", type=click.IntRange(min=0))
@click.argument("part", type=click.Choice(_PART_CHOICES))
@click.argument("value")
@db_option
def author(record_id: int, index: int, part: str, value: str, db_path: Path | None) -> None:
    """Set name PART of the author at INDEX. An empty VALUE clears it."""
    attr = part.replace("-", "_")
    _edit_and_save(db_path, record_id, lambda m: m.set_author_name(index, attr, value))
    console.print(f"Updated author {index} ({part}) on record {record_id}.")


@click.command("clear")
@click.argument("record_id", type=int)
@db_option
def clear(record_id: int, db_path: Path | None) -> None:
    """Clear all field variants and the original language of a record.

    Author names are kept.
    """
    _edit_and_save(db_path, record_id, lambda m: m.clear())
    console.print(f"Cleared non-English metadata on record {record_id}.")
