# ABOUTME: CneMetadata model owning one record's non-English metadata.
# ABOUTME: Loads from and saves to the record's extra field through a RecordAccessor.

import copy
import logging
import threading
from typing import Any, Protocol, runtime_checkable

from cnemeta.metadata.grammar import DEFAULT_NAMESPACE, parse, serialize
from cnemeta.metadata.types import (
    AUTHOR_NAME_PARTS,
    AUTHOR_OPTIONS,
    CANONICAL_FIELDS,
    AuthorEntry,
    CneFieldName,
    FieldVariant,
    MetadataObject,
)

logger = logging.getLogger(__name__)

EXTRA_FIELD = "extra"


class MetadataSaveError(Exception):
    """Raised when metadata could not be written back to the record."""


@runtime_checkable
class RecordAccessor(Protocol):
    """Protocol for the host record that owns the extra field."""

    def get_field(self, name: str) -> str: ...

    def set_field(self, name: str, value: str) -> None: ...

    def save_transaction(self) -> None: ...


class CneMetadata:
    """Non-English metadata for a single record.

    ``data`` is the in-memory source of truth between load and save. Field
    variants should be changed through set_field_variant(), which keeps empty
    strings out of the object.
    """

    def __init__(
        self,
        record: RecordAccessor,
        *,
        field_name: str = EXTRA_FIELD,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self._record = record
        self._field_name = field_name
        self._namespace = namespace
        # _snapshot_lock orders snapshots; _save_lock serializes writes.
        self._snapshot_lock = threading.Lock()
        self._save_lock = threading.Lock()
        self._save_seq = 0
        self._committed_seq = 0
        self.data = self.load()

    @property
    def record(self) -> RecordAccessor:
        return self._record

    def _read_text(self) -> str:
        return self._record.get_field(self._field_name) or ""

    def load(self) -> MetadataObject:
        """Parse the record's extra field.

        Returns an empty MetadataObject if the field cannot be read, so
        callers can still show an editable empty state.
        """
        try:
            text = self._read_text()
        except Exception as exc:
            logger.warning("Could not read %s field, using empty metadata: %s", self._field_name, exc)
            return MetadataObject()
        return parse(text, self._namespace)

    def reload(self) -> None:
        """Discard in-memory edits and re-read the record."""
        self.data = self.load()

    def save(self) -> None:
        """Write the current metadata back into the record's extra field.

        The data is snapshotted when save() is called. Opaque lines already
        in the field are kept. Concurrent calls are serialized, and a save
        that reaches the record after a later call has committed is skipped,
        so the most recent call's data is what ends up stored.

        Raises:
            MetadataSaveError: If reading, writing, or committing the record fails.
        """
        with self._snapshot_lock:
            self._save_seq += 1
            seq = self._save_seq
            snapshot = copy.deepcopy(self.data)

        with self._save_lock:
            if seq < self._committed_seq:
                logger.debug("Skipping save %d, superseded by save %d", seq, self._committed_seq)
                return
            try:
                current = self._read_text()
                updated = serialize(current, snapshot, self._namespace)
                self._record.set_field(self._field_name, updated)
                self._record.save_transaction()
            except Exception as exc:
                logger.warning("Saving non-English metadata failed: %s", exc)
                raise MetadataSaveError(f"Failed to save metadata: {exc}") from exc
            self._committed_seq = seq
        logger.debug("Saved non-English metadata (%d recognized keys)", len(snapshot.to_dict()))

    # Field accessors

    def get_field_variant(self, field: CneFieldName, variant: FieldVariant) -> str | None:
        return self.data.get_variant(field, variant)

    def set_field_variant(self, field: CneFieldName, variant: FieldVariant, value: str) -> None:
        """Set one variant; an empty value clears it."""
        self.data.set_variant(field, variant, value)

    def get_original_language(self) -> str | None:
        return self.data.original_language

    def set_original_language(self, value: str | None) -> None:
        self.data.set_language(value)

    def get_author(self, index: int) -> AuthorEntry | None:
        return self.data.authors.get(index)

    def set_author_name(self, index: int, part: str, value: str | None) -> None:
        """Set an author name part such as ``last_original``; empty clears it."""
        if part not in AUTHOR_NAME_PARTS:
            raise ValueError(f"unknown author name part: {part}")
        self.data.set_author_value(index, part, value)

    def set_author_option(self, index: int, option: str, value: bool | None) -> None:
        if option not in AUTHOR_OPTIONS:
            raise ValueError(f"unknown author option: {option}")
        self.data.set_author_value(index, option, value)

    def remove_author(self, index: int) -> None:
        """Drop an author entry without renumbering the others."""
        self.data.authors.pop(index, None)

    # Derived queries

    def has_field_data(self, field: CneFieldName) -> bool:
        variants = self.data.fields.get(field)
        return bool(variants)

    def get_filled_field_count(self) -> int:
        """Number of canonical fields with at least one variant set."""
        return sum(1 for name in CANONICAL_FIELDS if self.has_field_data(name))

    def has_data(self) -> bool:
        if self.data.original_language:
            return True
        if any(self.has_field_data(name) for name in CANONICAL_FIELDS):
            return True
        return any(entry.has_original_name for entry in self.data.authors.values())

    def clear(self) -> None:
        """Clear the canonical fields and the language.

        Author entries are kept: they mirror the host's creator list, which
        this model does not own.
        """
        for name in CANONICAL_FIELDS:
            self.data.fields.pop(name, None)
        self.data.original_language = None

    def to_dict(self) -> dict[str, Any]:
        return self.data.to_dict()
