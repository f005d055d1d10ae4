# ABOUTME: Metadata package: data types, extra-field grammar, and the per-record model.
# ABOUTME: Exports the MetadataObject aggregate and the parse/serialize pair used throughout cnemeta.

from cnemeta.metadata.grammar import parse, serialize
from cnemeta.metadata.model import CneMetadata, MetadataSaveError, RecordAccessor
from cnemeta.metadata.types import (
    CANONICAL_FIELDS,
    AuthorEntry,
    CneFieldName,
    FieldVariant,
    MetadataObject,
    VariantSet,
)

__all__ = [
    "CANONICAL_FIELDS",
    "AuthorEntry",
    "CneFieldName",
    "CneMetadata",
    "FieldVariant",
    "MetadataObject",
    "MetadataSaveError",
    "RecordAccessor",
    "VariantSet",
    "parse",
    "serialize",
]
