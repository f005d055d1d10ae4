# ABOUTME: Core data structures for non-English citation metadata.
# ABOUTME: MetadataObject is the interchange format between the extra-field grammar, model, and export.

import re
from dataclasses import dataclass, field
from dataclasses import fields as dataclass_fields
from enum import Enum
from typing import Any

_LINE_BREAK_RE = re.compile(r"\s*[\r\n]+\s*")


class FieldVariant(Enum):
    """The four textual representations stored for a field."""

    ORIGINAL = "original"
    ROMANIZED = "romanized"
    ROMANIZED_SHORT = "romanizedShort"
    ENGLISH = "english"


class CneFieldName(Enum):
    """Bibliographic slots that can carry non-English variants.

    The first four are the canonical fields edited by users; SERIES and
    BOOKTITLE are read by the BibLaTeX export.
    """

    TITLE = "title"
    CONTAINER_TITLE = "container-title"
    PUBLISHER = "publisher"
    JOURNAL = "journal"
    SERIES = "series"
    BOOKTITLE = "booktitle"


CANONICAL_FIELDS: tuple[CneFieldName, ...] = (
    CneFieldName.TITLE,
    CneFieldName.CONTAINER_TITLE,
    CneFieldName.PUBLISHER,
    CneFieldName.JOURNAL,
)

# Author name parts in serialization order.
AUTHOR_NAME_PARTS: tuple[str, ...] = (
    "last_romanized",
    "first_romanized",
    "last_original",
    "first_original",
)

AUTHOR_OPTIONS: tuple[str, ...] = ("original_spacing", "force_comma")


def normalize_value(value: str | None) -> str | None:
    """Collapse line breaks and trim; return None for empty text."""
    if value is None:
        return None
    cleaned = _LINE_BREAK_RE.sub(" ", value).strip()
    return cleaned or None


@dataclass
class VariantSet:
    """Variant values for one field. Absent variants have no key."""

    values: dict[FieldVariant, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned = {variant: normalize_value(value) for variant, value in self.values.items()}
        self.values = {variant: value for variant, value in cleaned.items() if value}

    def get(self, variant: FieldVariant) -> str | None:
        return self.values.get(variant)

    def set(self, variant: FieldVariant, value: str | None) -> None:
        """Set a variant; empty or blank text removes it."""
        cleaned = normalize_value(value)
        if cleaned is None:
            self.values.pop(variant, None)
        else:
            self.values[variant] = cleaned

    def items(self) -> list[tuple[FieldVariant, str]]:
        """Present variants in FieldVariant order."""
        return [(v, self.values[v]) for v in FieldVariant if v in self.values]

    def __bool__(self) -> bool:
        return bool(self.values)


@dataclass
class AuthorEntry:
    """Per-author name variants and rendering options."""

    last_romanized: str | None = None
    first_romanized: str | None = None
    last_original: str | None = None
    first_original: str | None = None
    original_spacing: bool | None = None
    force_comma: bool | None = None

    def __post_init__(self) -> None:
        for part in AUTHOR_NAME_PARTS:
            setattr(self, part, normalize_value(getattr(self, part)))

    @property
    def has_original_name(self) -> bool:
        return bool(self.last_original or self.first_original)

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in dataclass_fields(self))


@dataclass
class MetadataObject:
    """All non-English metadata stored for one record.

    Authors live in a sparse map keyed by their position in the host's
    creator list; gaps are legal and are never compacted. Construction and
    the mutators both normalize values and prune empty variant sets and
    author entries, so two objects holding the same values compare equal.
    """

    fields: dict[CneFieldName, VariantSet] = field(default_factory=dict)
    original_language: str | None = None
    authors: dict[int, AuthorEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.original_language = normalize_value(self.original_language)
        self.fields = {name: variants for name, variants in self.fields.items() if variants}
        self.authors = {
            index: entry for index, entry in self.authors.items() if not entry.is_empty
        }

    def get_variant(self, name: CneFieldName, variant: FieldVariant) -> str | None:
        variants = self.fields.get(name)
        return variants.get(variant) if variants else None

    def set_variant(self, name: CneFieldName, variant: FieldVariant, value: str | None) -> None:
        variants = self.fields.setdefault(name, VariantSet())
        variants.set(variant, value)
        if not variants:
            del self.fields[name]

    def set_language(self, value: str | None) -> None:
        self.original_language = normalize_value(value)

    def set_author_value(self, index: int, attr: str, value: str | bool | None) -> None:
        """Set one author attribute, creating or pruning the entry as needed."""
        if index < 0:
            raise ValueError(f"author index must be non-negative, got {index}")
        if attr in AUTHOR_NAME_PARTS:
            value = normalize_value(value)  # type: ignore[arg-type]
        elif attr not in AUTHOR_OPTIONS:
            raise ValueError(f"unknown author attribute: {attr}")

        entry = self.authors.setdefault(index, AuthorEntry())
        setattr(entry, attr, value)
        if entry.is_empty:
            del self.authors[index]

    @property
    def is_empty(self) -> bool:
        return not self.fields and self.original_language is None and not self.authors

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible view, omitting absent values."""
        result: dict[str, Any] = {}
        if self.original_language:
            result["originalLanguage"] = self.original_language
        for name in CneFieldName:
            variants = self.fields.get(name)
            if variants:
                result[name.value] = {v.value: text for v, text in variants.items()}
        if self.authors:
            result["authors"] = {
                index: {
                    f.name: getattr(entry, f.name)
                    for f in dataclass_fields(entry)
                    if getattr(entry, f.name) is not None
                }
                for index, entry in sorted(self.authors.items())
            }
        return result
