# ABOUTME: Declarative mapping from non-English metadata to BibLaTeX fields.
# ABOUTME: Each table entry maps a dotted source path to a target field through a pure formatter.

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace

from cnemeta.metadata.types import CneFieldName, FieldVariant, MetadataObject

Formatter = Callable[[str], str]

LANGUAGE_PATH = "originalLanguage"

# Fields emitted together when any author has an original-script name.
# biblatex-chicago reads options={nametemplates=cjk} to switch name order.
NAME_TEMPLATE_FIELDS: dict[str, str] = {
    "options": "nametemplates=cjk",
    "ctitleaddon": "space",
    "ptitleaddon": "space",
}


def textzh(value: str) -> str:
    """Wrap original-script text in the \\textzh{} font switch."""
    return f"\\textzh{{{value}}}"


def identity(value: str) -> str:
    return value


# Every accepted source path, resolved once. Shared with the CSL projection.
SOURCE_PATHS: dict[str, tuple[CneFieldName, FieldVariant] | None] = {
    f"{name.value}.{variant.value}": (name, variant)
    for name in CneFieldName
    for variant in FieldVariant
}
SOURCE_PATHS[LANGUAGE_PATH] = None


@dataclass(frozen=True)
class FieldMapping:
    """One row of the export table.

    Attributes:
        source_path: Dotted path into the metadata, e.g. "title.original",
            or "originalLanguage".
        target_field: BibLaTeX field name.
        formatter: Pure text transform applied to the value.
        enabled: Disabled rows are skipped.
        stable: False marks fields not supported by every BibLaTeX style.
    """

    source_path: str
    target_field: str
    formatter: Formatter = identity
    enabled: bool = True
    stable: bool = True

    def __post_init__(self) -> None:
        if self.source_path not in SOURCE_PATHS:
            msg = f"unknown source path: {self.source_path!r}"
            raise ValueError(msg)

    def resolve(self, data: MetadataObject) -> str | None:
        """Look up the source value; missing data resolves to None."""
        target = SOURCE_PATHS[self.source_path]
        if target is None:
            return data.original_language or None
        name, variant = target
        return data.get_variant(name, variant) or None


DEFAULT_MAPPINGS: tuple[FieldMapping, ...] = (
    FieldMapping("title.original", "titleaddon", textzh),
    FieldMapping("title.english", "usere"),
    FieldMapping("journal.original", "journaltitleaddon", textzh),
    FieldMapping("booktitle.original", "booktitleaddon", textzh),
    FieldMapping("series.original", "seriestitleaddon", textzh, stable=False),
    FieldMapping("publisher.original", "publisheraddon", textzh, stable=False),
    FieldMapping("title.romanizedShort", "shorttitle", enabled=False, stable=False),
    FieldMapping(LANGUAGE_PATH, "origlanguage", enabled=False, stable=False),
)


def has_original_author_names(data: MetadataObject) -> bool:
    return any(entry.has_original_name for entry in data.authors.values())


class BibLaTeXMapper:
    """Projects a MetadataObject onto BibLaTeX field names.

    map() and has_exportable_data() share the same enabled-row scan and
    author check, so they always agree on whether there is anything to export.
    """

    def __init__(self, mappings: tuple[FieldMapping, ...] = DEFAULT_MAPPINGS) -> None:
        self._mappings = tuple(mappings)

    @property
    def mappings(self) -> tuple[FieldMapping, ...]:
        return self._mappings

    def _table_values(self, data: MetadataObject) -> Iterator[tuple[FieldMapping, str]]:
        for mapping in self._mappings:
            if not mapping.enabled:
                continue
            value = mapping.resolve(data)
            if value:
                yield mapping, value

    def map(self, data: MetadataObject) -> dict[str, str]:
        """Build the BibLaTeX field record for data.

        Later rows overwrite earlier ones that share a target field.
        """
        fields: dict[str, str] = {}
        for mapping, value in self._table_values(data):
            fields[mapping.target_field] = mapping.formatter(value)
        if has_original_author_names(data):
            fields.update(NAME_TEMPLATE_FIELDS)
        return fields

    def has_exportable_data(self, data: MetadataObject) -> bool:
        if has_original_author_names(data):
            return True
        return next(self._table_values(data), None) is not None

    def with_enabled(self, target_field: str, enabled: bool) -> "BibLaTeXMapper":
        """Return a mapper with every row for target_field toggled."""
        if not any(m.target_field == target_field for m in self._mappings):
            raise KeyError(target_field)
        return BibLaTeXMapper(
            tuple(
                replace(m, enabled=enabled) if m.target_field == target_field else m
                for m in self._mappings
            )
        )

    def stable_only(self) -> "BibLaTeXMapper":
        """Return a mapper with experimental rows disabled."""
        return BibLaTeXMapper(
            tuple(m if m.stable else replace(m, enabled=False) for m in self._mappings)
        )


_DEFAULT_MAPPER = BibLaTeXMapper()


def map_to_biblatex(data: MetadataObject) -> dict[str, str]:
    return _DEFAULT_MAPPER.map(data)


def has_biblatex_data(data: MetadataObject) -> bool:
    return _DEFAULT_MAPPER.has_exportable_data(data)
