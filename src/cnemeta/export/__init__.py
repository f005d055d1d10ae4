# ABOUTME: Export package: BibLaTeX field mapping, CSL variables, and extra-field injection.
# ABOUTME: Consumed by citation exporters; never writes back to the record.

from cnemeta.export.biblatex import (
    DEFAULT_MAPPINGS,
    BibLaTeXMapper,
    FieldMapping,
    has_biblatex_data,
    map_to_biblatex,
)
from cnemeta.export.csl import inject_csl_variables, map_to_csl
from cnemeta.export.inject import export_extra, inject_biblatex_fields

__all__ = [
    "DEFAULT_MAPPINGS",
    "BibLaTeXMapper",
    "FieldMapping",
    "export_extra",
    "has_biblatex_data",
    "inject_biblatex_fields",
    "inject_csl_variables",
    "map_to_biblatex",
    "map_to_csl",
]
