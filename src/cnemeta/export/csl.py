# ABOUTME: Projects non-English metadata onto CSL-JSON variables named cne-<field>-<variant>.
# ABOUTME: Lets CSL styles read the variants without relying on the host's own extra-field parser.

import logging
from typing import Any

from cnemeta.export.biblatex import SOURCE_PATHS
from cnemeta.metadata.grammar import DEFAULT_NAMESPACE, VARIANT_TOKENS, parse
from cnemeta.metadata.types import CneFieldName, FieldVariant, MetadataObject

logger = logging.getLogger(__name__)

CSL_PREFIX = "cne"

# Fields the CSL styles reference; booktitle is BibLaTeX-only.
CSL_FIELDS: tuple[CneFieldName, ...] = (
    CneFieldName.TITLE,
    CneFieldName.JOURNAL,
    CneFieldName.PUBLISHER,
    CneFieldName.SERIES,
    CneFieldName.CONTAINER_TITLE,
)


def csl_variable_name(name: CneFieldName, variant: FieldVariant) -> str:
    """CSL variable for a field variant, e.g. "cne-title-romanized-short"."""
    return f"{CSL_PREFIX}-{name.value}-{VARIANT_TOKENS[variant]}"


def map_to_csl(data: MetadataObject) -> dict[str, str]:
    """Build the CSL variables for every filled variant of the CSL fields."""
    variables: dict[str, str] = {}
    for target in SOURCE_PATHS.values():
        if target is None:
            continue
        name, variant = target
        if name not in CSL_FIELDS:
            continue
        value = data.get_variant(name, variant)
        if value:
            variables[csl_variable_name(name, variant)] = value
    return variables


def inject_csl_variables(
    csl_item: dict[str, Any],
    extra: str | None,
    namespace: str = DEFAULT_NAMESPACE,
) -> dict[str, Any]:
    """Return a copy of csl_item with the extra field's variants added.

    Variables already on the item with the same name are replaced.
    """
    variables = map_to_csl(parse(extra, namespace))
    if variables:
        logger.debug("Injecting CSL variables: %s", ", ".join(variables))
    return {**csl_item, **variables}
