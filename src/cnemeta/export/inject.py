# ABOUTME: Prepares an export copy of the extra field for BibLaTeX exporters.
# ABOUTME: Appends biblatex.<field>= lines built from the mapping table, respecting user overrides.

import logging
import re

from cnemeta.export.biblatex import BibLaTeXMapper
from cnemeta.metadata.grammar import DEFAULT_NAMESPACE, parse

logger = logging.getLogger(__name__)

BIBLATEX_PREFIX = "biblatex."

# User-written overrides, in either delimiter style.
_USER_FIELD_RE = re.compile(r"^\s*biblatex\.([A-Za-z]+)\s*[=:]")


def user_biblatex_fields(extra: str) -> set[str]:
    """Names of biblatex.* fields the user already wrote into the text."""
    names = set()
    for line in extra.split("\n"):
        match = _USER_FIELD_RE.match(line)
        if match:
            names.add(match.group(1))
    return names


def inject_biblatex_fields(extra: str | None, fields: dict[str, str]) -> str:
    """Append ``biblatex.<name>= <value>`` lines to the extra text.

    The ``=`` delimiter marks the value as raw LaTeX for the exporter. Fields
    the user already set in the text are left alone. The original text,
    recognized metadata lines included, is kept in front.
    """
    extra = extra or ""
    existing = user_biblatex_fields(extra)

    lines = [extra.rstrip("\n")] if extra.strip() else []
    for name, value in fields.items():
        if name in existing:
            logger.debug("Keeping user-provided biblatex.%s", name)
            continue
        lines.append(f"{BIBLATEX_PREFIX}{name}= {value}")
    return "\n".join(lines)


def export_extra(
    extra: str | None,
    mapper: BibLaTeXMapper | None = None,
    namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """Return the extra text enriched for BibLaTeX export.

    The text comes back unchanged when there is nothing to export.
    """
    mapper = mapper or BibLaTeXMapper()
    data = parse(extra, namespace)
    if not mapper.has_exportable_data(data):
        return extra or ""

    fields = mapper.map(data)
    logger.debug("Injecting BibLaTeX fields: %s", ", ".join(fields))
    return inject_biblatex_fields(extra, fields)
